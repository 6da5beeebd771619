"""
Fixed-arity coordinate vectors.

A coordinate type is a Vector whose length is pinned to its number of named
components. Each name is a read/write view onto one element of the shared
storage, so `c.x = 5` and `c[0] = 5` are the same write.

Subclasses declare:

    FIELDS   component names, in storage order
    LABEL    name used in error and conversion messages

and may override Vector._validate / Vector._validate_item to add invariants.
Arithmetic is inherited unchanged and returns plain Vectors.
"""

from typing import Any, Dict, Optional, Tuple

from tensor.dtypes import DTypeLike, infer_dtype, is_literal, is_scalar, source_array
from tensor.vector import Policy, Vector


class _Field:
    """Named accessor onto one storage element."""

    def __init__(self, index: int, name: str):
        self.index = index
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj[self.index]

    def __set__(self, obj, value) -> None:
        obj[self.index] = value


class _Unavailable:
    """Entry point that makes no sense for a fixed-arity type."""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, objtype=None):
        owner = objtype if objtype is not None else type(obj)
        raise AttributeError(
            f"{owner.__name__} has a fixed number of components; '{self.name}' is not available"
        )


class CoordinateVector(Vector):
    """
    Base for Cartesian, Spherical and Geodetic.

    Cls()                         all components zero
    Cls(a, b, ...)                one scalar per component
    Cls(seq) / Cls.from_sequence  copy from a sequence of exactly len(FIELDS)
    Cls.move_from(seq)            move from a sequence of exactly len(FIELDS)
    """

    FIELDS: Tuple[str, ...] = ()
    LABEL = 'coordinate'

    # length is fixed by FIELDS, never chosen by the caller
    filled = _Unavailable()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'FIELDS' in cls.__dict__:
            for index, name in enumerate(cls.FIELDS):
                setattr(cls, name, _Field(index, name))

    def __init__(
        self,
        *components: Any,
        dtype: DTypeLike = None,
        orient: Optional[str] = None,
        policy: Policy = None,
    ):
        if not self.FIELDS:
            raise TypeError(f"{type(self).__name__} declares no FIELDS")

        if not components:
            super().__init__(dtype=dtype, n=len(self.FIELDS), orient=orient, policy=policy)
            self._validate(self._storage.view())
            return

        if len(components) == 1 and not is_scalar(components[0]):
            values, context = components[0], 'copy constructor'
        else:
            values, context = list(components), 'list constructor'

        array = source_array(values)
        super().__init__(
            dtype=infer_dtype(array, dtype), n=len(self.FIELDS), orient=orient, policy=policy,
        )
        self._storage.load(self._prepare(array, context, is_literal(values)))

    def as_dict(self) -> Dict[str, Any]:
        return dict(zip(self.FIELDS, self.tolist()))

    def __repr__(self) -> str:
        parts = ', '.join(f"{name}={value}" for name, value in zip(self.FIELDS, self._storage))
        return f"{type(self).__name__}({parts})"
