"""
Vector
======
One-dimensional numeric container with fixed (n > 0) or dynamic (n == 0)
length, row/column orientation, and elementwise / scalar / inner / cross
arithmetic.

Construction:
    Vector(dtype=np.int32, n=3)              zeros, fixed length 3
    Vector()                                 empty, dynamic
    Vector.filled(4, 3.14)                   [3.14, 3.14, 3.14, 3.14]
    Vector([1, 2, 3], n=3)                   list / copy from any sequence
    Vector.of(1, 2, 3)                       same, from positional values
    Vector.move_from(values)                 takes the elements, empties the source

Arithmetic returns a new Vector of the common element type:
    a + b, a - b          equal lengths
    a * b, a / b          equal lengths, or either side of length 1
    a + 2, a * 2.5, ...   scalar, every element
    a | b                 inner product (scalar)
    a & b                 cross product (3D only)

Named-method forms: add, subtract, elementwise_multiply, elementwise_divide,
scalar_add, scalar_subtract, scalar_multiply, scalar_divide, inner, cross.

Whenever a constructor or assignment converts elements to a different type,
the conversion policy decides what happens (see tensor.config).
"""

import logging
from collections.abc import MutableSequence, Sequence
from operator import index as as_index
from typing import Any, Iterator, List, Optional, Union

import numpy as np

from tensor.config import ConversionPolicy, get_conversion_policy, validate_orient
from tensor.dtypes import (
    DTypeLike,
    common_type,
    convert,
    convert_scalar,
    infer_dtype,
    is_literal,
    is_scalar,
    resolve_dtype,
    source_array,
)
from tensor.errors import ArityError, LengthMismatchError
from tensor.storage import Storage, make_storage

logger = logging.getLogger(__name__)

Policy = Optional[Union[ConversionPolicy, str]]


def _is_operand(value: Any) -> bool:
    """Sequences that arithmetic accepts as vector operands."""
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Vector, np.ndarray, Sequence))


def _vacate(source: Any) -> None:
    """Leave a moved-from foreign sequence valid but empty (or zeroed)."""
    if isinstance(source, Vector):
        source._storage.reset()
    elif isinstance(source, MutableSequence):
        source.clear()
    elif isinstance(source, np.ndarray) and source.flags.writeable:
        source[...] = 0


def _truncating_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Integer division rounding toward zero."""
    if np.any(b == 0):
        raise ZeroDivisionError("integer vector division by zero")
    quotient = np.floor_divide(a, b)
    remainder = np.remainder(a, b)
    toward_zero = (remainder != 0) & ((a < 0) != (b < 0))
    return quotient + toward_zero.astype(quotient.dtype)


def _divide(a: np.ndarray, b: np.ndarray, dtype: np.dtype) -> np.ndarray:
    if np.issubdtype(dtype, np.integer):
        return _truncating_divide(a, b)
    return np.true_divide(a, b)


class Vector:
    """
    Numeric vector with fixed or dynamic length.

    Parameters
    ----------
    values : sequence, optional
        Initial elements (list, tuple, ndarray, Vector, ...). Copied.
        None gives an empty (dynamic) or zero-filled (fixed) vector.
    dtype : dtype-like, optional
        Element type. Defaults to the element type of `values`, or the
        configured default when there are no values.
    n : int
        0 for a growable vector; otherwise the fixed length. A fixed
        vector rejects any source whose length is not exactly n.
    orient : {'r', 'c'}, optional
        Row or column tag. Informational; defaults to 'c'.
    policy : ConversionPolicy or str, optional
        What to do when elements must change type. Defaults to the
        configured policy at the time of each operation.
    """

    LABEL = 'vector'

    # ndarray op Vector defers to Vector's reflected operators
    __array_ufunc__ = None
    __hash__ = None

    def __init__(
        self,
        values: Optional[Any] = None,
        dtype: DTypeLike = None,
        n: int = 0,
        orient: Optional[str] = None,
        policy: Policy = None,
    ):
        self._orient = validate_orient(orient)
        self._policy = None if policy is None else get_conversion_policy(policy)

        if values is None:
            self._storage = make_storage(resolve_dtype(dtype), n)
            return

        array = source_array(values)
        self._storage = make_storage(infer_dtype(array, dtype), n)
        self._storage.load(self._prepare(array, 'copy constructor', is_literal(values)))

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, *values: Any, **kwargs: Any) -> 'Vector':
        """List constructor: Vector.of(1, 2, 3)."""
        return cls(list(values), **kwargs)

    @classmethod
    def from_sequence(cls, values: Any, **kwargs: Any) -> 'Vector':
        """Copy constructor from any ordered sequence. The source is untouched."""
        return cls(values, **kwargs)

    @classmethod
    def move_from(cls, source: Any, dtype: DTypeLike = None, **kwargs: Any) -> 'Vector':
        """
        Move constructor. Takes the elements of source and leaves it empty.

        A Vector source of the same element type hands over its buffer
        without copying; lists are cleared; writeable ndarrays are zeroed.
        """
        if dtype is None:
            array = source_array(source)
            dtype = array.dtype if array.size else None
        obj = cls(dtype=dtype, **kwargs)
        obj._move_in(source, 'move constructor')
        return obj

    @classmethod
    def filled(
        cls,
        length: int,
        fill: Any,
        dtype: DTypeLike = None,
        n: int = 0,
        orient: Optional[str] = None,
        policy: Policy = None,
    ) -> 'Vector':
        """
        Fill constructor: `length` copies of `fill`.

        For a fixed vector, length may not exceed n; slots past `length`
        stay zero.
        """
        length = as_index(length)
        if length < 0:
            raise ValueError(f"fill length must be >= 0, got {length}")
        if n and length > n:
            raise LengthMismatchError(
                f"fixed {cls.LABEL} fill constructor requires length <= {n}, got {length}",
                expected=n,
                actual=length,
            )
        if not is_scalar(fill):
            raise TypeError(f"fill value must be a scalar, got {type(fill).__name__}")

        source = source_array([fill])
        target = resolve_dtype(dtype) if dtype is not None else source.dtype
        obj = cls(dtype=target, n=n, orient=orient, policy=policy)
        value = convert(
            source, target, obj._policy, f"{cls.LABEL} fill constructor",
            literal=not isinstance(fill, (np.generic, np.ndarray)),
        )[0]

        if obj.is_fixed:
            obj._storage.fill_prefix(length, value)
        else:
            obj._storage.load(np.full(length, value, dtype=target))
        return obj

    @classmethod
    def _from_storage(cls, storage: Storage, orient: str, policy: Policy) -> 'Vector':
        obj = cls.__new__(cls)
        obj._orient = orient
        obj._policy = policy
        obj._storage = storage
        return obj

    # ------------------------------------------------------------------
    # Validation hooks (coordinate types override these)
    # ------------------------------------------------------------------

    def _validate(self, array: np.ndarray) -> None:
        """Check converted values before they are stored."""

    def _validate_item(self, index: int, value: np.generic) -> None:
        """Check a single converted element before it is written."""

    def _prepare(self, array: np.ndarray, context: str, literal: bool = False) -> np.ndarray:
        """Convert and check a source. Nothing is mutated here."""
        if self.is_fixed and len(array) != len(self._storage):
            raise LengthMismatchError(
                f"{self.LABEL} {context} requires exactly {len(self._storage)} elements, "
                f"got {len(array)}",
                expected=len(self._storage),
                actual=len(array),
            )
        array = convert(
            array, self.dtype, self._policy, f"{self.LABEL} {context}", literal=literal,
        )
        self._validate(array)
        return array

    # ------------------------------------------------------------------
    # Assignment
    # ------------------------------------------------------------------

    def assign(self, values: Any) -> 'Vector':
        """Copy assignment. Fixed vectors need an exact length match."""
        array = source_array(values)
        self._storage.load(self._prepare(array, 'copy assignment', is_literal(values)))
        return self

    def move_assign(self, source: Any) -> 'Vector':
        """Move assignment. The source is left empty (or zeroed)."""
        self._move_in(source, 'move assignment')
        return self

    def _move_in(self, source: Any, context: str) -> None:
        if source is self:
            return
        array = self._prepare(source_array(source), context, is_literal(source))

        if isinstance(source, Vector) and source.dtype == self.dtype:
            buffer = source._storage.release()
            self._storage.adopt(buffer)
            logger.debug("%s %s: took over buffer of %d elements", self.LABEL, context, len(buffer))
            return

        self._storage.load(array)
        _vacate(source)

    # ------------------------------------------------------------------
    # Growth (dynamic only)
    # ------------------------------------------------------------------

    def _require_dynamic(self, operation: str) -> None:
        if self.is_fixed:
            raise LengthMismatchError(
                f"fixed {self.LABEL} of length {len(self)} does not support {operation}",
                expected=len(self),
                actual=None,
            )

    def append(self, value: Any) -> None:
        self._require_dynamic('append')
        converted = convert_scalar(value, self.dtype, self._policy, f"{self.LABEL} append")
        self._storage.append(converted)

    def extend(self, values: Any) -> None:
        self._require_dynamic('extend')
        array = convert(
            source_array(values), self.dtype, self._policy, f"{self.LABEL} extend",
            literal=is_literal(values),
        )
        self._storage.extend(array)

    def clear(self) -> None:
        self._require_dynamic('clear')
        self._storage.clear()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _normalize_index(self, index: Any) -> int:
        position = as_index(index)
        length = len(self._storage)
        if position < 0:
            position += length
        if not 0 <= position < length:
            raise IndexError(f"{self.LABEL} index {index} out of range for length {length}")
        return position

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(
                self._storage.view()[index], dtype=self.dtype, orient=self._orient, policy=self._policy,
            )
        return self._storage[self._normalize_index(index)]

    def __setitem__(self, index, value) -> None:
        position = self._normalize_index(index)
        converted = convert_scalar(value, self.dtype, self._policy, f"{self.LABEL} element write")
        self._validate_item(position, converted)
        self._storage[position] = converted

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._storage)

    def __array__(self, dtype=None, copy=None):
        array = self._storage.view()
        if dtype is not None and np.dtype(dtype) != array.dtype:
            return array.astype(dtype)
        if copy:
            return array.copy()
        return array

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    @property
    def n(self) -> int:
        """Fixed length, or 0 for a dynamic vector."""
        return len(self._storage) if self._storage.is_fixed else 0

    @property
    def is_fixed(self) -> bool:
        return self._storage.is_fixed

    @property
    def orient(self) -> str:
        return self._orient

    @property
    def is_row(self) -> bool:
        return self._orient == 'r'

    @property
    def is_col(self) -> bool:
        return self._orient == 'c'

    @property
    def policy(self) -> ConversionPolicy:
        return get_conversion_policy(self._policy)

    def copy(self) -> 'Vector':
        """Independent copy with the same type, dtype, length mode and orientation."""
        return type(self)._from_storage(self._storage.copy(), self._orient, self._policy)

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'Vector':
        return self.copy()

    def to_numpy(self) -> np.ndarray:
        """Independent ndarray of the elements."""
        return np.array(self._storage.view(), copy=True)

    def tolist(self) -> List[Any]:
        return self._storage.view().tolist()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _values(self, dtype: np.dtype) -> np.ndarray:
        return self._storage.view().astype(dtype)

    def _result(self, data: np.ndarray) -> 'Vector':
        """Wrap a freshly computed array. Always a plain Vector."""
        n = len(data) if self.is_fixed and len(data) else 0
        storage = make_storage(data.dtype, n)
        storage.adopt(data)
        return Vector._from_storage(storage, self._orient, self._policy)

    def _require_equal_length(self, other: np.ndarray, operation: str) -> None:
        if len(other) != len(self):
            raise LengthMismatchError(
                f"{operation} requires vectors of equal length, got {len(self)} and {len(other)}",
                expected=len(self),
                actual=len(other),
            )

    def _require_broadcastable(self, other: np.ndarray, operation: str) -> None:
        if len(other) != len(self) and len(other) != 1 and len(self) != 1:
            raise LengthMismatchError(
                f"{operation} requires vectors of equal length or a length-1 operand, "
                f"got {len(self)} and {len(other)}",
                expected=len(self),
                actual=len(other),
            )

    def add(self, other: Any) -> 'Vector':
        """Elementwise sum. No broadcasting: lengths must match."""
        b = source_array(other)
        self._require_equal_length(b, 'elementwise addition')
        dtype = common_type(self.dtype, b.dtype)
        return self._result(np.add(self._values(dtype), b.astype(dtype)))

    def subtract(self, other: Any) -> 'Vector':
        """Elementwise difference. No broadcasting: lengths must match."""
        b = source_array(other)
        self._require_equal_length(b, 'elementwise subtraction')
        dtype = common_type(self.dtype, b.dtype)
        return self._result(np.subtract(self._values(dtype), b.astype(dtype)))

    def elementwise_multiply(self, other: Any) -> 'Vector':
        """Elementwise product; a length-1 operand on either side is broadcast."""
        b = source_array(other)
        self._require_broadcastable(b, 'elementwise multiplication')
        dtype = common_type(self.dtype, b.dtype)
        return self._result(np.multiply(self._values(dtype), b.astype(dtype)))

    def elementwise_divide(self, other: Any) -> 'Vector':
        """Elementwise quotient; broadcasting as elementwise_multiply."""
        b = source_array(other)
        self._require_broadcastable(b, 'elementwise division')
        dtype = common_type(self.dtype, b.dtype)
        return self._result(_divide(self._values(dtype), b.astype(dtype), dtype))

    def _scalar_operands(self, scalar: Any):
        if not is_scalar(scalar):
            raise TypeError(f"Expected a scalar, got {type(scalar).__name__}")
        value = np.asarray(scalar)
        dtype = common_type(self.dtype, value.dtype)
        return self._values(dtype), value.astype(dtype), dtype

    def scalar_add(self, scalar: Any) -> 'Vector':
        a, s, _ = self._scalar_operands(scalar)
        return self._result(np.add(a, s))

    def scalar_subtract(self, scalar: Any) -> 'Vector':
        a, s, _ = self._scalar_operands(scalar)
        return self._result(np.subtract(a, s))

    def scalar_multiply(self, scalar: Any) -> 'Vector':
        a, s, _ = self._scalar_operands(scalar)
        return self._result(np.multiply(a, s))

    def scalar_divide(self, scalar: Any) -> 'Vector':
        a, s, dtype = self._scalar_operands(scalar)
        return self._result(_divide(a, s, dtype))

    def inner(self, other: Any) -> np.generic:
        """Sum of pairwise products, as a scalar of the common type."""
        b = source_array(other)
        self._require_equal_length(b, 'inner product')
        dtype = common_type(self.dtype, b.dtype)
        return np.sum(self._values(dtype) * b.astype(dtype), dtype=dtype)

    def cross(self, other: Any) -> 'Vector':
        """3D cross product. Any other length on either side is an ArityError."""
        b = source_array(other)
        if len(self) != 3 or len(b) != 3:
            raise ArityError(
                f"cross product requires two 3D vectors, got lengths {len(self)} and {len(b)}",
                expected=3,
                actual=len(b) if len(self) == 3 else len(self),
            )
        dtype = common_type(self.dtype, b.dtype)
        x1, y1, z1 = self._values(dtype)
        x2, y2, z2 = b.astype(dtype)
        return self._result(np.array([
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
        ], dtype=dtype))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if is_scalar(other):
            return self.scalar_add(other)
        if _is_operand(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if is_scalar(other):
            return self.scalar_subtract(other)
        if _is_operand(other):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other):
        if _is_operand(other):
            return Vector(other, orient=self._orient, policy=self._policy).subtract(self)
        return NotImplemented

    def __mul__(self, other):
        if is_scalar(other):
            return self.scalar_multiply(other)
        if _is_operand(other):
            return self.elementwise_multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if is_scalar(other):
            return self.scalar_divide(other)
        if _is_operand(other):
            return self.elementwise_divide(other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_operand(other):
            return Vector(other, orient=self._orient, policy=self._policy).elementwise_divide(self)
        return NotImplemented

    def __or__(self, other):
        if _is_operand(other):
            return self.inner(other)
        return NotImplemented

    def __ror__(self, other):
        return self.__or__(other)

    def __and__(self, other):
        if _is_operand(other):
            return self.cross(other)
        return NotImplemented

    def __rand__(self, other):
        if _is_operand(other):
            return Vector(other, orient=self._orient, policy=self._policy).cross(self)
        return NotImplemented

    def __eq__(self, other):
        if is_scalar(other) or not _is_operand(other):
            return NotImplemented
        try:
            b = source_array(other)
        except (TypeError, ValueError):
            return False
        return len(b) == len(self) and bool(np.all(self._storage.view() == b))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return '[' + ', '.join(str(value) for value in self._storage) + ']'

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.tolist()}, dtype={self.dtype}, "
            f"n={self.n}, orient={self._orient!r})"
        )


def render(vector: Vector) -> str:
    """Human-readable form: [e0, e1, ..., en-1]."""
    return str(vector)
