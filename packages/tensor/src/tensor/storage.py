"""
Element storage for Vector.

Two variants behind one interface:

    FixedStorage    exactly n elements in one preallocated array.
                    Zero-initialised. Never grows or shrinks.
    DynamicStorage  growable buffer with capacity doubling.
                    Starts empty.

Vector's construction and assignment logic is written once against Storage;
make_storage(dtype, n) picks the variant (n == 0 means dynamic).

Storage never converts element types. Callers hand it arrays that already
have its dtype.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator

import numpy as np

from tensor.errors import LengthMismatchError

logger = logging.getLogger(__name__)

MIN_CAPACITY = 4


class Storage(ABC):
    """Shared interface of the fixed and dynamic variants."""

    def __init__(self, dtype: np.dtype):
        self.dtype = np.dtype(dtype)

    @property
    @abstractmethod
    def is_fixed(self) -> bool:
        ...

    @abstractmethod
    def view(self) -> np.ndarray:
        """Read-only view of the live elements."""

    @abstractmethod
    def load(self, array: np.ndarray) -> None:
        """Replace contents with a copy of array."""

    @abstractmethod
    def adopt(self, array: np.ndarray) -> None:
        """Take ownership of array's buffer without copying."""

    @abstractmethod
    def append(self, value: Any) -> None:
        ...

    @abstractmethod
    def extend(self, array: np.ndarray) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def reset(self) -> None:
        """Return to the valid-but-empty state left behind by a move."""

    def release(self) -> np.ndarray:
        """Hand over the live elements' buffer and reset."""
        buffer = self._data[:len(self)]
        self.reset()
        return buffer

    @abstractmethod
    def copy(self) -> 'Storage':
        ...

    def __len__(self) -> int:
        return len(self.view())

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self.view())

    def __getitem__(self, index):
        return self.view()[index]

    @abstractmethod
    def __setitem__(self, index: int, value: Any) -> None:
        ...


class FixedStorage(Storage):

    def __init__(self, dtype: np.dtype, n: int):
        super().__init__(dtype)
        if n <= 0:
            raise ValueError(f"Fixed storage needs a positive length, got {n}")
        self.n = n
        self._data = np.zeros(n, dtype=self.dtype)

    @property
    def is_fixed(self) -> bool:
        return True

    def view(self) -> np.ndarray:
        out = self._data.view()
        out.flags.writeable = False
        return out

    def _check_length(self, length: int, logic: str) -> None:
        if length != self.n:
            raise LengthMismatchError(
                f"fixed vector {logic} requires {self.n} elements, got {length}",
                expected=self.n,
                actual=length,
            )

    def load(self, array: np.ndarray) -> None:
        self._check_length(len(array), 'assignment')
        self._data[:] = array

    def adopt(self, array: np.ndarray) -> None:
        self._check_length(len(array), 'move')
        self._data = array

    def fill_prefix(self, length: int, value: Any) -> None:
        """Set the first `length` elements to value; the rest are untouched."""
        if length > self.n:
            raise LengthMismatchError(
                f"fixed vector fill requires length <= {self.n}, got {length}",
                expected=self.n,
                actual=length,
            )
        self._data[:length] = value

    def append(self, value: Any) -> None:
        raise LengthMismatchError(
            f"fixed vector of length {self.n} cannot grow", expected=self.n, actual=self.n + 1,
        )

    def extend(self, array: np.ndarray) -> None:
        if len(array):
            raise LengthMismatchError(
                f"fixed vector of length {self.n} cannot grow",
                expected=self.n,
                actual=self.n + len(array),
            )

    def clear(self) -> None:
        raise LengthMismatchError(
            f"fixed vector of length {self.n} cannot be cleared", expected=self.n, actual=0,
        )

    def reset(self) -> None:
        self._data = np.zeros(self.n, dtype=self.dtype)

    def copy(self) -> 'FixedStorage':
        out = FixedStorage(self.dtype, self.n)
        out._data[:] = self._data
        return out

    def __len__(self) -> int:
        return self.n

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value


class DynamicStorage(Storage):

    def __init__(self, dtype: np.dtype):
        super().__init__(dtype)
        self._data = np.empty(0, dtype=self.dtype)
        self._length = 0

    @property
    def is_fixed(self) -> bool:
        return False

    @property
    def capacity(self) -> int:
        return len(self._data)

    def view(self) -> np.ndarray:
        out = self._data[:self._length]
        out.flags.writeable = False
        return out

    def _reserve(self, needed: int) -> None:
        if needed <= self.capacity:
            return
        capacity = max(MIN_CAPACITY, self.capacity)
        while capacity < needed:
            capacity *= 2
        logger.debug("growing dynamic storage %d -> %d (%s)", self.capacity, capacity, self.dtype)
        grown = np.zeros(capacity, dtype=self.dtype)
        grown[:self._length] = self._data[:self._length]
        self._data = grown

    def load(self, array: np.ndarray) -> None:
        data = np.array(array, dtype=self.dtype, copy=True)
        self._data = data
        self._length = len(data)

    def adopt(self, array: np.ndarray) -> None:
        self._data = array
        self._length = len(array)

    def append(self, value: Any) -> None:
        self._reserve(self._length + 1)
        self._data[self._length] = value
        self._length += 1

    def extend(self, array: np.ndarray) -> None:
        count = len(array)
        self._reserve(self._length + count)
        self._data[self._length:self._length + count] = array
        self._length += count

    def clear(self) -> None:
        self._length = 0

    def reset(self) -> None:
        self._data = np.empty(0, dtype=self.dtype)
        self._length = 0

    def copy(self) -> 'DynamicStorage':
        out = DynamicStorage(self.dtype)
        out.load(self.view())
        return out

    def __len__(self) -> int:
        return self._length

    def __setitem__(self, index: int, value: Any) -> None:
        # bounds are those of the live elements, not the capacity
        if not -self._length <= index < self._length:
            raise IndexError(f"index {index} out of range for length {self._length}")
        self._data[index % self._length] = value


def make_storage(dtype: np.dtype, n: int = 0) -> Storage:
    """Fixed storage for n > 0, dynamic for n == 0."""
    if n < 0:
        raise ValueError(f"Vector length parameter must be >= 0, got {n}")
    if n == 0:
        return DynamicStorage(dtype)
    return FixedStorage(dtype, n)
