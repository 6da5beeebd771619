"""
Tensor Errors
=============
Every failure is raised before either operand is touched.

    TensorError
    ├── LengthMismatchError   (ValueError)  wrong length for a fixed target / operand pair
    ├── ArityError            (ValueError)  cross product on a non-3D operand
    ├── RangeError            (ValueError)  coordinate component outside its bounds
    └── ConversionError       (TypeError)   conversion refused, or non-arithmetic source

ConversionNotice is a warning, not an error. It is emitted through the
warnings module whenever a constructor or assignment converts between
element types under the WARN policy.
"""

from typing import Optional


class TensorError(Exception):
    """Base class for all tensor and coordinate errors."""


class LengthMismatchError(TensorError, ValueError):
    """Operand or source length does not satisfy the operation."""

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ArityError(TensorError, ValueError):
    """Operation defined only for a fixed number of components."""

    def __init__(self, message: str, expected: int = 3, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class RangeError(TensorError, ValueError):
    """A named component violated one of its bounds."""

    def __init__(self, message: str, field: str, value: float, bound: float):
        super().__init__(message)
        self.field = field
        self.value = value
        self.bound = bound


class ConversionError(TensorError, TypeError):
    """Element type conversion refused or impossible."""


class ConversionNotice(UserWarning):
    """Non-fatal: values were converted to a different element type."""
