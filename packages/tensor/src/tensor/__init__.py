"""
tensor - Generic Vector Container
=================================

One container, two storage modes:

    tensor.Vector([1, 2, 3])            dynamic (n=0), growable
    tensor.Vector([1, 2, 3], n=3)       fixed length 3, never resized

Arithmetic promotes to the common element type (int + float -> float):
    a + b, a - b, a * b, a / b, a + 2, a | b (inner), a & b (cross)

Element type conversions in constructors and assignments follow the
conversion policy (silent / warn / reject). Under 'warn' (the default) a
ConversionNotice goes to the warnings channel and the operation succeeds.

Errors:
    LengthMismatchError, ArityError, RangeError, ConversionError
"""

__version__ = '0.1.0'

from tensor.config import CONFIG, ConversionPolicy, get_conversion_policy
from tensor.dtypes import common_type
from tensor.errors import (
    ArityError,
    ConversionError,
    ConversionNotice,
    LengthMismatchError,
    RangeError,
    TensorError,
)
from tensor.storage import DynamicStorage, FixedStorage, Storage, make_storage
from tensor.vector import Vector, render

__all__ = [
    'Vector',
    'render',
    'common_type',
    'CONFIG',
    'ConversionPolicy',
    'get_conversion_policy',
    'Storage',
    'FixedStorage',
    'DynamicStorage',
    'make_storage',
    'TensorError',
    'LengthMismatchError',
    'ArityError',
    'RangeError',
    'ConversionError',
    'ConversionNotice',
]
