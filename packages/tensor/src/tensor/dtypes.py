"""
Element types, promotion and conversion.

Element types are numpy dtypes. The common arithmetic type of two operands
is numpy's result type, with one adjustment: bool promotes to the default
integer, so that arithmetic on flags counts instead of or-ing.

Conversions that change the element type go through convert(), which applies
the conversion policy (silent / warn / reject). Under WARN the notice is a
ConversionNotice on the warnings channel; it never stops the operation.
"""

import warnings
from collections.abc import Iterable
from numbers import Number
from typing import Any, Optional, Union

import numpy as np

from tensor.config import ConversionPolicy, get_conversion_policy, get_default_dtype
from tensor.errors import ConversionError, ConversionNotice

DTypeLike = Union[np.dtype, type, str, None]


def resolve_dtype(dtype: DTypeLike = None) -> np.dtype:
    """Normalise a dtype-like to np.dtype. None means the configured default."""
    if dtype is None:
        return get_default_dtype()
    resolved = np.dtype(dtype)
    if not is_arithmetic(resolved):
        raise ConversionError(f"Element type must be arithmetic, got {resolved}")
    return resolved


def is_arithmetic(dtype: np.dtype) -> bool:
    dtype = np.dtype(dtype)
    return dtype == np.bool_ or np.issubdtype(dtype, np.number)


def is_scalar(value: Any) -> bool:
    """True for Python and numpy numbers (including 0-d arrays)."""
    if isinstance(value, (Number, np.generic)):
        return True
    return isinstance(value, np.ndarray) and value.ndim == 0


def common_type(*operands: Any) -> np.dtype:
    """
    Common arithmetic type of the operands.

    Operands are dtypes or arrays. Scalars are passed by their dtype
    (np.asarray(scalar).dtype) so a Python int counts as the default
    integer: an int8 vector plus 1000 becomes int64, never wraps.
    """
    dtype = np.result_type(*operands)
    if dtype == np.bool_:
        return np.dtype(np.int_)
    return dtype


def source_array(values: Any) -> np.ndarray:
    """
    View any ordered sequence as a 1-D ndarray, keeping its element type.

    Accepts lists, tuples, ndarrays, Vectors (anything with __array__) and
    other finite iterables. Rejects scalars, nested input and
    non-arithmetic elements.
    """
    if is_scalar(values):
        raise TypeError(f"Expected an ordered sequence, got scalar {values!r}")
    if isinstance(values, (str, bytes)):
        raise ConversionError("Strings are not arithmetic sequences")

    if not isinstance(values, np.ndarray) and not hasattr(values, '__array__'):
        if not hasattr(values, '__len__') and isinstance(values, Iterable):
            values = list(values)

    array = np.asarray(values)
    if array.ndim != 1:
        raise ValueError(f"Expected a one-dimensional sequence, got shape {array.shape}")
    if array.size and not is_arithmetic(array.dtype):
        raise ConversionError(f"Source elements must be arithmetic, got {array.dtype}")
    return array


def is_literal(values: Any) -> bool:
    """Plain Python lists and tuples, whose numbers carry no fixed width."""
    return isinstance(values, (list, tuple))


def _same_family(a: np.dtype, b: np.dtype) -> bool:
    return any(
        np.issubdtype(a, family) and np.issubdtype(b, family)
        for family in (np.integer, np.floating, np.complexfloating)
    )


def _apply_policy(
    message: str,
    policy: Optional[Union[ConversionPolicy, str]],
    stacklevel: int,
) -> None:
    policy = get_conversion_policy(policy)
    if policy is ConversionPolicy.REJECT:
        raise ConversionError(message)
    if policy is ConversionPolicy.WARN:
        warnings.warn(message, ConversionNotice, stacklevel=stacklevel + 1)


def convert(
    array: np.ndarray,
    dtype: np.dtype,
    policy: Optional[Union[ConversionPolicy, str]] = None,
    context: str = 'vector conversion',
    stacklevel: int = 4,
    literal: bool = False,
) -> np.ndarray:
    """
    Cast array to dtype, applying the conversion policy when the types differ.

    Returns the input itself when no cast is needed. Empty sources carry
    no values, so they are never reported. A literal source (see
    is_literal) whose values survive a cast within the same numeric family
    is not reported either: [1, 2, 3] into int32 is silent, [1, 2, 3] into
    float32 and [1000] into int8 are not.
    """
    dtype = np.dtype(dtype)
    if array.dtype == dtype:
        return array
    if array.size == 0:
        return array.astype(dtype)

    if literal and _same_family(array.dtype, dtype):
        converted = array.astype(dtype)
        if np.array_equal(converted, array, equal_nan=np.issubdtype(dtype, np.inexact)):
            return converted

    _apply_policy(
        f"{context} performing type conversion ({array.dtype} -> {dtype})",
        policy,
        stacklevel,
    )
    return array.astype(dtype)


def convert_scalar(
    value: Any,
    dtype: np.dtype,
    policy: Optional[Union[ConversionPolicy, str]] = None,
    context: str = 'vector element write',
    stacklevel: int = 4,
) -> np.generic:
    """
    Cast a single value to dtype.

    Only casts that cross kinds (float into int, complex into float) are
    reported; writing a Python int into a float vector is not.
    """
    if not is_scalar(value):
        raise TypeError(f"Expected a scalar, got {type(value).__name__}")
    source = np.asarray(value)
    if not is_arithmetic(source.dtype):
        raise ConversionError(f"Value must be arithmetic, got {source.dtype}")

    dtype = np.dtype(dtype)
    if not np.can_cast(source.dtype, dtype, casting='same_kind'):
        _apply_policy(
            f"{context} performing type conversion ({source.dtype} -> {dtype})",
            policy,
            stacklevel,
        )
    return source.astype(dtype)[()]


def infer_dtype(array: np.ndarray, dtype: DTypeLike = None) -> np.dtype:
    """Explicit dtype if given, else the source's, else the configured default."""
    if dtype is not None:
        return resolve_dtype(dtype)
    if array.size:
        return array.dtype
    return resolve_dtype(None)
