"""
Tensor Configuration
====================
Defaults for vector construction and type conversion.
Read at call time, so edits to CONFIG take effect immediately.

Usage:
    from tensor.config import CONFIG, ConversionPolicy
    CONFIG['conversion']['policy'] = 'silent'
"""

from enum import Enum
from typing import Optional, Union

import numpy as np


class ConversionPolicy(Enum):
    SILENT = "silent"   # Convert, say nothing
    WARN = "warn"       # Convert, emit ConversionNotice
    REJECT = "reject"   # Raise ConversionError


CONFIG = {

    # =================================================================
    # Vector defaults
    # =================================================================
    'vector': {
        'default_orient': 'c',
        'default_dtype': 'float64',
        'orients': ('r', 'c'),
    },

    # =================================================================
    # Element type conversion
    # =================================================================
    'conversion': {
        'policy': 'warn',
    },
}


def get_conversion_policy(
    policy: Optional[Union[ConversionPolicy, str]] = None,
) -> ConversionPolicy:
    """Resolve an explicit policy, or fall back to the configured one."""
    if policy is None:
        policy = CONFIG['conversion']['policy']
    if isinstance(policy, ConversionPolicy):
        return policy
    try:
        return ConversionPolicy(str(policy).lower())
    except ValueError:
        valid = [p.value for p in ConversionPolicy]
        raise ValueError(f"Unknown conversion policy: {policy!r}. Valid: {valid}") from None


def get_default_dtype() -> np.dtype:
    return np.dtype(CONFIG['vector']['default_dtype'])


def get_default_orient() -> str:
    return CONFIG['vector']['default_orient']


def validate_orient(orient: Optional[str]) -> str:
    """Return a valid orientation tag ('r' or 'c')."""
    if orient is None:
        orient = get_default_orient()
    if orient not in CONFIG['vector']['orients']:
        raise ValueError(
            f"Orientation must be one of {CONFIG['vector']['orients']}, got {orient!r}"
        )
    return orient
