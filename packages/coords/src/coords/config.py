"""
Coordinate Configuration
========================
Inclusive bounds for range-checked coordinate components.

Usage:
    from coords.config import CONFIG, get_bounds
    low, high = get_bounds('lat')
"""

from typing import Tuple

CONFIG = {

    # =================================================================
    # Geodetic bounds (degrees, inclusive)
    # =================================================================
    'geodetic': {
        'lat': (-90.0, 90.0),
        'lon': (-180.0, 180.0),
    },
}


def get_bounds(field: str) -> Tuple[float, float]:
    """(low, high) for a geodetic component."""
    bounds = CONFIG['geodetic']
    if field not in bounds:
        raise KeyError(f"Unknown geodetic field: {field}. Available: {list(bounds)}")
    return bounds[field]
