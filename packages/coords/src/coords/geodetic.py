"""
Geodetic position: latitude and longitude in degrees.

Invariant: -90 <= lat <= 90 and -180 <= lon <= 180 (bounds from
coords.config). Checked on every constructor, every assignment and every
component write, after element type conversion and before anything is
stored. A Geodetic that violates its bounds is never observable.
"""

import numpy as np

from coords.base import CoordinateVector
from coords.config import get_bounds
from tensor.errors import RangeError


def check_bounds(field: str, value) -> None:
    """Raise RangeError if value lies outside the field's inclusive bounds."""
    low, high = get_bounds(field)
    if low <= value <= high:
        return

    if value < low:
        bound, detail = low, f"below lower bound {low:g}"
    elif value > high:
        bound, detail = high, f"above upper bound {high:g}"
    else:
        bound, detail = high, "not a number"
    raise RangeError(
        f"geodetic {field} must be between {low:g} and {high:g} (got {value}, {detail})",
        field=field,
        value=value.item() if isinstance(value, np.generic) else value,
        bound=bound,
    )


class Geodetic(CoordinateVector):
    """
    Latitude and longitude in degrees, range-checked on every write.

    Geodetic(47.6, -122.3).lat == 47.6
    Geodetic(95.0, 0.0)             # RangeError: lat above upper bound 90
    """

    FIELDS = ('lat', 'lon')
    LABEL = 'geodetic'

    def _validate(self, array: np.ndarray) -> None:
        for name, value in zip(self.FIELDS, array):
            check_bounds(name, value)

    def _validate_item(self, index: int, value) -> None:
        check_bounds(self.FIELDS[index], value)
