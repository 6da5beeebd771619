"""
coords - Coordinate Specializations
===================================

Fixed-arity refinements of tensor.Vector with named components:

    Cartesian(x, y, z)     no range constraint
    Spherical(az, el)      no range constraint, no angle wrapping
    Geodetic(lat, lon)     -90 <= lat <= 90, -180 <= lon <= 180, always

Components alias the underlying elements: g.lat is g[0].
All Vector arithmetic applies unchanged and returns plain Vectors;
validation belongs to construction and assignment, not to results.

Length-choosing entry points (Vector.filled, n=) do not exist on these types.
"""

from coords.base import CoordinateVector
from coords.cartesian import Cartesian
from coords.config import CONFIG, get_bounds
from coords.geodetic import Geodetic, check_bounds
from coords.spherical import Spherical

__all__ = [
    'CoordinateVector',
    'Cartesian',
    'Spherical',
    'Geodetic',
    'check_bounds',
    'get_bounds',
    'CONFIG',
]
