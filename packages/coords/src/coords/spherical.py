"""
Spherical direction: azimuth and elevation.

Values are stored exactly as given. No wrapping into [0, 2π) and no
clamping of elevation; callers own their angle conventions and units.
"""

from coords.base import CoordinateVector


class Spherical(CoordinateVector):
    """
    Azimuth and elevation, stored as given.

    Spherical(0.5, -0.25).el == -0.25
    """

    FIELDS = ('az', 'el')
    LABEL = 'spherical'
