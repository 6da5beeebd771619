"""Cartesian coordinates: x, y, z."""

from coords.base import CoordinateVector


class Cartesian(CoordinateVector):
    """
    Three-component position or direction. No range constraint.

    Cartesian(1.0, 2.0, 3.0).z == 3.0
    Cartesian(1, 0, 0) & Cartesian(0, 1, 0) == [0, 0, 1]
    """

    FIELDS = ('x', 'y', 'z')
    LABEL = 'cartesian'
