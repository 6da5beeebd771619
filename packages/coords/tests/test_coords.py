"""Tests for the coords package."""
import numpy as np
import pytest

from tensor.errors import (
    ArityError,
    ConversionNotice,
    LengthMismatchError,
    RangeError,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def point():
    from coords.cartesian import Cartesian
    return Cartesian(1.0, 2.0, 3.0)


@pytest.fixture
def position():
    from coords.geodetic import Geodetic
    return Geodetic(45.0, -120.0)


# ---------------------------------------------------------------------------
# Cartesian
# ---------------------------------------------------------------------------

class TestCartesian:

    def test_components(self, point):
        assert point.x == 1.0
        assert point.y == 2.0
        assert point.z == 3.0
        assert len(point) == 3
        assert point.n == 3
        assert point.is_fixed

    def test_default_is_zero(self):
        from coords.cartesian import Cartesian
        c = Cartesian()
        assert c == [0.0, 0.0, 0.0]
        assert c.dtype == np.float64

    def test_fields_alias_elements(self, point):
        point.x = 10.0
        assert point[0] == 10.0
        point[1] = 5.0
        assert point.y == 5.0

    def test_dtype_inferred_from_components(self):
        from coords.cartesian import Cartesian
        assert np.issubdtype(Cartesian(1, 2, 3).dtype, np.integer)
        assert Cartesian(1, 2.5, 3).dtype == np.float64

    def test_wrong_component_count(self):
        from coords.cartesian import Cartesian
        with pytest.raises(LengthMismatchError, match='cartesian list constructor'):
            Cartesian(1.0, 2.0)
        with pytest.raises(LengthMismatchError, match='cartesian copy constructor'):
            Cartesian([1.0, 2.0, 3.0, 4.0])

    def test_copy_from_sequence(self):
        from coords.cartesian import Cartesian
        source = np.array([4.0, 5.0, 6.0])
        c = Cartesian.from_sequence(source)
        assert isinstance(c, Cartesian)
        assert c.z == 6.0
        source[2] = 0.0
        assert c.z == 6.0
        assert Cartesian([7.0, 8.0, 9.0]).x == 7.0

    def test_move_from_sequence(self):
        from coords.cartesian import Cartesian
        source = [1.0, 2.0, 3.0]
        c = Cartesian.move_from(source)
        assert isinstance(c, Cartesian)
        assert c == [1.0, 2.0, 3.0]
        assert source == []

    def test_move_from_short_sequence(self):
        from coords.cartesian import Cartesian
        with pytest.raises(LengthMismatchError):
            Cartesian.move_from([1.0, 2.0])

    def test_conversion_notice(self):
        from coords.cartesian import Cartesian
        with pytest.warns(ConversionNotice, match='cartesian list constructor'):
            c = Cartesian(1, 2, 3, dtype=np.float32)
        assert c.dtype == np.float32

    def test_assignment_keeps_length(self, point):
        point.assign([4.0, 5.0, 6.0])
        assert point.as_dict() == {'x': 4.0, 'y': 5.0, 'z': 6.0}
        with pytest.raises(LengthMismatchError):
            point.assign([1.0, 2.0])
        with pytest.raises(LengthMismatchError):
            point.move_assign([1.0, 2.0, 3.0, 4.0])
        assert point == [4.0, 5.0, 6.0]

    def test_cannot_grow(self, point):
        with pytest.raises(LengthMismatchError):
            point.append(4.0)

    def test_length_choosing_entry_points_unavailable(self):
        from coords.cartesian import Cartesian
        assert not hasattr(Cartesian, 'filled')
        with pytest.raises(AttributeError):
            Cartesian.filled(3, 1.0)
        with pytest.raises(TypeError):
            Cartesian(n=3)
        with pytest.raises(TypeError):
            Cartesian.move_from([1.0, 2.0, 3.0], n=3)

    def test_arithmetic_returns_plain_vector(self, point):
        from coords.cartesian import Cartesian
        from tensor.vector import Vector
        result = point + Cartesian(1.0, 1.0, 1.0)
        assert type(result) is Vector
        assert result == [2.0, 3.0, 4.0]
        assert type(point * 2) is Vector

    def test_cross_and_inner(self):
        from coords.cartesian import Cartesian
        assert (Cartesian(1, 0, 0) & Cartesian(0, 1, 0)) == [0, 0, 1]
        assert (Cartesian(1, 2, 3) | Cartesian(4, 5, 6)) == 32

    def test_copy_keeps_type(self, point):
        from coords.cartesian import Cartesian
        duplicate = point.copy()
        assert isinstance(duplicate, Cartesian)
        duplicate.x = 100.0
        assert point.x == 1.0

    def test_rendering(self, point):
        assert str(point) == '[1.0, 2.0, 3.0]'
        assert repr(point) == 'Cartesian(x=1.0, y=2.0, z=3.0)'


# ---------------------------------------------------------------------------
# Spherical
# ---------------------------------------------------------------------------

class TestSpherical:

    def test_components(self):
        from coords.spherical import Spherical
        s = Spherical(0.5, -0.25)
        assert s.az == 0.5
        assert s.el == -0.25
        assert len(s) == 2

    def test_values_stored_as_given(self):
        from coords.spherical import Spherical
        s = Spherical(400.0, 100.0)
        assert s.as_dict() == {'az': 400.0, 'el': 100.0}

    def test_wrong_length(self):
        from coords.spherical import Spherical
        with pytest.raises(LengthMismatchError):
            Spherical([1.0, 2.0, 3.0])
        s = Spherical()
        with pytest.raises(LengthMismatchError):
            s.assign([1.0])

    def test_fields_alias_elements(self):
        from coords.spherical import Spherical
        s = Spherical(1.0, 2.0)
        s.el = 3.0
        assert s[1] == 3.0

    def test_cross_needs_three_components(self):
        from coords.spherical import Spherical
        with pytest.raises(ArityError):
            Spherical(1.0, 2.0) & Spherical(3.0, 4.0)

    def test_unavailable_fill(self):
        from coords.spherical import Spherical
        assert not hasattr(Spherical, 'filled')


# ---------------------------------------------------------------------------
# Geodetic
# ---------------------------------------------------------------------------

class TestGeodetic:

    def test_components(self, position):
        assert position.lat == 45.0
        assert position.lon == -120.0

    def test_documented_usage(self):
        from coords.geodetic import Geodetic
        from coords.spherical import Spherical
        assert Geodetic(47.6, -122.3).lat == 47.6
        assert Spherical(0.5, -0.25).el == -0.25
        with pytest.raises(RangeError, match='above upper bound 90'):
            Geodetic(95.0, 0.0)

    def test_exact_integer_components_are_silent(self):
        import warnings
        from coords.geodetic import Geodetic
        with warnings.catch_warnings():
            warnings.simplefilter('error', ConversionNotice)
            g = Geodetic(45, -120, dtype=np.int32)
        assert g.dtype == np.int32
        assert g.as_dict() == {'lat': 45, 'lon': -120}

    def test_default_is_valid(self):
        from coords.geodetic import Geodetic
        assert Geodetic() == [0.0, 0.0]

    def test_bounds_inclusive(self):
        from coords.geodetic import Geodetic
        Geodetic(90.0, 180.0)
        Geodetic(-90.0, -180.0)

    def test_latitude_above_bound(self):
        from coords.geodetic import Geodetic
        with pytest.raises(RangeError) as info:
            Geodetic(95.0, 0.0)
        assert info.value.field == 'lat'
        assert info.value.bound == 90.0
        assert info.value.value == 95.0
        assert 'lat' in str(info.value)
        assert 'upper bound 90' in str(info.value)

    def test_longitude_below_bound(self):
        from coords.geodetic import Geodetic
        with pytest.raises(RangeError) as info:
            Geodetic(0.0, -181.0)
        assert info.value.field == 'lon'
        assert info.value.bound == -180.0
        assert 'lower bound -180' in str(info.value)

    def test_nan_rejected(self):
        from coords.geodetic import Geodetic
        with pytest.raises(RangeError):
            Geodetic(float('nan'), 0.0)

    def test_range_error_is_value_error(self):
        from coords.geodetic import Geodetic
        with pytest.raises(ValueError):
            Geodetic(0.0, 200.0)

    def test_copy_constructor_validates(self):
        from coords.geodetic import Geodetic
        with pytest.raises(RangeError):
            Geodetic.from_sequence([100.0, 0.0])
        with pytest.raises(RangeError):
            Geodetic(np.array([0.0, 200.0]))

    def test_failed_move_leaves_source(self):
        from coords.geodetic import Geodetic
        source = [0.0, 200.0]
        with pytest.raises(RangeError):
            Geodetic.move_from(source)
        assert source == [0.0, 200.0]

    def test_move_constructor(self):
        from coords.geodetic import Geodetic
        source = [10.0, 20.0]
        g = Geodetic.move_from(source)
        assert g.as_dict() == {'lat': 10.0, 'lon': 20.0}
        assert source == []

    def test_assignment_validates_atomically(self, position):
        with pytest.raises(RangeError):
            position.assign([91.0, 0.0])
        with pytest.raises(RangeError):
            position.move_assign([0.0, -180.5])
        assert position == [45.0, -120.0]

    def test_component_write_validates(self, position):
        with pytest.raises(RangeError):
            position.lat = 91.0
        with pytest.raises(RangeError):
            position[1] = -200.0
        assert position == [45.0, -120.0]
        position.lon = 179.5
        assert position[1] == 179.5

    def test_reassign_own_values(self, position):
        position.assign(position.tolist())
        position.assign(position)
        position.move_assign(position)
        position.lat = position.lat
        assert position == [45.0, -120.0]

    def test_validates_converted_values(self):
        from coords.geodetic import Geodetic
        with pytest.warns(ConversionNotice):
            g = Geodetic(90.4, 0.0, dtype=np.int32)
        assert g.lat == 90

    def test_arithmetic_result_not_revalidated(self):
        from coords.geodetic import Geodetic
        from tensor.vector import Vector
        total = Geodetic(80.0, 0.0) + Geodetic(80.0, 0.0)
        assert type(total) is Vector
        assert total == [160.0, 0.0]

    def test_configured_bounds(self, monkeypatch):
        from coords.config import CONFIG
        from coords.geodetic import Geodetic
        monkeypatch.setitem(CONFIG['geodetic'], 'lat', (-10.0, 10.0))
        with pytest.raises(RangeError):
            Geodetic(20.0, 0.0)

    def test_unknown_bounds(self):
        from coords.config import get_bounds
        with pytest.raises(KeyError):
            get_bounds('alt')
