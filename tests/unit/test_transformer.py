import pytest

from utmups import transformer as transformer_module
from utmups.errors import InputRangeError, OutOfRangeError
from utmups.projections import PyprojProjection
from utmups.transformer import (
    CoordinateTransformer,
    GeographicPoint,
    ProjectedPoint,
    forward,
    reverse_point,
)
from utmups.zones import Hemisphere, ZoneOverride

# About 0.1 mm on the ground.
ANGLE_TOLERANCE = 1e-9


def lon_delta(lon1: float, lon2: float) -> float:
    d = (lon1 - lon2) % 360
    return min(d, 360 - d)


class TestForward:
    def test_known_point(self, transformer: CoordinateTransformer):
        result = transformer.forward(33.3, 44.4)
        assert result.zone == 38
        assert result.hemisphere == Hemisphere.NORTH
        assert result.easting == pytest.approx(444140.54, abs=0.01)
        assert result.northing == pytest.approx(3684706.36, abs=0.01)
        # West of the central meridian 45 in the northern hemisphere.
        assert result.convergence < 0
        assert 0.9996 < result.scale < 1.0

    def test_southern_hemisphere(self, transformer: CoordinateTransformer):
        result = transformer.forward(-33.3, 44.4)
        assert result.zone == 38
        assert result.hemisphere == Hemisphere.SOUTH
        assert result.easting == pytest.approx(444140.54, abs=0.01)
        assert result.northing == pytest.approx(10000000 - 3684706.36, abs=0.01)
        assert result.convergence > 0

    def test_equator_is_north(self, transformer: CoordinateTransformer):
        result = transformer.forward(0, 3)
        assert result.hemisphere == Hemisphere.NORTH
        assert result.easting == pytest.approx(500000)
        assert result.northing == pytest.approx(0, abs=1e-6)
        assert result.scale == pytest.approx(0.9996)
        assert result.convergence == pytest.approx(0, abs=1e-7)

    def test_north_pole(self, transformer: CoordinateTransformer):
        result = transformer.forward(90, 0)
        assert result.zone == 0
        assert result.northp
        assert result.easting == pytest.approx(2000000)
        assert result.northing == pytest.approx(2000000)
        assert result.scale == pytest.approx(0.994)

    def test_integer_setzone(self, transformer: CoordinateTransformer):
        assert transformer.forward(60, 5, -1).zone == 32
        assert transformer.forward(60, 5, 31).zone == 31
        assert transformer.forward(85, 5, 0).zone == 0

    def test_utm_override_extends_into_polar_cap(
        self, transformer: CoordinateTransformer
    ):
        result = transformer.forward(85, 10, ZoneOverride.utm())
        assert result.zone == 32
        assert result.northing < 9600e3

    def test_forced_zone_out_of_range(self, transformer: CoordinateTransformer):
        # 27 degrees from the central meridian of zone 1 on the equator.
        with pytest.raises(OutOfRangeError, match="Easting"):
            transformer.forward(0, -150, 1)

    def test_forced_neighbouring_zone_stays_in_range(
        self, transformer: CoordinateTransformer
    ):
        # 7 degrees from the central meridian at 80N is well inside the envelope.
        result = transformer.forward(80, -170, 1)
        assert result.zone == 1
        assert 600e3 < result.easting < 700e3

    def test_forced_zone_too_far(self, transformer: CoordinateTransformer):
        with pytest.raises(OutOfRangeError, match="more than 60d"):
            transformer.forward(10, 10, 1)

    def test_forced_ups_too_far_from_pole(self, transformer: CoordinateTransformer):
        with pytest.raises(OutOfRangeError, match="more than 20d from N pole"):
            transformer.forward(60, 10, 0)

    def test_ups_out_of_range(self, transformer: CoordinateTransformer):
        # 72N is legal for UPS math but far outside the UPS envelope.
        with pytest.raises(OutOfRangeError):
            transformer.forward(72, 0, 0)

    @pytest.mark.parametrize("lat,lon", [(91, 0), (-90.5, 0), (0, 600)])
    def test_bad_input(self, transformer: CoordinateTransformer, lat: float, lon: float):
        with pytest.raises(InputRangeError):
            transformer.forward(lat, lon)

    def test_bad_zone(self, transformer: CoordinateTransformer):
        with pytest.raises(InputRangeError):
            transformer.forward(0, 0, 61)


class TestReverse:
    def test_known_point(self, transformer: CoordinateTransformer):
        result = transformer.reverse(38, True, 444140.54, 3684706.36)
        assert result.lat == pytest.approx(33.3, abs=1e-6)
        assert result.lon == pytest.approx(44.4, abs=1e-6)

    def test_hemisphere_argument(self, transformer: CoordinateTransformer):
        a = transformer.reverse(38, Hemisphere.SOUTH, 444140.54, 6315293.64)
        b = transformer.reverse(38, False, 444140.54, 6315293.64)
        assert a == b
        assert a.lat == pytest.approx(-33.3, abs=1e-6)

    def test_scale_matches_forward(self, transformer: CoordinateTransformer):
        # 9E is the central meridian of zone 32, where the scale is k0.
        result = transformer.forward(45.0, 9.0)
        back = transformer.reverse(
            result.zone, result.hemisphere, result.easting, result.northing
        )
        assert result.scale == pytest.approx(0.9996, rel=1e-9)
        assert back.scale == pytest.approx(0.9996, rel=1e-9)

    def test_negative_easting(self, transformer: CoordinateTransformer):
        with pytest.raises(OutOfRangeError):
            transformer.reverse(1, True, -1, 0)

    def test_bad_zone(self, transformer: CoordinateTransformer):
        with pytest.raises(InputRangeError):
            transformer.reverse(61, True, 500e3, 0)
        with pytest.raises(InputRangeError):
            transformer.reverse(-1, True, 500e3, 0)

    def test_equator_crossover(self, transformer: CoordinateTransformer):
        # Northings below zero continue a northern zone into the south.
        result = transformer.reverse(31, True, 500e3, -100e3)
        assert result.lat < 0
        south = transformer.forward(result.lat, result.lon)
        assert south.hemisphere == Hemisphere.SOUTH
        assert south.northing == pytest.approx(10000e3 - 100e3, abs=1e-4)

    def test_ups_pole(self, transformer: CoordinateTransformer):
        for lon in (0, 45, -123.4):
            result = transformer.forward(90, lon, 0)
            back = transformer.reverse(result.zone, result.hemisphere, result.easting, result.northing)
            assert back.lat == pytest.approx(90, abs=ANGLE_TOLERANCE)
        back = transformer.reverse(0, False, 2000e3, 2000e3)
        assert back.lat == pytest.approx(-90, abs=ANGLE_TOLERANCE)


ROUND_TRIP_LATS = [-79.999999, -79.99, -45, -1, 0, 1e-9, 30, 56.5, 60, 75, 80]
ROUND_TRIP_LONS = [-179.5, -120.3, -3, 0.001, 0.5, 5, 44.4, 100.01, 179.9]


@pytest.mark.parametrize("lat", ROUND_TRIP_LATS)
@pytest.mark.parametrize("lon", ROUND_TRIP_LONS)
def test_round_trip(transformer: CoordinateTransformer, lat: float, lon: float):
    result = transformer.forward(lat, lon)
    back = transformer.reverse(result.zone, result.hemisphere, result.easting, result.northing)
    assert back.lat == pytest.approx(lat, abs=ANGLE_TOLERANCE)
    assert lon_delta(back.lon, lon) < ANGLE_TOLERANCE
    assert back.convergence == pytest.approx(result.convergence, abs=1e-7)
    assert back.scale == pytest.approx(result.scale, rel=1e-9)
    again = transformer.forward(back.lat, back.lon)
    assert again.zone == result.zone
    assert again.hemisphere == result.hemisphere


@pytest.mark.parametrize(
    "lat,lon", [(84, 0), (86.5, -100), (89.9, 170), (-80.5, 30), (-85, -60), (-89, 0)]
)
def test_round_trip_ups(transformer: CoordinateTransformer, lat: float, lon: float):
    result = transformer.forward(lat, lon)
    assert result.zone == 0
    back = transformer.reverse(0, result.northp, result.easting, result.northing)
    assert back.lat == pytest.approx(lat, abs=ANGLE_TOLERANCE)
    assert lon_delta(back.lon, lon) < ANGLE_TOLERANCE
    assert back.convergence == pytest.approx(result.convergence, abs=1e-7)


def test_reverse_of_envelope_corners_is_closed(transformer: CoordinateTransformer):
    # Legal reverse input near the edges of the envelope maps back into it.
    for x, y in [(1, 1), (999999, 9599999), (1, -9099999), (999999, 5000e3)]:
        lat, lon = transformer.reverse_point(30, True, x, y)
        point = transformer.forward_point(lat, lon, 30)
        assert point.easting == pytest.approx(x, abs=1e-4)
        assert point.northing == pytest.approx(y if lat >= 0 else y + 10000e3, abs=1e-4)


class TestOverloads:
    def test_forward_point(self, transformer: CoordinateTransformer):
        point = transformer.forward_point(33.3, 44.4)
        assert isinstance(point, ProjectedPoint)
        assert point == transformer.forward(33.3, 44.4).point

    def test_reverse_point(self, transformer: CoordinateTransformer):
        point = transformer.reverse_point(38, True, 444140.54, 3684706.36)
        assert isinstance(point, GeographicPoint)
        lat, lon = point
        assert lat == pytest.approx(33.3, abs=1e-6)
        assert lon == pytest.approx(44.4, abs=1e-6)

    def test_module_level(self):
        assert forward(33.3, 44.4).zone == 38
        lat, _ = reverse_point(38, True, 444140.54, 3684706.36)
        assert lat == pytest.approx(33.3, abs=1e-6)
        assert (
            transformer_module.get_default_transformer()
            is transformer_module.get_default_transformer()
        )
        assert isinstance(
            transformer_module.get_default_transformer().projection, PyprojProjection
        )


class TestTransfer:
    def test_relabel_hemisphere(self, transformer: CoordinateTransformer):
        point = transformer.transfer(31, True, 500e3, 100e3, 31, False)
        assert point == ProjectedPoint(31, Hemisphere.SOUTH, 500e3, 10100e3)
        back = transformer.transfer(31, False, 500e3, 10100e3, 31, True)
        assert back.northing == pytest.approx(100e3)

    def test_neighbouring_zone(self, transformer: CoordinateTransformer):
        point = transformer.forward_point(50, 6.01)
        assert point.zone == 32
        moved = transformer.transfer(32, True, point.easting, point.northing, 31, True)
        expected = transformer.forward_point(50, 6.01, 31)
        assert moved.zone == 31
        assert moved.easting == pytest.approx(expected.easting, abs=1e-4)
        assert moved.northing == pytest.approx(expected.northing, abs=1e-4)

    def test_to_standard_zone(self, transformer: CoordinateTransformer):
        point = transformer.forward_point(50, 6.01, 31)
        moved = transformer.transfer(31, True, point.easting, point.northing, -1, True)
        assert moved.zone == 32

    def test_ups_between_hemispheres(self, transformer: CoordinateTransformer):
        with pytest.raises(OutOfRangeError):
            transformer.transfer(0, True, 2000e3, 2000e3, 0, False)
