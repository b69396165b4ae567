import pytest
from pydantic import ValidationError

from utmups.config import ProjectionConfig
from utmups.const import WGS84_A, WGS84_F
from utmups.projections import PyprojProjection, TMAlgorithm
from utmups.transformer import CoordinateTransformer


def test_defaults():
    config = ProjectionConfig()
    assert config.equatorial_radius == WGS84_A
    assert config.flattening == WGS84_F
    assert config.utm_scale_factor == 0.9996
    assert config.ups_scale_factor == 0.994
    assert config.tm_algorithm == TMAlgorithm.PODER_ENGSAGER
    projection = config.build_projection()
    assert isinstance(projection, PyprojProjection)
    assert projection.equatorial_radius == WGS84_A


def test_inverse_flattening_string():
    config = ProjectionConfig.model_validate({"flattening": "1/297"})
    assert config.flattening == pytest.approx(1 / 297)


def test_evenden_snyder():
    config = ProjectionConfig.model_validate({"tm_algorithm": "evenden_snyder"})
    projection = config.build_projection()
    assert projection.tm_algorithm == TMAlgorithm.EVENDEN_SNYDER
    result = CoordinateTransformer.from_config(config).forward(33.3, 44.4)
    assert result.easting == pytest.approx(444140.54, abs=0.01)
    assert result.northing == pytest.approx(3684706.36, abs=0.01)


@pytest.mark.parametrize(
    "values",
    [
        {"equatorial_radius": 0},
        {"flattening": -0.1},
        {"flattening": 1},
        {"utm_scale_factor": 0},
        {"tm_algorithm": "exact"},
        {"ellipsoid": "WGS84"},
    ],
)
def test_invalid(values: dict):
    with pytest.raises(ValidationError):
        ProjectionConfig.model_validate(values)


def test_other_ellipsoid():
    # International 1924.
    config = ProjectionConfig(equatorial_radius=6378388, flattening=1 / 297)
    transformer = CoordinateTransformer.from_config(config)
    wgs84 = CoordinateTransformer().forward(50, 10)
    result = transformer.forward(50, 10)
    assert result.zone == wgs84.zone
    assert abs(result.northing - wgs84.northing) > 10
    back = transformer.reverse(result.zone, result.northp, result.easting, result.northing)
    assert back.lat == pytest.approx(50, abs=1e-9)
    assert back.lon == pytest.approx(10, abs=1e-9)


def test_sphere():
    config = ProjectionConfig(flattening=0)
    transformer = CoordinateTransformer.from_config(config)
    for lat, lon in [(0, 0), (45, 4), (-70, -100), (88, 10)]:
        result = transformer.forward(lat, lon)
        back = transformer.reverse(result.zone, result.northp, result.easting, result.northing)
        assert back.lat == pytest.approx(lat, abs=1e-9)
        assert back.lon == pytest.approx(lon, abs=1e-9)
