"""Tests for the geographic factor estimators."""

import pytest
from core import geo_factors
from core.terrain import TerrainType
from core.models import WindFactors


def test_coastal_proximity_at_reference_point():
    assert geo_factors.coastal_proximity(37.7749, -122.4194) == pytest.approx(100.0)


def test_coastal_proximity_far_inland_is_zero():
    # Gulf of Guinea origin point is over 1000 km from every reference city
    assert geo_factors.coastal_proximity(0.0, 0.0) == 0.0


def test_coastal_proximity_decays_with_distance():
    near = geo_factors.coastal_proximity(37.8199, -122.4783)
    farther = geo_factors.coastal_proximity(39.0, -119.0)
    assert 0 <= farther < near <= 100


@pytest.mark.parametrize("lat,expected", [
    (0, 70.0),
    (15, 80.0),
    (30, 80.0),
    (45, 87.5),
    (60, 90.0),
    (90, 80.0),
    (-45, 87.5),
])
def test_seasonal_wind_factor_bands(lat, expected):
    assert geo_factors.seasonal_wind_factor(lat) == pytest.approx(expected)


def test_seasonal_wind_factor_steps_down_at_band_edges():
    # Half-open bands: the value just below 30° is higher than at 30°
    assert geo_factors.seasonal_wind_factor(29.999) > geo_factors.seasonal_wind_factor(30)
    assert geo_factors.seasonal_wind_factor(59.999) == pytest.approx(95.0, abs=0.01)


def test_seasonal_variation():
    assert geo_factors.seasonal_variation(30) == 70.0
    assert geo_factors.seasonal_variation(30.5) == 85.0
    assert geo_factors.seasonal_variation(-50) == 85.0


def test_solar_latitude_adjustment_range():
    assert geo_factors.solar_latitude_adjustment(0) == pytest.approx(30.0)
    assert geo_factors.solar_latitude_adjustment(90) == pytest.approx(8.85)
    assert geo_factors.solar_latitude_adjustment(45) == geo_factors.solar_latitude_adjustment(-45)


def test_altitude_uses_terrain_baseline():
    mountain = geo_factors.estimate_altitude_meters(0, 0, TerrainType.MOUNTAINS)
    coastal = geo_factors.estimate_altitude_meters(0, 0, TerrainType.COASTAL)
    # sin(0) = 0, cos(0) = 1
    assert mountain == pytest.approx(2300)
    assert coastal == pytest.approx(350)


def test_altitude_unknown_terrain_uses_temperate():
    assert geo_factors.estimate_altitude_meters(10, 10, "volcano") == \
        geo_factors.estimate_altitude_meters(10, 10, TerrainType.TEMPERATE)


def test_altitude_score_is_linear_below_peak():
    # 3000 m maps to 100
    assert geo_factors.estimate_altitude(0, 0, TerrainType.MOUNTAINS) == pytest.approx(2300 / 30)


def test_wind_factors_in_range_everywhere():
    for lat in range(-90, 91, 15):
        for lng in range(-180, 181, 30):
            for terrain in TerrainType:
                factors = geo_factors.wind_factors(lat, lng, terrain)
                assert isinstance(factors, WindFactors)
                for value in (factors.latitude, factors.altitude, factors.coastal, factors.seasonal):
                    assert 0 <= value <= 100
