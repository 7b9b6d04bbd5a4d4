"""Tests for the conditions simulator."""

import pytest
from core.simulator import (
    WeatherConditions,
    SLIDER_RANGES,
    cardinal_direction,
    output_curve,
    simulate,
    update,
)


class TestSimulate:

    def test_default_conditions(self):
        result = simulate(WeatherConditions())
        assert result.wind_output == 10
        assert result.wind_efficiency == 68
        assert result.solar_output == 64
        assert result.solar_efficiency == 88
        assert result.wind_heading == "NE"

    def test_full_wind(self):
        result = simulate(WeatherConditions(wind_speed_kmh=50, wind_direction_deg=90))
        assert result.wind_output == 100
        assert result.wind_efficiency == 90

    def test_wind_efficiency_lowest_along_north_south(self):
        assert simulate(WeatherConditions(wind_direction_deg=0)).wind_efficiency == 45
        assert simulate(WeatherConditions(wind_direction_deg=180)).wind_efficiency == 45
        assert simulate(WeatherConditions(wind_direction_deg=270)).wind_efficiency == 90

    def test_overcast_kills_solar_output(self):
        result = simulate(WeatherConditions(cloud_cover_pct=100))
        assert result.solar_output == 0
        assert result.solar_efficiency == 43

    def test_optimal_sun(self):
        result = simulate(WeatherConditions(sun_intensity_pct=100, sun_angle_deg=45, cloud_cover_pct=0))
        assert result.solar_output == 100
        assert result.solar_efficiency == 100


@pytest.mark.parametrize("degrees,heading", [
    (0, "N"), (11.25, "NNE"), (90, "E"), (180, "S"), (270, "W"), (350, "N"), (360, "N"),
])
def test_cardinal_direction(degrees, heading):
    assert cardinal_direction(degrees) == heading


class TestUpdate:

    def test_returns_new_conditions(self):
        original = WeatherConditions()
        changed = update(original, wind_speed_kmh=20)
        assert changed.wind_speed_kmh == 20
        assert original.wind_speed_kmh == 5

    def test_clamps_to_slider_range(self):
        changed = update(WeatherConditions(), wind_speed_kmh=80, cloud_cover_pct=-5)
        assert changed.wind_speed_kmh == 50
        assert changed.cloud_cover_pct == 0

    def test_unknown_field(self):
        with pytest.raises(TypeError):
            update(WeatherConditions(), humidity=50)


class TestOutputCurve:

    def test_sweeps_slider_range(self):
        rows = output_curve(WeatherConditions(), "wind_speed_kmh")
        assert len(rows) == 21
        low, high, _ = SLIDER_RANGES["wind_speed_kmh"]
        assert rows[0]["wind_speed_kmh"] == low
        assert rows[-1]["wind_speed_kmh"] == high
        assert rows[-1]["wind_output"] == 100

    def test_wind_output_is_monotonic(self):
        outputs = [r["wind_output"] for r in output_curve(WeatherConditions(), "wind_speed_kmh")]
        assert outputs == sorted(outputs)

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            output_curve(WeatherConditions(), "humidity")
