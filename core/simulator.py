"""
Conditions Simulator - Hypothetical wind and solar output for the dashboard.

Slider-driven what-if model: how wind speed/direction, sun intensity/angle
and cloud cover change the output of a small wind farm and solar array.
Figures are illustrative percentages, not physical predictions.
"""

from dataclasses import dataclass, replace
from typing import Dict, List

from core.models import clamp
from core.scoring import round_half_up

MAX_WIND_SPEED_KMH = 50
OPTIMAL_SUN_ANGLE = 45

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

# name -> (min, max, step)
SLIDER_RANGES: Dict[str, tuple] = {
    "wind_speed_kmh": (0, 50, 1),
    "wind_direction_deg": (0, 360, 5),
    "sun_intensity_pct": (0, 100, 1),
    "sun_angle_deg": (0, 90, 1),
    "cloud_cover_pct": (0, 100, 1),
}


@dataclass(frozen=True)
class WeatherConditions:
    """Environmental conditions set on the dashboard controls."""
    wind_speed_kmh: float = 5
    wind_direction_deg: float = 45
    sun_intensity_pct: float = 85
    sun_angle_deg: float = 60
    cloud_cover_pct: float = 10


@dataclass(frozen=True)
class SimulationResult:
    wind_output: int
    wind_efficiency: int
    solar_output: int
    solar_efficiency: int
    wind_heading: str


def update(conditions: WeatherConditions, **changes) -> WeatherConditions:
    """
    Return new conditions with the given fields changed.

    Values are clamped to their slider range; unknown fields raise TypeError.
    """
    for name, value in changes.items():
        if name not in SLIDER_RANGES:
            raise TypeError(f"Unknown condition: {name}")
        low, high, _ = SLIDER_RANGES[name]
        changes[name] = clamp(value, low, high)
    return replace(conditions, **changes)


def wind_output(conditions: WeatherConditions) -> int:
    """Share of rated output, linear in wind speed up to 50 km/h."""
    return round_half_up(conditions.wind_speed_kmh / MAX_WIND_SPEED_KMH * 100)


def wind_efficiency(conditions: WeatherConditions) -> int:
    """90% for a 90° or 270° heading, down to 45% at 0° or 180°."""
    offset = abs((conditions.wind_direction_deg % 180) - 90)
    return round_half_up(90 - offset / 2)


def solar_output(conditions: WeatherConditions) -> int:
    angle_factor = 90 - abs(conditions.sun_angle_deg - OPTIMAL_SUN_ANGLE)
    return round_half_up(
        conditions.sun_intensity_pct * angle_factor / 90
        * (100 - conditions.cloud_cover_pct) / 100
    )


def solar_efficiency(conditions: WeatherConditions) -> int:
    return round_half_up(
        100
        - conditions.cloud_cover_pct / 2
        - abs(conditions.sun_angle_deg - OPTIMAL_SUN_ANGLE) / 2
    )


def cardinal_direction(degrees: float) -> str:
    """Convert a bearing to a 16-point compass heading."""
    index = round_half_up(degrees / 22.5) % 16
    return COMPASS_POINTS[index]


def simulate(conditions: WeatherConditions) -> SimulationResult:
    return SimulationResult(
        wind_output=wind_output(conditions),
        wind_efficiency=wind_efficiency(conditions),
        solar_output=solar_output(conditions),
        solar_efficiency=solar_efficiency(conditions),
        wind_heading=cardinal_direction(conditions.wind_direction_deg),
    )


def output_curve(conditions: WeatherConditions, field: str, points: int = 21) -> List[Dict[str, float]]:
    """
    Sweep one condition across its slider range, holding the others fixed.

    Used for the dashboard's sensitivity charts.
    """
    if field not in SLIDER_RANGES:
        raise ValueError(f"Unknown condition: {field}")

    low, high, _ = SLIDER_RANGES[field]
    rows = []
    for i in range(points):
        value = low + (high - low) * i / max(1, points - 1)
        result = simulate(update(conditions, **{field: value}))
        rows.append({
            field: value,
            "wind_output": result.wind_output,
            "solar_output": result.solar_output,
            "wind_efficiency": result.wind_efficiency,
            "solar_efficiency": result.solar_efficiency,
        })
    return rows
