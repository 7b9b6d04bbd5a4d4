"""
Energy Potential Scoring Engine

Maps a location (and optionally live weather readings) to 0-100 wind and
solar scores plus a recommendation. Two strategies share one interface:

- Terrain heuristic: catalog baseline (70%) adjusted by situational
  geographic factors (30%).
- Weather data: current wind/pressure readings and daily irradiance.

The engine holds no state; identical inputs give identical results.
"""

import math
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from core import geo_factors
from core.models import (
    AnalysisResult,
    IrradianceReading,
    Location,
    Recommendation,
    ScoreSource,
    WeatherSnapshot,
    WindFactors,
    clamp,
)
from core.terrain import TerrainType, lookup_solar, lookup_wind, terrain_label

log = logging.getLogger(__name__)

RECOMMENDATION_MARGIN = 15
MAX_PRACTICAL_GHI = 7000.0  # Wh/m² per day
TERRAIN_WEIGHT = 0.7
FACTOR_WEIGHT = 0.3


def round_half_up(value: float) -> int:
    """Round halves upwards (2.5 -> 3), not to the nearest even."""
    return int(math.floor(value + 0.5))


# ═══════════════════════════════════════════════════════════════════════════
# WIND FACTOR WEIGHT PROFILES
# ═══════════════════════════════════════════════════════════════════════════
@dataclass(frozen=True)
class WindWeightProfile:
    """How much each situational factor matters for a terrain. Sums to 1.0."""
    latitude: float
    altitude: float
    coastal: float
    seasonal: float

    def combine(self, factors: WindFactors) -> float:
        return (
            factors.latitude * self.latitude
            + factors.altitude * self.altitude
            + factors.coastal * self.coastal
            + factors.seasonal * self.seasonal
        )


DEFAULT_WIND_WEIGHTS = WindWeightProfile(latitude=0.3, altitude=0.2, coastal=0.3, seasonal=0.2)

WIND_WEIGHTS: Dict[TerrainType, WindWeightProfile] = {
    TerrainType.COASTAL: WindWeightProfile(latitude=0.2, altitude=0.1, coastal=0.6, seasonal=0.1),
    TerrainType.MOUNTAINS: WindWeightProfile(latitude=0.2, altitude=0.6, coastal=0.1, seasonal=0.1),
    TerrainType.PLAINS: WindWeightProfile(latitude=0.4, altitude=0.2, coastal=0.2, seasonal=0.2),
    TerrainType.DESERT: WindWeightProfile(latitude=0.3, altitude=0.3, coastal=0.2, seasonal=0.2),
    TerrainType.ARCTIC: WindWeightProfile(latitude=0.5, altitude=0.2, coastal=0.1, seasonal=0.2),
}


def get_wind_weights(terrain: TerrainType) -> WindWeightProfile:
    return WIND_WEIGHTS.get(terrain, DEFAULT_WIND_WEIGHTS)


def recommend(solar_score: float, wind_score: float) -> Recommendation:
    """
    Pick a technology, with a 15-point dead zone so near-ties stay "both".
    """
    if solar_score > wind_score + RECOMMENDATION_MARGIN:
        return Recommendation.SOLAR
    if wind_score > solar_score + RECOMMENDATION_MARGIN:
        return Recommendation.WIND
    return Recommendation.BOTH


# ═══════════════════════════════════════════════════════════════════════════
# TERRAIN HEURISTIC STRATEGY
# ═══════════════════════════════════════════════════════════════════════════
class TerrainStrategy:
    """Scores a location from its terrain class and coordinates alone."""

    def wind(self, location: Location) -> Dict:
        base = lookup_wind(location.terrain)
        factors = geo_factors.wind_factors(location.lat, location.lng, location.terrain)
        combined = get_wind_weights(location.terrain).combine(factors)
        score = round_half_up(base.base * TERRAIN_WEIGHT + combined * FACTOR_WEIGHT)

        notes = [base.description]
        if factors.coastal > 70:
            notes.append("Proximity to the coast boosts wind potential")
        if factors.altitude > 70:
            notes.append("Elevation contributes to stronger winds")
        if abs(location.lat) > 45:
            notes.append("High latitude brings stronger but more seasonal winds")

        return {
            "score": clamp(score, 0, 100),
            "description": ". ".join(notes),
            "factors": factors,
        }

    def solar(self, location: Location) -> Dict:
        base = lookup_solar(location.terrain)
        adjustment = geo_factors.solar_latitude_adjustment(location.lat)
        score = base.base + adjustment - abs(location.lat) * 0.3
        return {
            "score": clamp(score, 0.0, 100.0),
            "description": base.description,
        }


# ═══════════════════════════════════════════════════════════════════════════
# WEATHER DATA STRATEGY
# ═══════════════════════════════════════════════════════════════════════════
def wind_speed_factor(speed: float) -> float:
    """0-3 m/s low, 3-7 moderate, 7-12 good, 12+ excellent."""
    if speed < 3:
        return max(0.0, speed * 20)
    elif speed < 7:
        return 60 + (speed - 3) * 10
    elif speed < 12:
        return 80 + (speed - 7) * 4
    return 100.0


def gust_factor(speed: float, gust: Optional[float]) -> float:
    """Steadier wind scores higher. 80 when no gust reading is available."""
    if not gust:
        return 80.0
    if speed <= 0:
        return 0.0
    spread = (gust - speed) / speed * 100
    return 100 - min(100.0, spread)


def pressure_factor(pressure_hpa: float) -> float:
    """
    Lower pressure is used as a proxy for higher altitude.

    Not capped above: below 900 hPa the factor exceeds 100.
    """
    return max(0.0, 100 - (pressure_hpa - 900) / 2)


def actual_ghi(irradiance: IrradianceReading, cloud_cover_pct: float) -> float:
    """Interpolate clear/cloudy sky GHI by the current cloud fraction."""
    cloud = clamp(cloud_cover_pct, 0.0, 100.0) / 100
    return irradiance.clear_sky_ghi * (1 - cloud) + irradiance.cloudy_sky_ghi * cloud


class WeatherStrategy:
    """Scores a location from current weather and daily irradiance."""

    def wind(self, weather: Optional[WeatherSnapshot]) -> Dict:
        if weather is None:
            return {"score": 0, "description": "Wind data unavailable"}

        speed = weather.wind_speed_ms
        score = round_half_up(
            wind_speed_factor(speed) * 0.7
            + gust_factor(speed, weather.wind_gust_ms) * 0.2
            + pressure_factor(weather.pressure_hpa) * 0.1
        )

        if speed < 3:
            description = "Low wind speeds, minimal energy generation potential"
        elif speed < 7:
            description = "Moderate wind speeds, suitable for small to medium turbines"
        elif speed < 12:
            description = "Good wind speeds, excellent for energy generation"
        else:
            description = ("Very high wind speeds, optimal for wind energy "
                           "(may require turbine cut-out protection)")

        if weather.wind_gust_ms and weather.wind_gust_ms > speed * 1.5:
            description += ". Gusty conditions may affect turbine efficiency"

        return {"score": clamp(score, 0, 100), "description": description}

    def solar(self, weather: Optional[WeatherSnapshot],
              irradiance: Optional[IrradianceReading]) -> Dict:
        if weather is None or irradiance is None:
            return {"score": 0, "description": "Solar irradiance data unavailable"}

        ghi = actual_ghi(irradiance, weather.cloud_cover_pct)
        score = min(100, round_half_up(ghi / MAX_PRACTICAL_GHI * 100))

        if ghi > 3000:
            description = "Excellent solar potential with high irradiance levels"
        elif ghi > 2000:
            description = "Very good solar potential with good irradiance levels"
        elif ghi > 1000:
            description = "Moderate solar potential"
        else:
            description = "Limited solar potential due to low irradiance levels"

        if weather.cloud_cover_pct > 70:
            description += ". Heavy cloud cover is currently reducing efficiency"
        elif weather.cloud_cover_pct > 30:
            description += ". Partial cloud cover is slightly reducing efficiency"
        else:
            description += ". Clear skies are optimal for solar generation"

        return {"score": max(0, score), "description": description}


# ═══════════════════════════════════════════════════════════════════════════
# SCORING ENGINE
# ═══════════════════════════════════════════════════════════════════════════
class ScoringEngine:
    """
    Single entry point for both scoring strategies.

    ``analyze(location)`` uses the terrain heuristic. Passing ``weather``
    and/or ``irradiance`` switches to the weather-data strategy; a missing
    reading scores 0 for the part it feeds.
    """

    def __init__(self):
        self.terrain_strategy = TerrainStrategy()
        self.weather_strategy = WeatherStrategy()

    def analyze(
        self,
        location: Location,
        weather: Optional[WeatherSnapshot] = None,
        irradiance: Optional[IrradianceReading] = None,
    ) -> AnalysisResult:
        if weather is None and irradiance is None:
            return self._analyze_terrain(location)
        return self._analyze_weather(location, weather, irradiance)

    def _analyze_terrain(self, location: Location) -> AnalysisResult:
        wind = self.terrain_strategy.wind(location)
        solar = self.terrain_strategy.solar(location)
        return AnalysisResult(
            location=location,
            wind_score=wind["score"],
            solar_score=solar["score"],
            wind_description=wind["description"],
            solar_description=solar["description"],
            wind_factors=wind["factors"],
            recommendation=recommend(solar["score"], wind["score"]),
            source=ScoreSource.TERRAIN,
        )

    def _analyze_weather(
        self,
        location: Location,
        weather: Optional[WeatherSnapshot],
        irradiance: Optional[IrradianceReading],
    ) -> AnalysisResult:
        wind = self.weather_strategy.wind(weather)
        solar = self.weather_strategy.solar(weather, irradiance)
        return AnalysisResult(
            location=location,
            wind_score=wind["score"],
            solar_score=solar["score"],
            wind_description=wind["description"],
            solar_description=solar["description"],
            recommendation=recommend(solar["score"], wind["score"]),
            source=ScoreSource.WEATHER,
        )

    def explain(self, result: AnalysisResult) -> str:
        """Generate a human-readable explanation of an analysis."""
        location = result.location
        lines = [f"Location: {location.name}"]
        lines.append(
            f"Lat {location.lat:.2f}°, Lng {location.lng:.2f}°, "
            f"Terrain: {terrain_label(location.terrain)}"
        )
        lines.append("")
        lines.append(f"Wind: {result.wind_score:.0f}/100 - {result.wind_description}")
        lines.append(f"Solar: {result.solar_score:.0f}/100 - {result.solar_description}")

        if result.wind_factors:
            weights = get_wind_weights(location.terrain)
            lines.append("\nWind factors (score × weight):")
            for name in ("latitude", "altitude", "coastal", "seasonal"):
                value = getattr(result.wind_factors, name)
                lines.append(f"  {name}: {value:.1f} × {getattr(weights, name):.1f}")

        lines.append(f"\nRecommendation: {result.recommendation.value}")
        return "\n".join(lines)


# ═══════════════════════════════════════════════════════════════════════════
# FACTORY FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════
_engine: Optional[ScoringEngine] = None


def get_engine() -> ScoringEngine:
    """Get the shared scoring engine."""
    global _engine
    if _engine is None:
        _engine = ScoringEngine()
    return _engine


def list_weight_profiles() -> List[Dict[str, float]]:
    """List the wind weight profile applied to each terrain."""
    rows = []
    for terrain in TerrainType:
        weights = get_wind_weights(terrain)
        rows.append({
            "terrain": terrain.value,
            "latitude": weights.latitude,
            "altitude": weights.altitude,
            "coastal": weights.coastal,
            "seasonal": weights.seasonal,
        })
    return rows
