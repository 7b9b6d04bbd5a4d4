"""
Core data models for the Renewable Energy Explorer.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

from core.terrain import TerrainType, parse_terrain


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class Recommendation(Enum):
    """Which technology a location favours."""
    SOLAR = "solar"
    WIND = "wind"
    BOTH = "both"


class ScoreSource(Enum):
    """Which inputs produced an analysis."""
    TERRAIN = "terrain"
    WEATHER = "weather"


@dataclass(frozen=True)
class Location:
    """
    A point selected by the user, with its best-effort terrain class.
    Lives only for the duration of one analysis.
    """
    lat: float
    lng: float
    name: str
    terrain: TerrainType = TerrainType.TEMPERATE

    @classmethod
    def create(cls, lat: float, lng: float, name: str = "", terrain: Any = None) -> "Location":
        """Build a Location with coordinates clamped to valid ranges."""
        lat = clamp(float(lat), -90.0, 90.0)
        lng = clamp(float(lng), -180.0, 180.0)
        if not name:
            name = f"Location at {lat:.4f}, {lng:.4f}"
        return cls(lat=lat, lng=lng, name=name, terrain=parse_terrain(terrain))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "name": self.name,
            "terrain": self.terrain.value,
        }


@dataclass(frozen=True)
class WindFactors:
    """Situational wind sub-scores, each 0-100."""
    latitude: float
    altitude: float
    coastal: float
    seasonal: float


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current meteorological readings for a point."""
    wind_speed_ms: float
    wind_direction_deg: float
    cloud_cover_pct: float
    pressure_hpa: float
    wind_gust_ms: Optional[float] = None
    uv_index: Optional[float] = None


@dataclass(frozen=True)
class IrradianceReading:
    """Daily solar irradiance totals in Wh/m² for clear and cloudy skies."""
    clear_sky_ghi: float
    cloudy_sky_ghi: float
    clear_sky_dni: float = 0.0
    cloudy_sky_dni: float = 0.0
    clear_sky_dhi: float = 0.0
    cloudy_sky_dhi: float = 0.0


@dataclass(frozen=True)
class DailyClimate:
    """Daily forecast values used by the household estimator."""
    uv_index: Optional[float] = None
    wind_speed_ms: Optional[float] = None


@dataclass(frozen=True)
class AnalysisResult:
    """
    The output of one location analysis.

    Superseded by the next analysis, never mutated. ``wind_factors`` is only
    populated by the terrain heuristic.
    """
    location: Location
    wind_score: float
    solar_score: float
    wind_description: str
    solar_description: str
    recommendation: Recommendation
    source: ScoreSource = ScoreSource.TERRAIN
    wind_factors: Optional[WindFactors] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location.to_dict(),
            "wind_score": self.wind_score,
            "solar_score": self.solar_score,
            "wind_description": self.wind_description,
            "solar_description": self.solar_description,
            "recommendation": self.recommendation.value,
            "source": self.source.value,
            "wind_factors": asdict(self.wind_factors) if self.wind_factors else None,
        }
