"""
Core module for the Renewable Energy Explorer.
Contains data models, the terrain catalog, factor estimators and the
scoring engine, plus the dashboard simulator and household estimator.
"""

from core.terrain import TerrainType, TerrainPotential, lookup_wind, lookup_solar, parse_terrain
from core.models import (
    Location,
    WindFactors,
    WeatherSnapshot,
    IrradianceReading,
    DailyClimate,
    AnalysisResult,
    Recommendation,
    ScoreSource,
)
from core.scoring import ScoringEngine, get_engine, recommend
from core.simulator import WeatherConditions, SimulationResult, simulate
from core.estimator import HouseholdInputs, EnergyEstimate, estimate

__all__ = [
    # Catalog
    "TerrainType",
    "TerrainPotential",
    "lookup_wind",
    "lookup_solar",
    "parse_terrain",
    # Models
    "Location",
    "WindFactors",
    "WeatherSnapshot",
    "IrradianceReading",
    "DailyClimate",
    "AnalysisResult",
    "Recommendation",
    "ScoreSource",
    # Scoring
    "ScoringEngine",
    "get_engine",
    "recommend",
    # Dashboard tools
    "WeatherConditions",
    "SimulationResult",
    "simulate",
    "HouseholdInputs",
    "EnergyEstimate",
    "estimate",
]
