"""
Terrain Catalog - Baseline wind and solar potential per terrain type.

Terrain is the primary driver of a location's energy potential. The tables
below are built once at import and exposed read-only; every lookup is total
and falls back to ``temperate`` because terrain classification from
geocoders is best-effort.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

log = logging.getLogger(__name__)


class TerrainType(Enum):
    """Coarse land-cover classes used for baseline potential."""
    COASTAL = "coastal"
    MOUNTAINS = "mountains"
    PLAINS = "plains"
    DESERT = "desert"
    ARCTIC = "arctic"
    TEMPERATE = "temperate"
    TROPICAL = "tropical"
    SUBURBAN = "suburban"
    FOREST = "forest"
    URBAN = "urban"


DEFAULT_TERRAIN = TerrainType.TEMPERATE


@dataclass(frozen=True)
class TerrainPotential:
    """Baseline potential (0-100) and a short explanation."""
    base: float
    description: str


# ═══════════════════════════════════════════════════════════════════════════
# BASELINE TABLES
# ═══════════════════════════════════════════════════════════════════════════
WIND_POTENTIAL: Mapping[TerrainType, TerrainPotential] = MappingProxyType({
    TerrainType.COASTAL: TerrainPotential(
        85, "Excellent thanks to steady sea breezes and unobstructed wind flow"
    ),
    TerrainType.MOUNTAINS: TerrainPotential(
        90, "Very high due to pressure gradients and wind funnelling through passes"
    ),
    TerrainType.PLAINS: TerrainPotential(
        75, "Good thanks to open terrain and consistent wind patterns"
    ),
    TerrainType.DESERT: TerrainPotential(
        65, "Moderate to good, especially at night due to temperature differences"
    ),
    TerrainType.ARCTIC: TerrainPotential(
        80, "Strong winds, but extreme conditions can limit turbine operation"
    ),
    TerrainType.TEMPERATE: TerrainPotential(
        60, "Moderate, with wind patterns that vary through the seasons"
    ),
    TerrainType.TROPICAL: TerrainPotential(
        55, "Moderate, but shaped by seasonal monsoons and trade winds"
    ),
    TerrainType.SUBURBAN: TerrainPotential(
        40, "Reduced by buildings and structures that create turbulence"
    ),
    TerrainType.FOREST: TerrainPotential(
        30, "Low because trees block and disrupt the wind flow"
    ),
    TerrainType.URBAN: TerrainPotential(
        25, "Very low because buildings create turbulence and block the wind"
    ),
})

SOLAR_POTENTIAL: Mapping[TerrainType, TerrainPotential] = MappingProxyType({
    TerrainType.DESERT: TerrainPotential(
        95, "Excellent thanks to clear skies and strong direct sunlight"
    ),
    TerrainType.TROPICAL: TerrainPotential(
        85, "Very good, but can be affected by cloud cover and seasonal rains"
    ),
    TerrainType.COASTAL: TerrainPotential(
        75, "Good, but fog and marine layers can interfere in some regions"
    ),
    TerrainType.PLAINS: TerrainPotential(
        80, "Good solar exposure with minimal obstructions"
    ),
    TerrainType.SUBURBAN: TerrainPotential(
        70, "Fair, with some shading from buildings and trees"
    ),
    TerrainType.TEMPERATE: TerrainPotential(
        65, "Moderate, with significant seasonal variation"
    ),
    TerrainType.URBAN: TerrainPotential(
        60, "Reduced by air pollution and shadows from tall buildings"
    ),
    TerrainType.MOUNTAINS: TerrainPotential(
        70, "Variable, depending on slope orientation and cloud cover"
    ),
    TerrainType.FOREST: TerrainPotential(
        50, "Limited by shade from the tree canopy"
    ),
    TerrainType.ARCTIC: TerrainPotential(
        35, "Very low due to the low sun angle and long periods of darkness"
    ),
})

TERRAIN_LABELS: Mapping[TerrainType, str] = MappingProxyType({
    TerrainType.COASTAL: "Coastal",
    TerrainType.MOUNTAINS: "Mountains",
    TerrainType.PLAINS: "Plains",
    TerrainType.DESERT: "Desert",
    TerrainType.ARCTIC: "Arctic",
    TerrainType.TEMPERATE: "Temperate",
    TerrainType.TROPICAL: "Tropical",
    TerrainType.SUBURBAN: "Suburban",
    TerrainType.FOREST: "Forest",
    TerrainType.URBAN: "Urban",
})


# ═══════════════════════════════════════════════════════════════════════════
# LOOKUPS
# ═══════════════════════════════════════════════════════════════════════════
def parse_terrain(value: Any) -> TerrainType:
    """
    Coerce any value into a TerrainType.

    Accepts TerrainType members and their string values (case-insensitive).
    Anything else, including None and empty strings, maps to temperate.
    """
    if isinstance(value, TerrainType):
        return value
    if isinstance(value, str):
        try:
            return TerrainType(value.strip().lower())
        except ValueError:
            log.debug(f"Unrecognised terrain '{value}', using {DEFAULT_TERRAIN.value}")
    return DEFAULT_TERRAIN


def lookup_wind(terrain: Any) -> TerrainPotential:
    """Baseline wind potential for a terrain."""
    return WIND_POTENTIAL[parse_terrain(terrain)]


def lookup_solar(terrain: Any) -> TerrainPotential:
    """Baseline solar potential for a terrain."""
    return SOLAR_POTENTIAL[parse_terrain(terrain)]


def terrain_label(terrain: Any) -> str:
    return TERRAIN_LABELS[parse_terrain(terrain)]


# ═══════════════════════════════════════════════════════════════════════════
# CLASSIFICATION FROM GEOCODER OUTPUT
# ═══════════════════════════════════════════════════════════════════════════
# Checked in order, first match wins
DISPLAY_NAME_KEYWORDS = (
    (TerrainType.DESERT, ("desert", "sahara")),
    (TerrainType.COASTAL, ("coast", "beach", "bay")),
    (TerrainType.MOUNTAINS, ("mountain", "alps", "peak")),
    (TerrainType.FOREST, ("forest", "woods")),
    (TerrainType.URBAN, ("city", "downtown")),
)

ADDRESS_TAG_RULES = (
    (TerrainType.COASTAL, "natural", ("beach", "coastline")),
    (TerrainType.MOUNTAINS, "natural", ("mountain", "peak")),
    (TerrainType.FOREST, "landuse", ("forest",)),
    (TerrainType.URBAN, "place", ("city",)),
    (TerrainType.SUBURBAN, "place", ("suburb",)),
)


def classify_display_name(display_name: Optional[str]) -> TerrainType:
    """
    Guess terrain from a free-text place name.

    A keyword heuristic over the forward geocoder's display name, e.g.
    "Sahara" -> desert, "San Francisco Bay" -> coastal.
    """
    if not display_name:
        return DEFAULT_TERRAIN

    name = display_name.lower()
    for terrain, keywords in DISPLAY_NAME_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return terrain
    return DEFAULT_TERRAIN


def classify_address_tags(tags: Optional[Dict[str, Any]]) -> TerrainType:
    """Guess terrain from reverse geocoder address tags (natural/landuse/place)."""
    if not isinstance(tags, dict):
        return DEFAULT_TERRAIN

    for terrain, key, values in ADDRESS_TAG_RULES:
        if tags.get(key) in values:
            return terrain
    return DEFAULT_TERRAIN


# ═══════════════════════════════════════════════════════════════════════════
# SAMPLE LOCATIONS
# ═══════════════════════════════════════════════════════════════════════════
SAMPLE_LOCATIONS = (
    {"name": "Sahara Desert, Algeria", "lat": 27.1258, "lng": 2.4519, "terrain": TerrainType.DESERT},
    {"name": "San Francisco Bay, USA", "lat": 37.8199, "lng": -122.4783, "terrain": TerrainType.COASTAL},
    {"name": "Swiss Alps, Switzerland", "lat": 46.8182, "lng": 8.2275, "terrain": TerrainType.MOUNTAINS},
    {"name": "Great Plains, USA", "lat": 41.5, "lng": -99.8, "terrain": TerrainType.PLAINS},
    {"name": "Amazon Rainforest, Brazil", "lat": -3.4653, "lng": -62.2159, "terrain": TerrainType.FOREST},
    {"name": "Manhattan, New York, USA", "lat": 40.7831, "lng": -73.9712, "terrain": TerrainType.URBAN},
    {"name": "Palo Alto, California, USA", "lat": 37.4419, "lng": -122.143, "terrain": TerrainType.SUBURBAN},
    {"name": "Bali, Indonesia", "lat": -8.3405, "lng": 115.092, "terrain": TerrainType.TROPICAL},
    {"name": "Svalbard, Norway", "lat": 78.6569, "lng": 16.35, "terrain": TerrainType.ARCTIC},
    {"name": "Tuscany, Italy", "lat": 43.7711, "lng": 11.2486, "terrain": TerrainType.TEMPERATE},
)


def search_samples(term: str) -> List[Dict[str, Any]]:
    """Suggest sample locations whose name contains the term (3+ characters)."""
    if not term or len(term) <= 2:
        return []
    needle = term.lower()
    return [dict(sample) for sample in SAMPLE_LOCATIONS if needle in sample["name"].lower()]
