"""
Geographic factor estimators for wind and solar scoring.

All functions are pure and total over lat in [-90, 90], lng in [-180, 180],
and return 0-100 sub-scores. They are deliberately coarse:

- Coastal proximity uses a flat-earth distance to a handful of known coastal
  cities, not real coastline data, and is not geodesically exact.
- Altitude is a synthetic estimate from terrain type plus a smooth
  lat/lng perturbation, not real elevation data.
"""

import math
from typing import Any, Dict, Tuple

from core.models import WindFactors, clamp
from core.terrain import DEFAULT_TERRAIN, TerrainType, parse_terrain

KM_PER_DEGREE = 111.0
COASTAL_DECAY_KM = 1000.0

# (lat, lng) of reference coastal cities
COASTAL_REFERENCE_POINTS: Tuple[Tuple[float, float], ...] = (
    # North America west coast
    (37.7749, -122.4194),  # San Francisco
    (34.0522, -118.2437),  # Los Angeles
    (47.6062, -122.3321),  # Seattle
    # North America east coast
    (40.7128, -74.006),    # New York
    (42.3601, -71.0589),   # Boston
    (25.7617, -80.1918),   # Miami
    # Europe
    (51.5074, -0.1278),    # London
    (41.9028, 12.4964),    # Rome
    (55.6761, 12.5683),    # Copenhagen
    # Asia
    (35.6762, 139.6503),   # Tokyo
    (22.3193, 114.1694),   # Hong Kong
    (1.3521, 103.8198),    # Singapore
    # Australia
    (-33.8688, 151.2093),  # Sydney
    (-37.8136, 144.9631),  # Melbourne
    # South America
    (-22.9068, -43.1729),  # Rio de Janeiro
    (-12.0464, -77.0428),  # Lima
)

BASE_ALTITUDE_METERS: Dict[TerrainType, float] = {
    TerrainType.MOUNTAINS: 2000,
    TerrainType.PLAINS: 500,
    TerrainType.DESERT: 800,
    TerrainType.COASTAL: 50,
    TerrainType.FOREST: 600,
    TerrainType.URBAN: 100,
    TerrainType.SUBURBAN: 150,
    TerrainType.TROPICAL: 300,
    TerrainType.ARCTIC: 400,
    TerrainType.TEMPERATE: 300,
}

ALTITUDE_PEAK_METERS = 3000.0


def flat_distance_km(lat: float, lng: float, ref_lat: float, ref_lng: float) -> float:
    """Euclidean distance with the longitude delta scaled by cos(lat)."""
    dy = (lat - ref_lat) * KM_PER_DEGREE
    dx = (lng - ref_lng) * KM_PER_DEGREE * math.cos(math.radians(lat))
    return math.sqrt(dy ** 2 + dx ** 2)


def nearest_coast_km(lat: float, lng: float) -> float:
    return min(
        flat_distance_km(lat, lng, ref_lat, ref_lng)
        for ref_lat, ref_lng in COASTAL_REFERENCE_POINTS
    )


def coastal_proximity(lat: float, lng: float) -> float:
    """
    Score closeness to the coast: 100 at a reference point, falling
    linearly to 0 at 1000 km.
    """
    distance = nearest_coast_km(lat, lng)
    return max(0.0, 100.0 - distance / COASTAL_DECAY_KM * 100.0)


def estimate_altitude_meters(lat: float, lng: float, terrain: Any) -> float:
    base = BASE_ALTITUDE_METERS.get(parse_terrain(terrain), BASE_ALTITUDE_METERS[DEFAULT_TERRAIN])
    return base + math.sin(lat * 0.1) * 300 + math.cos(lng * 0.1) * 300


def estimate_altitude(lat: float, lng: float, terrain: Any) -> float:
    """
    Altitude sub-score.

    Rises linearly to 100 at 3000 m; above that thinner air reduces wind
    power, so the score decays by 30 points per additional 2000 m.
    """
    altitude = estimate_altitude_meters(lat, lng, terrain)
    if altitude <= ALTITUDE_PEAK_METERS:
        score = altitude / ALTITUDE_PEAK_METERS * 100
    else:
        score = 100 - (altitude - ALTITUDE_PEAK_METERS) / 2000 * 30
    return clamp(score, 0.0, 100.0)


def seasonal_wind_factor(lat: float) -> float:
    """
    Latitude band wind factor.

    Tropics (<30°): steady trade winds. Mid-latitudes (30-60°): jet stream
    belt, the peak. Polar (>=60°): strong but variable.
    """
    abs_lat = abs(lat)
    if abs_lat < 30:
        return 70 + abs_lat / 30 * 20
    elif abs_lat < 60:
        return 80 + (abs_lat - 30) / 30 * 15
    return 90 - (abs_lat - 60) / 30 * 10


def seasonal_variation(lat: float) -> float:
    """Higher latitudes see more seasonal variation."""
    return 85.0 if abs(lat) > 30 else 70.0


def solar_latitude_adjustment(lat: float) -> float:
    """Sun-angle, seasonal and day-length adjustment, 0-30 points."""
    abs_lat = abs(lat)
    cos_factor = math.cos(math.radians(abs_lat))
    seasonal = 1 - abs_lat / 90 * 0.3
    day_length = 1 - abs_lat / 90 * 0.2
    return (cos_factor * 0.6 + seasonal * 0.25 + day_length * 0.15) * 30


def wind_factors(lat: float, lng: float, terrain: Any) -> WindFactors:
    """Compute all four wind sub-scores for a point."""
    return WindFactors(
        latitude=seasonal_wind_factor(lat),
        altitude=estimate_altitude(lat, lng, terrain),
        coastal=coastal_proximity(lat, lng),
        seasonal=seasonal_variation(lat),
    )
