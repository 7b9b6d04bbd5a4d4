"""
Geocoder - Convert place names to locations using Nominatim.

Features:
- Rate limiting (1 request/second per Nominatim policy)
- Bounded in-memory LRU cache to avoid repeated lookups
- One retry on transient failures
- Best-effort terrain classification of every result
"""

import time
import logging
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

import requests

from core.config import get_settings
from core.models import Location
from core.terrain import (
    DEFAULT_TERRAIN,
    TerrainType,
    classify_address_tags,
    classify_display_name,
)
from loaders.errors import DataUnavailable, MalformedResponse, NoResults
from loaders.http import get_json, retry_transient

log = logging.getLogger(__name__)

# Rate limiter - tracks last request time
_last_request_time = 0.0
_MIN_REQUEST_INTERVAL = 1.1  # 1.1 seconds between requests (slightly over 1/sec)
_CACHE_SIZE = 256  # most recent lookups kept per process


class Geocoder:
    """
    Geocoder using the OpenStreetMap Nominatim API.

    Respects rate limits: max 1 request per second.
    """

    SEARCH_URL = "https://nominatim.openstreetmap.org/search"
    REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"

    def __init__(self, user_agent: Optional[str] = None, timeout: Optional[float] = None):
        settings = get_settings()
        self.timeout = timeout or settings.http_timeout
        self.min_interval = _MIN_REQUEST_INTERVAL
        self.cache_size = _CACHE_SIZE
        self._cache: "OrderedDict[str, Location]" = OrderedDict()
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent or settings.user_agent})

    def _rate_limit(self):
        """Ensure we don't exceed 1 request per second."""
        global _last_request_time
        elapsed = time.time() - _last_request_time
        if elapsed < self.min_interval:
            time.sleep(self.min_interval - elapsed)
        _last_request_time = time.time()

    def _cache_get(self, key: str) -> Optional[Location]:
        location = self._cache.get(key)
        if location is not None:
            self._cache.move_to_end(key)
        return location

    def _cache_put(self, key: str, location: Location):
        """Store a lookup, evicting the least recently used past cache_size."""
        self._cache[key] = location
        self._cache.move_to_end(key)
        while len(self._cache) > self.cache_size:
            self._cache.popitem(last=False)

    @retry_transient
    def _make_request(self, url: str, params: Dict) -> Any:
        """Make a rate-limited request with retry."""
        self._rate_limit()
        return get_json(self.session, url, params, self.timeout)

    def _search(self, query: str) -> Dict:
        params = {
            "q": query,
            "format": "jsonv2",
            "limit": 1,
        }
        results = self._make_request(self.SEARCH_URL, params)
        if not isinstance(results, list):
            raise MalformedResponse("Search response is not a list")
        if not results:
            raise NoResults(f"No results for: {query}")
        return results[0]

    def geocode(self, query: str) -> Optional[Location]:
        """
        Convert a free-form place name to a Location.

        Args:
            query: e.g. "Sahara Desert" or "123 Main St, Santa Cruz, CA"

        Returns:
            Location with terrain guessed from the display name, or None if
            not found or the service failed
        """
        query = (query or "").strip()
        if not query:
            return None

        key = query.lower()
        cached = self._cache_get(key)
        if cached is not None:
            log.debug(f"Cache hit for: {query}")
            return cached

        try:
            result = self._search(query)
            lat, lng = _parse_coordinates(result)
        except NoResults:
            log.warning(f"No results for: {query}")
            return None
        except DataUnavailable as e:
            log.error(f"Geocoding failed for '{query}': {e}")
            return None

        display_name = result.get("display_name") or query
        location = Location.create(
            lat, lng,
            name=display_name,
            terrain=classify_display_name(display_name),
        )

        self._cache_put(key, location)
        log.info(f"Geocoded: {query} -> ({location.lat}, {location.lng}) [{location.terrain.value}]")
        return location

    def reverse_geocode(self, lat: float, lng: float) -> Location:
        """
        Describe the point at lat/lng.

        Always returns a Location: when the lookup fails the name falls back
        to the coordinates and the terrain to temperate.
        """
        key = f"reverse:{lat:.6f},{lng:.6f}"
        cached = self._cache_get(key)
        if cached is not None:
            return cached

        params = {
            "lat": lat,
            "lon": lng,
            "format": "jsonv2",
            "zoom": 10,
            "addressdetails": 1,
        }

        try:
            result = self._make_request(self.REVERSE_URL, params)
            if not isinstance(result, dict):
                raise MalformedResponse("Reverse response is not an object")
            if "error" in result:
                raise NoResults(result["error"])
        except DataUnavailable as e:
            log.error(f"Reverse geocoding failed for ({lat:.4f}, {lng:.4f}): {e}")
            return Location.create(lat, lng, terrain=DEFAULT_TERRAIN)

        location = Location.create(
            lat, lng,
            name=result.get("display_name", ""),
            terrain=classify_address_tags(result.get("address")),
        )
        self._cache_put(key, location)
        return location

    def classify_terrain(self, lat: float, lng: float) -> TerrainType:
        """Best-effort terrain class for a point."""
        return self.reverse_geocode(lat, lng).terrain


def _parse_coordinates(result: Dict) -> Tuple[float, float]:
    try:
        return float(result["lat"]), float(result["lon"])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Bad coordinates in geocoder result: {e}") from e


# Singleton instance
_geocoder: Optional[Geocoder] = None

def get_geocoder() -> Geocoder:
    """Get the singleton geocoder instance."""
    global _geocoder
    if _geocoder is None:
        _geocoder = Geocoder()
    return _geocoder
