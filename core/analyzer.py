"""
Location Analyzer - Connects the data loaders to the scoring engine.

Turns a user action (search, map click, sample pick) into an
AnalysisResult, substituting safe defaults when a data source fails, and
discarding results of requests that a newer request has superseded.
"""

import itertools
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional

from core.models import AnalysisResult, Location
from core.scoring import ScoringEngine, get_engine

log = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Address not found. Try a different search."
UNAVAILABLE_MESSAGE = "Location data unavailable. Showing terrain-based estimate."
STALE_MESSAGE = "A newer request replaced this one."


@dataclass
class AnalysisOutcome:
    """What the UI receives for one request."""
    request_id: int
    result: Optional[AnalysisResult] = None
    message: Optional[str] = None
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.result is not None and not self.stale


class LocationAnalyzer:
    """
    Runs analyses and tracks which one is current.

    Each request gets an increasing id. When a request finishes after a
    newer one has started, its result is dropped ("last request wins") and
    ``current`` keeps showing the last good result.
    """

    def __init__(self, geocoder: Any = None, weather: Any = None,
                 engine: Optional[ScoringEngine] = None):
        if geocoder is None:
            from loaders.geocoder import get_geocoder
            geocoder = get_geocoder()
        if weather is None:
            from loaders.weather import get_weather_loader
            weather = get_weather_loader()

        self.geocoder = geocoder
        self.weather = weather
        self.engine = engine or get_engine()
        self.current: Optional[AnalysisResult] = None
        self._ids = itertools.count(1)
        self._latest = 0

    # ───────────────────────────────────────────────────────────────────────
    # Request bookkeeping
    # ───────────────────────────────────────────────────────────────────────
    def begin_request(self) -> int:
        self._latest = next(self._ids)
        return self._latest

    def is_current(self, request_id: int) -> bool:
        return request_id == self._latest

    def _finish(self, request_id: int, result: Optional[AnalysisResult],
                message: Optional[str] = None) -> AnalysisOutcome:
        if not self.is_current(request_id):
            log.debug(f"Discarding stale result for request #{request_id}")
            return AnalysisOutcome(request_id, message=STALE_MESSAGE, stale=True)
        if result is not None:
            self.current = result
        return AnalysisOutcome(request_id, result=result, message=message)

    # ───────────────────────────────────────────────────────────────────────
    # Entry points
    # ───────────────────────────────────────────────────────────────────────
    def analyze_location(self, location: Location, use_weather: bool = False,
                         on_date: Optional[date] = None,
                         request_id: Optional[int] = None) -> AnalysisOutcome:
        """
        Score a location that is already known.

        With ``use_weather`` the weather strategy is used when both weather
        and irradiance readings are available; otherwise the terrain
        heuristic is used and a message explains why.
        """
        request_id = request_id or self.begin_request()
        message = None

        if use_weather:
            weather = self.weather.current_weather(location.lat, location.lng)
            irradiance = None
            if weather is not None:
                irradiance = self.weather.solar_irradiance(location.lat, location.lng, on_date)
            if weather is not None and irradiance is not None:
                result = self.engine.analyze(location, weather=weather, irradiance=irradiance)
                return self._finish(request_id, result)
            log.warning(f"Weather data unavailable for {location.name}, using terrain heuristic")
            message = UNAVAILABLE_MESSAGE

        result = self.engine.analyze(location)
        return self._finish(request_id, result, message)

    def analyze_query(self, query: str, use_weather: bool = False) -> AnalysisOutcome:
        """Geocode a search string, then analyze the first match."""
        request_id = self.begin_request()
        location = self.geocoder.geocode(query)
        if location is None:
            return self._finish(request_id, None, NOT_FOUND_MESSAGE)
        return self.analyze_location(location, use_weather=use_weather, request_id=request_id)

    def analyze_point(self, lat: float, lng: float, use_weather: bool = False) -> AnalysisOutcome:
        """Analyze a clicked map point, naming it via reverse geocoding."""
        request_id = self.begin_request()
        location = self.geocoder.reverse_geocode(lat, lng)
        return self.analyze_location(location, use_weather=use_weather, request_id=request_id)

    def analyze_sample(self, sample: dict, use_weather: bool = False) -> AnalysisOutcome:
        """Analyze one of the curated sample locations. Needs no network unless ``use_weather``."""
        location = Location.create(
            sample["lat"], sample["lng"], name=sample["name"], terrain=sample.get("terrain")
        )
        return self.analyze_location(location, use_weather=use_weather)

    def compare(self, locations: List[Location]) -> List[AnalysisResult]:
        """Score several locations with the terrain heuristic, best total first."""
        results = [self.engine.analyze(location) for location in locations]
        return sorted(results, key=lambda r: r.wind_score + r.solar_score, reverse=True)
