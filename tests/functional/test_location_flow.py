"""End-to-end analysis flows with the network mocked out."""

import pytest
import requests
from unittest.mock import MagicMock, patch
from core.analyzer import LocationAnalyzer, NOT_FOUND_MESSAGE
from core.estimator import estimate
from core.models import Recommendation, ScoreSource
from core.terrain import TerrainType
from loaders.geocoder import Geocoder
from loaders.weather import WeatherLoader


@pytest.fixture
def geocoder():
    with patch('requests.Session') as mock_session:
        geo = Geocoder(user_agent="tests/1.0")
        geo.session = mock_session.return_value
        geo.min_interval = 0
        yield geo


@pytest.fixture
def analyzer(geocoder):
    return LocationAnalyzer(geocoder=geocoder, weather=WeatherLoader(use_mock=True))


def nominatim_returns(geocoder, payload):
    response = MagicMock()
    response.json.return_value = payload
    geocoder.session.get.return_value = response


def test_search_then_switch_to_weather(analyzer, geocoder):
    nominatim_returns(geocoder, [{
        "lat": "37.8199", "lon": "-122.4783",
        "display_name": "San Francisco Bay, California, USA",
    }])

    heuristic = analyzer.analyze_query("San Francisco Bay")
    assert heuristic.result.location.terrain is TerrainType.COASTAL
    assert heuristic.result.source is ScoreSource.TERRAIN
    assert heuristic.result.wind_score == 85

    # Same query again is served from the geocoder cache
    live = analyzer.analyze_query("San Francisco Bay", use_weather=True)
    assert geocoder.session.get.call_count == 1
    assert live.result.source is ScoreSource.WEATHER
    assert live.result.recommendation is Recommendation.WIND
    assert analyzer.current is live.result


def test_geocoder_outage_keeps_last_result(analyzer, geocoder):
    nominatim_returns(geocoder, [{"lat": "27.1258", "lon": "2.4519", "display_name": "Sahara"}])
    first = analyzer.analyze_query("Sahara")

    geocoder.session.get.side_effect = requests.ConnectionError("down")
    outcome = analyzer.analyze_query("Atacama")

    assert outcome.message == NOT_FOUND_MESSAGE
    assert analyzer.current is first.result
    assert analyzer.current.recommendation is Recommendation.SOLAR


def test_map_click_on_open_ocean(analyzer, geocoder):
    nominatim_returns(geocoder, {"error": "Unable to geocode"})
    outcome = analyzer.analyze_point(0.0, -30.0)
    assert outcome.ok
    assert outcome.result.location.terrain is TerrainType.TEMPERATE
    assert outcome.result.location.name == "Location at 0.0000, -30.0000"


def test_household_estimate_from_mock_climate():
    climate = WeatherLoader(use_mock=True).daily_climate(38.7, -9.1)
    result = estimate(climate)
    assert result.solar.monthly_kwh == pytest.approx(331.5)
    assert result.wind.monthly_kwh > 0
    assert result.wind.payback_months < result.solar.payback_months
