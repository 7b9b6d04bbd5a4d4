"""Tests for the OpenWeatherMap loader."""

import pytest
import requests
from datetime import date
from unittest.mock import MagicMock, patch
from loaders.errors import MalformedResponse
from loaders.weather import (
    WeatherLoader,
    MOCK_WEATHER,
    MOCK_IRRADIANCE,
    MOCK_CLIMATE,
    parse_current_weather,
    parse_daily_climate,
    parse_irradiance,
)

CURRENT_PAYLOAD = {
    "wind": {"speed": 5.1, "deg": 270, "gust": 8.2},
    "clouds": {"all": 20},
    "main": {"pressure": 1008},
}

ONECALL_PAYLOAD = {"daily": [{"uvi": 7.4, "wind_speed": 6.3}]}

SOLAR_PAYLOAD = {
    "irradiance": {
        "daily": [{
            "clear_sky": {"ghi": 6000.5, "dni": 8000.0, "dhi": 900.0},
            "cloudy_sky": {"ghi": 2000.0, "dni": 300.0, "dhi": 1500.0},
        }]
    }
}


@pytest.fixture
def live_loader():
    with patch('requests.Session') as mock_session:
        loader = WeatherLoader(api_key="test-key", use_mock=False, timeout=2)
        loader.session = mock_session.return_value
        yield loader


def respond(loader, payload):
    mock_response = MagicMock()
    mock_response.json.return_value = payload
    loader.session.get.return_value = mock_response
    return mock_response


class TestMockMode:

    def test_no_key_means_mock(self):
        loader = WeatherLoader(api_key="", use_mock=False)
        assert loader.use_mock

    def test_mock_readings(self):
        loader = WeatherLoader(api_key="test-key", use_mock=True)
        assert loader.current_weather(0, 0) == MOCK_WEATHER
        assert loader.solar_irradiance(0, 0) == MOCK_IRRADIANCE
        assert loader.daily_climate(0, 0) == MOCK_CLIMATE


class TestLiveRequests:

    def test_current_weather(self, live_loader):
        respond(live_loader, CURRENT_PAYLOAD)
        weather = live_loader.current_weather(38.7, -9.1)

        assert weather.wind_speed_ms == 5.1
        assert weather.wind_gust_ms == 8.2
        assert weather.cloud_cover_pct == 20
        assert weather.pressure_hpa == 1008

        url, = live_loader.session.get.call_args.args
        params = live_loader.session.get.call_args.kwargs["params"]
        assert url == WeatherLoader.CURRENT_URL
        assert params["appid"] == "test-key"
        assert params["units"] == "metric"

    def test_solar_irradiance_uses_date(self, live_loader):
        respond(live_loader, SOLAR_PAYLOAD)
        reading = live_loader.solar_irradiance(38.7, -9.1, on_date=date(2024, 6, 21))

        assert reading.clear_sky_ghi == 6000.5
        assert reading.cloudy_sky_dhi == 1500.0
        params = live_loader.session.get.call_args.kwargs["params"]
        assert params["date"] == "2024-06-21"
        assert params["interval"] == "1h"

    def test_daily_climate(self, live_loader):
        respond(live_loader, ONECALL_PAYLOAD)
        climate = live_loader.daily_climate(38.7, -9.1)
        assert climate.uv_index == 7.4
        assert climate.wind_speed_ms == 6.3

    def test_unauthorized_returns_none(self, live_loader):
        response = respond(live_loader, {})
        response.raise_for_status.side_effect = requests.HTTPError(response=MagicMock(status_code=401))
        assert live_loader.current_weather(0, 0) is None
        assert live_loader.session.get.call_count == 1

    def test_rate_limited_is_retried(self, live_loader):
        response = respond(live_loader, {})
        response.raise_for_status.side_effect = requests.HTTPError(response=MagicMock(status_code=429))
        assert live_loader.solar_irradiance(0, 0) is None
        assert live_loader.session.get.call_count == 2

    def test_recovers_after_one_transient_failure(self, live_loader):
        good = MagicMock()
        good.json.return_value = CURRENT_PAYLOAD
        live_loader.session.get.side_effect = [requests.ConnectionError("reset"), good]

        weather = live_loader.current_weather(0, 0)
        assert weather is not None
        assert weather.wind_speed_ms == 5.1

    def test_malformed_payload_returns_none(self, live_loader):
        respond(live_loader, {"wind": {}})
        assert live_loader.current_weather(0, 0) is None


class TestParsers:

    def test_optional_fields(self):
        weather = parse_current_weather({
            "wind": {"speed": 2},
            "clouds": {"all": 90},
            "main": {"pressure": 995},
        })
        assert weather.wind_gust_ms is None
        assert weather.wind_direction_deg == 0

    @pytest.mark.parametrize("payload", [None, [], {"wind": {"speed": "fast"}}, {"clouds": {}}])
    def test_bad_weather_payloads(self, payload):
        with pytest.raises(MalformedResponse):
            parse_current_weather(payload)

    @pytest.mark.parametrize("payload", [{}, {"daily": []}, {"daily": [{"uvi": 3}]}])
    def test_bad_climate_payloads(self, payload):
        with pytest.raises(MalformedResponse):
            parse_daily_climate(payload)

    def test_irradiance_requires_both_skies(self):
        payload = {"irradiance": {"daily": [{"clear_sky": {"ghi": 1, "dni": 1, "dhi": 1}}]}}
        with pytest.raises(MalformedResponse):
            parse_irradiance(payload)
