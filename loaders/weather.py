"""
Weather Loader - Current weather, daily climate and solar irradiance.

Uses the OpenWeatherMap APIs:
- Current weather (/data/2.5/weather)
- One Call daily forecast (/data/3.0/onecall)
- Solar energy interval data (/energy/1.0/solar/interval_data)

Without an API key (or with mock mode on) the loader returns fixed sample
readings so the dashboard still works offline.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

import requests

from core.config import get_settings
from core.models import DailyClimate, IrradianceReading, WeatherSnapshot
from loaders.errors import DataUnavailable, MalformedResponse
from loaders.http import get_json, retry_transient

log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# SAMPLE READINGS (mock mode)
# ═══════════════════════════════════════════════════════════════════════════
MOCK_WEATHER = WeatherSnapshot(
    wind_speed_ms=3.25,
    wind_direction_deg=206,
    wind_gust_ms=3.8,
    cloud_cover_pct=52,
    pressure_hpa=1012,
)

MOCK_IRRADIANCE = IrradianceReading(
    clear_sky_ghi=3341.99,
    cloudy_sky_ghi=1321.03,
    clear_sky_dni=6736.42,
    cloudy_sky_dni=189.2,
    clear_sky_dhi=796.63,
    cloudy_sky_dhi=1224.62,
)

MOCK_CLIMATE = DailyClimate(uv_index=6.5, wind_speed_ms=4.2)


class WeatherLoader:
    """
    OpenWeatherMap client.

    Every public method returns a complete reading or None; callers never
    get a partially-filled structure.
    """

    CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"
    ONECALL_URL = "https://api.openweathermap.org/data/3.0/onecall"
    SOLAR_URL = "https://api.openweathermap.org/energy/1.0/solar/interval_data"

    def __init__(self, api_key: Optional[str] = None, use_mock: Optional[bool] = None,
                 timeout: Optional[float] = None):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.openweather_api_key
        if use_mock is None:
            use_mock = settings.use_mock_weather
        self.use_mock = use_mock or not self.api_key
        self.timeout = timeout or settings.http_timeout
        self.session = requests.Session()

    @retry_transient
    def _make_request(self, url: str, params: Dict) -> Any:
        """Make a keyed request with retry."""
        return get_json(self.session, url, {**params, "appid": self.api_key}, self.timeout)

    def current_weather(self, lat: float, lng: float) -> Optional[WeatherSnapshot]:
        """
        Get current wind, cloud and pressure readings.

        Returns:
            WeatherSnapshot, or None if the data is unavailable
        """
        if self.use_mock:
            return MOCK_WEATHER

        params = {"lat": lat, "lon": lng, "units": "metric"}
        try:
            return parse_current_weather(self._make_request(self.CURRENT_URL, params))
        except DataUnavailable as e:
            log.error(f"Weather request failed for ({lat:.4f}, {lng:.4f}): {e}")
            return None

    def daily_climate(self, lat: float, lng: float) -> Optional[DailyClimate]:
        """Get today's UV index and wind speed from the One Call forecast."""
        if self.use_mock:
            return MOCK_CLIMATE

        params = {
            "lat": lat,
            "lon": lng,
            "exclude": "minutely,hourly,alerts",
            "units": "metric",
        }
        try:
            return parse_daily_climate(self._make_request(self.ONECALL_URL, params))
        except DataUnavailable as e:
            log.error(f"Climate request failed for ({lat:.4f}, {lng:.4f}): {e}")
            return None

    def solar_irradiance(self, lat: float, lng: float,
                         on_date: Optional[date] = None) -> Optional[IrradianceReading]:
        """Get daily clear-sky and cloudy-sky irradiance totals for a date."""
        if self.use_mock:
            return MOCK_IRRADIANCE

        on_date = on_date or date.today()
        params = {
            "lat": lat,
            "lon": lng,
            "date": on_date.isoformat(),
            "interval": "1h",
        }
        try:
            return parse_irradiance(self._make_request(self.SOLAR_URL, params))
        except DataUnavailable as e:
            log.error(f"Irradiance request failed for ({lat:.4f}, {lng:.4f}): {e}")
            return None


# ═══════════════════════════════════════════════════════════════════════════
# PAYLOAD PARSERS
# ═══════════════════════════════════════════════════════════════════════════
def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def parse_current_weather(payload: Any) -> WeatherSnapshot:
    """Normalize a current-weather payload. Raises MalformedResponse."""
    try:
        wind = payload["wind"]
        return WeatherSnapshot(
            wind_speed_ms=float(wind["speed"]),
            wind_direction_deg=float(wind.get("deg", 0)),
            wind_gust_ms=_optional_float(wind.get("gust")),
            cloud_cover_pct=float(payload["clouds"]["all"]),
            pressure_hpa=float(payload["main"]["pressure"]),
            uv_index=_optional_float(payload.get("uvi")),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponse(f"Unexpected weather payload: {e}") from e


def parse_daily_climate(payload: Any) -> DailyClimate:
    """Normalize a One Call payload's first daily entry. Raises MalformedResponse."""
    try:
        today = payload["daily"][0]
        return DailyClimate(
            uv_index=float(today["uvi"]),
            wind_speed_ms=float(today["wind_speed"]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Unexpected one-call payload: {e}") from e


def parse_irradiance(payload: Any) -> IrradianceReading:
    """Normalize a solar interval payload's daily totals. Raises MalformedResponse."""
    try:
        daily = payload["irradiance"]["daily"][0]
        clear, cloudy = daily["clear_sky"], daily["cloudy_sky"]
        return IrradianceReading(
            clear_sky_ghi=float(clear["ghi"]),
            cloudy_sky_ghi=float(cloudy["ghi"]),
            clear_sky_dni=float(clear["dni"]),
            cloudy_sky_dni=float(cloudy["dni"]),
            clear_sky_dhi=float(clear["dhi"]),
            cloudy_sky_dhi=float(cloudy["dhi"]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Unexpected irradiance payload: {e}") from e


# Singleton
_loader: Optional[WeatherLoader] = None

def get_weather_loader() -> WeatherLoader:
    """Get singleton weather loader."""
    global _loader
    if _loader is None:
        _loader = WeatherLoader()
    return _loader
