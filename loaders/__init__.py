"""
Data loaders for the Renewable Energy Explorer.

Includes:
- Geocoding and reverse geocoding (Nominatim)
- Current weather, daily climate and solar irradiance (OpenWeatherMap)
"""

from loaders.errors import DataUnavailable, NetworkFailure, NoResults, MalformedResponse
from loaders.geocoder import Geocoder, get_geocoder
from loaders.weather import WeatherLoader, get_weather_loader

__all__ = [
    "DataUnavailable",
    "NetworkFailure",
    "NoResults",
    "MalformedResponse",
    "Geocoder",
    "get_geocoder",
    "WeatherLoader",
    "get_weather_loader",
]
