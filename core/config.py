"""
Runtime configuration read from the environment.

A local ``.env`` file is loaded first so API keys can stay out of the shell.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HTTP_TIMEOUT = 8.0
DEFAULT_USER_AGENT = "RenewableEnergyExplorer/1.0 (educational dashboard)"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Environment-derived settings."""
    openweather_api_key: str = ""
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    use_mock_weather: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    @property
    def weather_mocked(self) -> bool:
        """Mock weather whenever asked to, or when there is no API key."""
        return self.use_mock_weather or not self.openweather_api_key

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        try:
            timeout = float(os.getenv("ENERGY_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT))
        except ValueError:
            timeout = DEFAULT_HTTP_TIMEOUT
        if timeout <= 0:
            timeout = DEFAULT_HTTP_TIMEOUT

        return cls(
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY", "").strip(),
            http_timeout=timeout,
            use_mock_weather=os.getenv("ENERGY_USE_MOCK_WEATHER", "").strip().lower() in _TRUTHY,
            user_agent=os.getenv("NOMINATIM_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("ENERGY_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(settings: Settings):
    """Set up root logging for the app."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s │ %(name)-20s │ %(levelname)-8s │ %(message)s',
        datefmt='%H:%M:%S',
        handlers=[
            logging.StreamHandler()
        ]
    )


# Singleton instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the process-wide settings, read once from the environment."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
