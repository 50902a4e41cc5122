# immutable provider settings, passed explicitly into the client and pipeline
# only from_env() touches process state, so tests can build configs pointing at fake endpoints

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "skycast/0.1"

@dataclass(frozen=True)
class WeatherConfig:
    geocoding_url: str = DEFAULT_GEOCODING_URL
    forecast_url: str = DEFAULT_FORECAST_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    language: str = "en"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WeatherConfig":
        # in production these come from the deployment, locally from a .env file
        if environ is None:
            load_dotenv()
            environ = os.environ

        raw_timeout = environ.get("SKYCAST_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigError(f"SKYCAST_TIMEOUT must be a number (got {raw_timeout!r})") from exc
            if timeout <= 0:
                raise ConfigError(f"SKYCAST_TIMEOUT must be positive (got {raw_timeout!r})")

        return cls(
            geocoding_url=environ.get("SKYCAST_GEOCODING_URL") or DEFAULT_GEOCODING_URL,
            forecast_url=environ.get("SKYCAST_FORECAST_URL") or DEFAULT_FORECAST_URL,
            timeout=timeout,
            user_agent=environ.get("SKYCAST_USER_AGENT") or DEFAULT_USER_AGENT,
            language=environ.get("SKYCAST_LANGUAGE") or "en",
        )
