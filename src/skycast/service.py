# orchestration and business rules
# each resolve_* call is an independent chain: geocode (city only) -> fetch -> classify -> round
# errors are converted to a tagged Resolution here and nowhere else

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from .client import OpenMeteoClient
from .conditions import classify, describe
from .config import WeatherConfig
from .errors import LocationNotFound, ServiceUnavailable
from .models import (
    Coordinates,
    Resolution,
    ResolutionKind,
    Source,
    WeatherSample,
    WeatherView,
    round_temperature,
)

logger = logging.getLogger(__name__)

ATTRIBUTION: Tuple[Source, ...] = (Source(title="Open-Meteo", uri="https://open-meteo.com/"),)
CURRENT_LOCATION = "Current Location"

CITY_FAILED = "Failed to fetch weather data. Please try again."
LOCATION_FAILED = "Failed to fetch weather for your current location."

def not_found_message(query: str) -> str:
    return f'Could not find "{query}". Please check the spelling.'

def format_wind(speed: float) -> str:
    # provider reports km/h already; 12.0 -> "12 km/h", 12.34 -> "12.3 km/h"
    return f"{round(speed, 1):g} km/h"

def build_view(city: str, sample: WeatherSample, sources: Sequence[Source] = ATTRIBUTION) -> WeatherView:
    # map a raw sample into the display contract
    return WeatherView(
        city=city,
        temperature=round_temperature(sample.temperature),
        humidity=sample.humidity,
        condition=classify(sample.weather_code),
        description=describe(sample.weather_code),
        wind_speed=format_wind(sample.wind_speed),
        high=round_temperature(sample.high),
        low=round_temperature(sample.low),
        sources=tuple(sources),
    )

class WeatherPipeline:
    # holds only immutable collaborators, so one instance can serve concurrent calls

    def __init__(self, config: Optional[WeatherConfig] = None, client: Optional[OpenMeteoClient] = None):
        self.config = config or WeatherConfig()
        self.client = client or OpenMeteoClient(self.config)

    def resolve_by_city(self, query: str) -> Resolution:
        try:
            match = self.client.resolve_location(query)
            sample = self.client.fetch_current(match.coordinates)
        except LocationNotFound as exc:
            logger.warning("Location not found: %r", query)
            return Resolution.failure(ResolutionKind.LOCATION_NOT_FOUND, not_found_message(query), exc)
        except ServiceUnavailable as exc:
            logger.error("Weather lookup for %r failed: %s", query, exc)
            return Resolution.failure(ResolutionKind.SERVICE_UNAVAILABLE, CITY_FAILED, exc)
        return Resolution.success(build_view(match.name, sample))

    def resolve_by_coordinates(self, coords: Coordinates, known_name: Optional[str] = None) -> Resolution:
        # no geocoding step, the caller already knows where it is
        try:
            sample = self.client.fetch_current(coords)
        except ServiceUnavailable as exc:
            logger.error("Weather lookup for (%s, %s) failed: %s", coords.latitude, coords.longitude, exc)
            return Resolution.failure(ResolutionKind.SERVICE_UNAVAILABLE, LOCATION_FAILED, exc)
        return Resolution.success(build_view(known_name or CURRENT_LOCATION, sample))

# caller-side fan-out, each query still runs as its own sequential chain
def resolve_all(pipeline: WeatherPipeline, queries: Sequence[str], max_workers: int = 3) -> List[Resolution]:
    if not queries:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(queries)))) as pool:
        # map() keeps input order so cli output is deterministic
        return list(pool.map(pipeline.resolve_by_city, queries))
