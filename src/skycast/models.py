# models and a rounding helper to keep data shapes explicit and reusable across the app

from __future__ import annotations
import enum
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        # range sanity only, callers decide what to do with bad input
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

@dataclass(frozen=True)
class LocationMatch:
    # best geocoding hit for a free-text query
    name: str
    coordinates: Coordinates
    country: str = ""

@dataclass(frozen=True)
class WeatherSample:
    # raw provider values in provider units (°C, %, km/h), discarded after mapping
    temperature: float
    humidity: float
    weather_code: int
    wind_speed: float
    high: float
    low: float

@dataclass(frozen=True)
class Source:
    title: str
    uri: str

@dataclass(frozen=True)
class WeatherView:
    # display-ready output contract consumed by the presentation layer
    city: str
    temperature: int
    humidity: float
    condition: str
    description: str
    wind_speed: str
    high: int
    low: int
    sources: Tuple[Source, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        # camelCase keys match the json shape browser clients already consume
        return {
            "city": self.city,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "condition": self.condition,
            "description": self.description,
            "windSpeed": self.wind_speed,
            "high": self.high,
            "low": self.low,
            "sources": [{"title": s.title, "uri": s.uri} for s in self.sources],
        }

class ResolutionKind(enum.Enum):
    SUCCESS = "success"
    LOCATION_NOT_FOUND = "location_not_found"
    SERVICE_UNAVAILABLE = "service_unavailable"

@dataclass(frozen=True)
class Resolution:
    # tagged outcome of one pipeline call, either a view or a display message
    kind: ResolutionKind
    view: Optional[WeatherView] = None
    message: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.kind is ResolutionKind.SUCCESS

    @classmethod
    def success(cls, view: WeatherView) -> "Resolution":
        return cls(kind=ResolutionKind.SUCCESS, view=view)

    @classmethod
    def failure(cls, kind: ResolutionKind, message: str, error: Exception) -> "Resolution":
        return cls(kind=kind, message=message, error=error)

def round_temperature(value: float) -> int:
    # nearest integer with halves going up, round() would give 16.5 -> 16
    return int(math.floor(value + 0.5))
