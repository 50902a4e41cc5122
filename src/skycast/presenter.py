# screen state for any front end: loading flag, current weather, current error
# requests are numbered so a slow older answer can never overwrite a newer one

from __future__ import annotations
import threading
from typing import List, Optional

from .conditions import icon
from .models import Coordinates, Resolution, WeatherView
from .service import WeatherPipeline

MAX_SOURCES = 3
EMPTY_QUERY = "Please enter a city name."
BAD_COORDINATES = "Location coordinates are out of range."

class WeatherScreen:
    # begin() hands out increasing tokens, apply() drops results older than the newest one
    # a failure clears the previous weather so an error never sits next to stale data

    def __init__(self) -> None:
        self.loading = False
        self.weather: Optional[WeatherView] = None
        self.error: Optional[str] = None
        self._latest = 0
        self._lock = threading.Lock()

    def begin(self) -> int:
        with self._lock:
            self._latest += 1
            self.loading = True
            self.error = None
            return self._latest

    def apply(self, token: int, resolution: Resolution) -> bool:
        with self._lock:
            if token != self._latest:
                return False
            self.loading = False
            if resolution.ok:
                self.weather = resolution.view
                self.error = None
            else:
                self.weather = None
                self.error = resolution.message
            return True

    def fail(self, message: str) -> None:
        # caller-side precondition failures, nothing was sent upstream
        with self._lock:
            self._latest += 1
            self.loading = False
            self.weather = None
            self.error = message

    def search(self, pipeline: WeatherPipeline, query: str) -> bool:
        query = (query or "").strip()
        if not query:
            self.fail(EMPTY_QUERY)
            return False
        token = self.begin()
        return self.apply(token, pipeline.resolve_by_city(query))

    def locate(self, pipeline: WeatherPipeline, coords: Coordinates, name: Optional[str] = None) -> bool:
        if not coords.is_valid():
            self.fail(BAD_COORDINATES)
            return False
        token = self.begin()
        return self.apply(token, pipeline.resolve_by_coordinates(coords, name))

def render(view: WeatherView) -> str:
    lines: List[str] = [
        f"{view.city}  {icon(view.condition)}",
        f"  {view.description}",
        f"  Temperature: {view.temperature}°C (H: {view.high}°C / L: {view.low}°C)",
        f"  Humidity:    {view.humidity:g}%",
        f"  Wind:        {view.wind_speed}",
        f"  Condition:   {view.condition}",
    ]
    if view.sources:
        lines.append("  Sources:")
        for source in view.sources[:MAX_SOURCES]:
            lines.append(f"    - {source.title} <{source.uri}>")
    return "\n".join(lines)
