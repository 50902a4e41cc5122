# OOP boundary for external i/o
# all http lives here and every failure leaves as a typed WeatherError, so the rest of the code stays pure
# use a thread-local session so concurrent pipeline calls never share connection state

from __future__ import annotations
import logging
import math
import threading
from typing import Any, Dict, Optional
import requests
from requests.adapters import HTTPAdapter

from .config import WeatherConfig
from .errors import LocationNotFound, ServiceUnavailable
from .models import Coordinates, LocationMatch, WeatherSample

logger = logging.getLogger(__name__)

CURRENT_FIELDS = ("temperature_2m", "relative_humidity_2m", "weather_code", "wind_speed_10m")
DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min")

def parse_location(query: str, data: Any) -> LocationMatch:
    # geocoding shape: data["results"][0] -> {latitude, longitude, name, country?}
    if not isinstance(data, dict):
        raise ServiceUnavailable("Unexpected geocoding shape: top level is not an object")
    results = data.get("results")
    if not results:
        # the API omits "results" entirely when nothing matched
        raise LocationNotFound(query)
    try:
        best = results[0]
        name = str(best["name"]).strip()
        coords = Coordinates(latitude=_finite(best["latitude"]), longitude=_finite(best["longitude"]))
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise ServiceUnavailable(f"Unexpected geocoding shape for {query!r}: {exc!r}") from exc
    if not name:
        raise ServiceUnavailable(f"Geocoding returned an empty name for {query!r}")
    return LocationMatch(name=name, coordinates=coords, country=str(best.get("country") or ""))

def _finite(value: Any) -> float:
    # json allows NaN/Infinity, neither can be rounded or displayed
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite value {value!r}")
    return number

def parse_sample(data: Any) -> WeatherSample:
    # forecast shape: current.<field> plus daily.<field>[0] for today
    # incomplete data is rejected as a whole, never partially tolerated
    try:
        current = data["current"]
        daily = data["daily"]
        return WeatherSample(
            temperature=_finite(current["temperature_2m"]),
            humidity=_finite(current["relative_humidity_2m"]),
            weather_code=int(_finite(current["weather_code"])),
            wind_speed=_finite(current["wind_speed_10m"]),
            high=_finite(daily["temperature_2m_max"][0]),
            low=_finite(daily["temperature_2m_min"][0]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise ServiceUnavailable(f"Unexpected forecast shape: {exc!r}") from exc

class OpenMeteoClient:
    # this class encapsulates provider details like base URLs, params and timeouts

    def __init__(self, config: Optional[WeatherConfig] = None):
        self.config = config or WeatherConfig()

        # each worker thread lazily obtains its own session through _session()
        self._local = threading.local()

    def _build_session(self) -> requests.Session:
        # central place to configure http behavior like headers and adapters
        s = requests.Session()
        s.headers.update({"User-Agent": self.config.user_agent})
        adapter = HTTPAdapter(max_retries=0)  # failures surface immediately, no retry policy
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    def _session(self) -> requests.Session:
        sess = getattr(self._local, "session", None)
        if sess is None:
            sess = self._build_session()
            self._local.session = sess
        return sess

    def _get_json(self, url: str, params: Dict[str, Any], what: str) -> Any:
        logger.debug("GET %s %s", url, params)
        try:
            resp = self._session().get(url, params=params, timeout=self.config.timeout)
        except requests.RequestException as exc:
            logger.error("%s request failed: %s", what, exc)
            raise ServiceUnavailable(f"Request error for {what}: {exc}") from exc

        if resp.status_code >= 400:
            # include a short response snippet to speed up triage
            snippet = (resp.text or "")[:300]
            logger.error("%s returned HTTP %s", what, resp.status_code)
            raise ServiceUnavailable(f"HTTP {resp.status_code} for {what}. Body: {snippet}")

        try:
            return resp.json()
        except ValueError as exc:
            raise ServiceUnavailable(f"Invalid JSON for {what}: {exc}") from exc

    def resolve_location(self, query: str) -> LocationMatch:
        # best match only, the first result is authoritative
        params = {
            "name": query,
            "count": 1,
            "language": self.config.language,
            "format": "json",
        }
        data = self._get_json(self.config.geocoding_url, params, f"geocoding {query!r}")
        match = parse_location(query, data)
        logger.debug("Geocoded %r -> %s (%.4f, %.4f)", query, match.name,
                     match.coordinates.latitude, match.coordinates.longitude)
        return match

    def fetch_current(self, coords: Coordinates) -> WeatherSample:
        # timezone=auto so daily[0] is "today" at the location, not in UTC
        params = {
            "latitude": coords.latitude,
            "longitude": coords.longitude,
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
        }
        what = f"forecast ({coords.latitude}, {coords.longitude})"
        return parse_sample(self._get_json(self.config.forecast_url, params, what))
