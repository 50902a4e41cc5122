# pure mapping from WMO weather codes to human readable labels, no i/o

from __future__ import annotations
from typing import Dict, List, Tuple

FALLBACK_LABEL = "Variable"

# checked in ascending order, first inclusive upper bound wins
CONDITION_RANGES: List[Tuple[int, str]] = [
    (0, "Clear sky"),
    (3, "Mainly clear / Partly cloudy"),
    (48, "Foggy"),
    (67, "Rainy"),
    (77, "Snowy"),
    (99, "Thunderstorm"),
]

# finer grained WMO 4677 labels for the codes Open-Meteo actually emits
DESCRIPTIONS: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

# keyword -> glyph, first match wins
ICONS: List[Tuple[Tuple[str, ...], str]] = [
    (("clear", "sun"), "☀️"),
    (("cloud",), "☁️"),
    (("rain",), "🌧️"),
    (("snow",), "❄️"),
    (("thunder", "storm"), "⛈️"),
    (("wind",), "🌬️"),
]
DEFAULT_ICON = "⛅"

def classify(code: int) -> str:
    if code < 0:
        return FALLBACK_LABEL
    for upper, label in CONDITION_RANGES:
        if code <= upper:
            return label
    return FALLBACK_LABEL

def describe(code: int) -> str:
    # exact WMO label when known, otherwise the coarse range label
    return DESCRIPTIONS.get(code, classify(code))

def icon(condition: str) -> str:
    lower = condition.lower()
    for keywords, glyph in ICONS:
        if any(k in lower for k in keywords):
            return glyph
    return DEFAULT_ICON
