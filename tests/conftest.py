# shared fixtures, tests never hit live http: payloads come from tests/data and requests_mock

import json
from pathlib import Path

import pytest

from skycast.config import WeatherConfig
from skycast.service import WeatherPipeline

DATA = Path(__file__).parent / "data"
GEOCODING_URL = "https://geocoding.test/v1/search"
FORECAST_URL = "https://forecast.test/v1/forecast"


def load(name):
    return json.loads((DATA / name).read_text(encoding="utf-8"))


@pytest.fixture()
def geocoding_payload():
    return load("geocoding_london.json")


@pytest.fixture()
def forecast_payload():
    return load("forecast_london.json")


@pytest.fixture()
def config():
    return WeatherConfig(geocoding_url=GEOCODING_URL, forecast_url=FORECAST_URL, timeout=2.0)


@pytest.fixture()
def pipeline(config):
    return WeatherPipeline(config)
