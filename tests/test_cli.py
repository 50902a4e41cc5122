# end to end through main() with env-configured fake endpoints

import json

import pytest

from skycast.cli import main

from conftest import FORECAST_URL, GEOCODING_URL


@pytest.fixture(autouse=True)
def fake_endpoints(monkeypatch):
    monkeypatch.setenv("SKYCAST_GEOCODING_URL", GEOCODING_URL)
    monkeypatch.setenv("SKYCAST_FORECAST_URL", FORECAST_URL)


def test_defaults_to_london(requests_mock, capsys, geocoding_payload, forecast_payload):
    requests_mock.get(GEOCODING_URL, json=geocoding_payload)
    requests_mock.get(FORECAST_URL, json=forecast_payload)

    assert main([]) == 0

    out = capsys.readouterr().out
    assert "London" in out
    assert "Open-Meteo" in out
    assert requests_mock.request_history[0].qs["name"] == ["london"]


def test_json_output_for_coordinates(requests_mock, capsys, forecast_payload):
    requests_mock.get(FORECAST_URL, json=forecast_payload)

    assert main(["--lat", "51.5", "--lon", "-0.12", "--name", "Home", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["city"] == "Home"
    assert payload["temperature"] == 16
    assert payload["windSpeed"] == "12 km/h"


def test_not_found_exits_nonzero(requests_mock, capsys):
    requests_mock.get(GEOCODING_URL, json={})

    assert main(["Xyzzy123"]) == 1

    assert "Could not find" in capsys.readouterr().err


def test_lat_without_lon_is_usage_error():
    with pytest.raises(SystemExit):
        main(["--lat", "10"])


def test_cities_with_coordinates_is_usage_error(requests_mock):
    with pytest.raises(SystemExit):
        main(["Paris", "--lat", "51.5", "--lon", "-0.12"])
    assert requests_mock.call_count == 0
