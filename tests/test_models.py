from skycast.models import Coordinates, Source, WeatherView, round_temperature


def test_round_temperature_is_nearest_not_truncation():
    assert round_temperature(15.6) == 16
    assert round_temperature(18.2) == 18
    assert round_temperature(9.8) == 10
    # halves go up, unlike round()
    assert round_temperature(16.5) == 17
    assert round_temperature(-0.5) == 0
    assert round_temperature(-2.6) == -3


def test_coordinates_range_sanity():
    assert Coordinates(51.5, -0.12).is_valid()
    assert Coordinates(-90, 180).is_valid()
    assert not Coordinates(91, 0).is_valid()
    assert not Coordinates(0, -181).is_valid()


def test_view_to_dict_uses_wire_keys_and_keeps_source_order():
    view = WeatherView(
        city="London", temperature=16, humidity=72.0, condition="Foggy", description="Fog",
        wind_speed="12 km/h", high=18, low=10,
        sources=(Source("b", "https://b.example"), Source("a", "https://a.example")),
    )
    d = view.to_dict()
    assert d["windSpeed"] == "12 km/h"
    assert [s["title"] for s in d["sources"]] == ["b", "a"]
