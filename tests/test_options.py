import pytest

from yelp_client.errors import MissingRequiredError
from yelp_client.options import (
    CoordinateOptions,
    LocationOptions,
    SearchOptions,
    format_coordinate,
    merge_parameters,
)


def test_coordinate_options_parameters():
    params = CoordinateOptions(37.9, -122.5).get_parameters()
    assert params == {"latitude": "37.9", "longitude": "-122.5"}


@pytest.mark.parametrize("latitude, longitude", [(None, -122.5), (37.9, None), (None, None)])
def test_coordinate_options_require_both(latitude, longitude):
    with pytest.raises(MissingRequiredError):
        CoordinateOptions(latitude, longitude).get_parameters()


def test_coordinate_zero_is_not_unset():
    assert CoordinateOptions(0.0, 0.0).get_parameters() == {"latitude": "0", "longitude": "0"}


@pytest.mark.parametrize("value", [37.77, -122.41, 0.00001, 45.0, 179.999999, -89.123456789])
def test_format_coordinate_round_trips(value):
    rendered = format_coordinate(value)
    assert "e" not in rendered.lower()
    assert "," not in rendered
    assert float(rendered) == pytest.approx(value)


def test_out_of_range_coordinates_are_forwarded(caplog):
    with caplog.at_level("DEBUG", logger="yelp_client.options"):
        params = CoordinateOptions(91.0, 200.0).get_parameters()
    assert params == {"latitude": "91", "longitude": "200"}
    levels = [record.levelname for record in caplog.records if record.name == "yelp_client.options"]
    assert levels == ["DEBUG", "DEBUG"]


def test_location_options_text_only():
    assert LocationOptions("Berkeley").get_parameters() == {"location": "Berkeley"}


def test_location_options_with_hint():
    options = LocationOptions("Berkeley", CoordinateOptions(37.87, -122.27))
    assert options.get_parameters() == {"location": "Berkeley", "latitude": "37.87", "longitude": "-122.27"}


def test_location_options_coordinates_only():
    options = LocationOptions("", CoordinateOptions(37.9, -122.5))
    assert options.get_parameters() == {"latitude": "37.9", "longitude": "-122.5"}


@pytest.mark.parametrize("hint", [None, CoordinateOptions(), CoordinateOptions(37.9, None)])
def test_location_options_require_text_or_complete_hint(hint):
    with pytest.raises(MissingRequiredError):
        LocationOptions("", hint).get_parameters()


def test_location_options_ignore_incomplete_hint_when_text_present():
    options = LocationOptions("Oakland", CoordinateOptions(None, -122.27))
    assert options.get_parameters() == {"location": "Oakland"}


def test_search_options_merge_filters():
    options = SearchOptions(
        location_options=LocationOptions("San Francisco, CA"),
        term="coffee",
        categories=["coffee", "bakeries"],
        radius=1000,
        limit=20,
        open_now=True,
        price=[1, 2],
        sort_by="distance",
    )
    assert options.get_parameters() == {
        "location": "San Francisco, CA",
        "term": "coffee",
        "categories": "coffee,bakeries",
        "radius": "1000",
        "limit": "20",
        "open_now": "true",
        "price": "1,2",
        "sort_by": "distance",
    }


def test_search_options_own_keys_win():
    options = SearchOptions(
        location_options=LocationOptions("Berkeley", CoordinateOptions(37.87, -122.27)),
        extra={"latitude": "1.5"},
    )
    params = options.get_parameters()
    assert params["latitude"] == "1.5"
    assert params["location"] == "Berkeley"


def test_search_options_accept_coordinate_options():
    options = SearchOptions(coordinate_options=CoordinateOptions(37.9, -122.5))
    assert options.get_parameters() == {"latitude": "37.9", "longitude": "-122.5"}


def test_search_options_require_location_or_coordinates():
    with pytest.raises(MissingRequiredError):
        SearchOptions(term="coffee").get_parameters()


def test_search_options_propagate_location_failure():
    with pytest.raises(MissingRequiredError):
        SearchOptions(location_options=LocationOptions("")).get_parameters()


def test_merge_parameters_later_wins_and_skips_none():
    merged = merge_parameters(None, {"a": "1", "b": "2"}, LocationOptions("Here"), {"b": False})
    assert merged == {"a": "1", "b": "false", "location": "Here"}
