# tests/test_maps_screening_agents.py
import json
from unittest.mock import patch

import pytest

from agents.maps_agent import maps_agent, meters_to_km, parse_coordinates, parse_distance
from agents.screening_agent import parse_screening_result, screening_agent
from services.formatter.formatter_core import RecordFormatter
from services.settings import Settings
from utils.errors import ConfigurationError, NotFoundError, TransportError, ValidationError

ADDRESS = "1600 Amphitheatre Parkway, Mountain View, CA"


def keyed_settings():
    settings = Settings()
    settings.google_maps.api_key = "maps-key"
    settings.screening_list.api_key = "csl-key"
    return settings


def geocode_payload(status="OK", results=None):
    if results is None:
        results = [{
            "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
            "geometry": {"location": {"lat": 37.4224, "lng": -122.0842}},
        }]
    return {"status": status, "results": results}


def distance_payload(element):
    return {
        "status": "OK",
        "origin_addresses": ["Boston, MA, USA"],
        "destination_addresses": ["Cambridge, MA, USA"],
        "rows": [{"elements": [element]}],
    }


def test_meters_to_km():
    assert meters_to_km(12345) == 12.345


def test_coordinates_happy_path():
    result = parse_coordinates(geocode_payload(), ADDRESS)

    assert result.latitude == 37.4224
    assert result.longitude == -122.0842
    assert result.formatted_address.startswith("1600 Amphitheatre Pkwy")
    assert result.address == ADDRESS


@pytest.mark.parametrize("payload", [geocode_payload("ZERO_RESULTS", []), geocode_payload("OK", [])])
def test_unknown_address_is_not_found(payload):
    with pytest.raises(NotFoundError, match="No results found for address"):
        parse_coordinates(payload, "nowhere at all")


def test_denied_request_is_a_transport_error():
    payload = {"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."}
    with pytest.raises(TransportError) as exc_info:
        parse_coordinates(payload, ADDRESS)
    assert "The provided API key is invalid." in str(exc_info.value)


def test_result_without_location_is_a_validation_error():
    payload = geocode_payload(results=[{"formatted_address": "Somewhere"}])
    with pytest.raises(ValidationError):
        parse_coordinates(payload, ADDRESS)


def test_distance_is_reported_in_kilometres():
    element = {
        "status": "OK",
        "distance": {"text": "12.3 km", "value": 12345},
        "duration": {"text": "20 mins", "value": 1200},
    }
    result = parse_distance(distance_payload(element), "Boston", "Cambridge")

    assert result.distance_km == 12.345
    assert result.distance_text == "12.3 km"
    assert result.duration == "20 mins"
    assert result.duration_seconds == 1200
    assert result.origin_address == "Boston, MA, USA"
    assert result.destination_address == "Cambridge, MA, USA"


def test_unroutable_element_is_not_found():
    with pytest.raises(NotFoundError):
        parse_distance(distance_payload({"status": "ZERO_RESULTS"}), "Boston", "Honolulu")


def test_distance_without_rows_is_not_found():
    with pytest.raises(NotFoundError):
        parse_distance({"status": "OK", "rows": []}, "A", "B")


def test_distance_element_without_value_is_a_validation_error():
    with pytest.raises(ValidationError):
        parse_distance(distance_payload({"status": "OK", "distance": {"text": "?"}}), "A", "B")


@pytest.mark.asyncio
async def test_geocode_calls_registry_with_key():
    settings = keyed_settings()
    with patch("agents.maps_agent.geocode", return_value=geocode_payload()) as mock_geocode:
        result = await maps_agent.get_coordinates(ADDRESS, settings.google_maps)

    mock_geocode.assert_called_once_with(settings.google_maps, ADDRESS)
    assert result.latitude == 37.4224


@pytest.mark.asyncio
async def test_missing_maps_key_fails_before_any_request():
    settings = Settings()
    with patch("clients.http_client.requests.request") as mock_request:
        with pytest.raises(ConfigurationError, match="GOOGLE_MAPS_API_KEY"):
            await maps_agent.get_coordinates(ADDRESS, settings.google_maps)
        with pytest.raises(ConfigurationError):
            await maps_agent.calculate_distance("A", "B", settings.google_maps)

    mock_request.assert_not_called()


def test_screening_result_passes_fields_through():
    raw = {
        "total": 1,
        "results": [{
            "name": "ACME TRADING LLC",
            "alt_names": ["ACME"],
            "addresses": [{"address": "1 Main St", "city": "Moscow", "country": "RU", "postal_code": None}],
            "source": "Entity List (EL) - Bureau of Industry and Security",
            "programs": ["EAR"],
            "ids": [{"type": "Registration Number", "number": "123", "country": "RU"}],
            "start_date": "2022-03-03",
        }],
        "sources": [{"value": "Entity List (EL) - Bureau of Industry and Security", "count": 1}],
    }
    result = parse_screening_result(raw)

    assert result.total == 1
    [entity] = result.results
    assert entity.name == "ACME TRADING LLC"
    assert entity.alt_names == ["ACME"]
    assert entity.addresses[0].city == "Moscow"
    assert entity.addresses[0].postal_code is None
    assert entity.ids[0].number == "123"
    assert entity.start_date == "2022-03-03"
    assert result.sources[0].count == 1



def test_undeclared_screening_keys_survive_rendering():
    raw = {
        "total": 1,
        "results": [{
            "name": "ACME",
            "type": "Individual",
            "dates_of_birth": "1970",
            "nationalities": ["RU"],
            "addresses": [{"city": "Moscow", "lat": 55.75}],
            "ids": [{"type": "Passport", "number": "1", "issue_date": "2010"}],
        }],
    }
    rendered = json.loads(RecordFormatter.render(parse_screening_result(raw)))

    assert rendered == {
        "total": 1,
        "results": [{
            "name": "ACME",
            "addresses": [{"city": "Moscow", "lat": 55.75}],
            "ids": [{"type": "Passport", "number": "1", "issue_date": "2010"}],
            "type": "Individual",
            "dates_of_birth": "1970",
            "nationalities": ["RU"],
        }],
    }


def test_declared_screening_fields_stay_strict():
    with pytest.raises(ValidationError):
        parse_screening_result({"results": [{"name": 42, "nationalities": ["RU"]}]})

def test_empty_screening_response_defaults():
    result = parse_screening_result({})
    assert result.total == 0
    assert result.results == []


def test_screening_rejects_mistyped_total():
    with pytest.raises(ValidationError):
        parse_screening_result({"total": "1", "results": []})


@pytest.mark.asyncio
async def test_screening_search_forwards_filters():
    settings = keyed_settings()
    with patch("agents.screening_agent.search_screening_list", return_value={"total": 0, "results": []}) as mock_search:
        result = await screening_agent.search(settings.screening_list, name="acme", countries="RU,CN")

    mock_search.assert_called_once_with(settings.screening_list, "acme", "RU,CN", None, None)
    assert result.total == 0


@pytest.mark.asyncio
async def test_missing_screening_key_fails_before_any_request():
    settings = Settings()
    with patch("agents.screening_agent.search_screening_list") as mock_search:
        with pytest.raises(ConfigurationError, match="CONSOLIDATED_SCREENING_LIST_API_KEY"):
            await screening_agent.search(settings.screening_list, name="acme")

    mock_search.assert_not_called()
