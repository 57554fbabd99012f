# tests/test_http_client.py
from unittest.mock import MagicMock, patch

import pytest
import requests

from clients.google_maps_client import geocode
from clients.http_client import fetch_json
from clients.nih_reporter_client import pi_name_criteria, search_projects
from clients.screening_list_client import search_screening_list
from services.settings import Settings
from utils.errors import NotFoundError, TransportError
from utils.sanitization import redact

URL = "https://registry.example.org/search"


def make_response(status=200, json_data=None, text="", reason="OK"):
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 400
    resp.reason = reason
    resp.text = text
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data
    return resp


def test_returns_decoded_body_and_drops_unset_params():
    with patch("clients.http_client.requests.request", return_value=make_response(json_data={"ok": True})) as mock_request:
        body = fetch_json("demo", "GET", URL, "search", 5.0, params={"q": "x", "page": None})

    assert body == {"ok": True}
    args, kwargs = mock_request.call_args
    assert args == ("GET", URL)
    assert kwargs["params"] == {"q": "x"}
    assert kwargs["timeout"] == 5.0
    assert kwargs["headers"]["User-Agent"] == "RoseScout/1.0"


def test_404_with_not_found_message_is_not_found():
    with patch("clients.http_client.requests.request", return_value=make_response(404, reason="Not Found")):
        with pytest.raises(NotFoundError, match="no such record"):
            fetch_json("demo", "GET", URL, "person", 5.0, not_found_message="no such record")


def test_404_without_not_found_message_is_transport():
    with patch("clients.http_client.requests.request", return_value=make_response(404, reason="Not Found")):
        with pytest.raises(TransportError) as exc_info:
            fetch_json("demo", "GET", URL, "search", 5.0)
    assert exc_info.value.error == "HTTP 404: Not Found"


def test_server_error_is_transport_with_status():
    with patch("clients.http_client.requests.request", return_value=make_response(500, reason="Internal Server Error")):
        with pytest.raises(TransportError) as exc_info:
            fetch_json("demo", "GET", URL, "search", 5.0)

    err = exc_info.value
    assert err.message == "Failed to fetch search data"
    assert err.endpoint == "search"
    assert err.details["status"] == 500


def test_error_body_is_reported_when_requested():
    resp = make_response(401, text="  Access denied due to invalid subscription key.  ", reason="Unauthorized")
    with patch("clients.http_client.requests.request", return_value=resp):
        with pytest.raises(TransportError) as exc_info:
            fetch_json("demo", "GET", URL, "search", 5.0, include_error_body=True)
    assert exc_info.value.error == "HTTP 401: Access denied due to invalid subscription key."


def test_timeout_is_transport():
    with patch("clients.http_client.requests.request", side_effect=requests.exceptions.Timeout("slow")):
        with pytest.raises(TransportError, match="timed out after 2s"):
            fetch_json("demo", "GET", URL, "search", 2.0)


def test_connection_error_is_transport():
    with patch("clients.http_client.requests.request", side_effect=requests.exceptions.ConnectionError("refused")):
        with pytest.raises(TransportError) as exc_info:
            fetch_json("demo", "GET", URL, "search", 2.0)
    assert exc_info.value.error == "refused"


def test_malformed_json_is_transport():
    with patch("clients.http_client.requests.request", return_value=make_response(json_data=ValueError("Expecting value"))):
        with pytest.raises(TransportError, match="Malformed JSON"):
            fetch_json("demo", "GET", URL, "search", 5.0)


def test_credentials_are_redacted_from_errors():
    assert redact({"key": "secret", "address": "x"}) == {"key": "***", "address": "x"}

    with patch("clients.http_client.requests.request", return_value=make_response(500, reason="boom")):
        with pytest.raises(TransportError) as exc_info:
            fetch_json("demo", "GET", URL, "search", 5.0, params={"subscription-key": "secret", "name": "acme"})

    assert exc_info.value.params == {"subscription-key": "***", "name": "acme"}
    assert "secret" not in repr(exc_info.value.details)


def test_geocode_sends_key_as_query_param():
    settings = Settings()
    settings.google_maps.api_key = "maps-key"
    with patch("clients.http_client.requests.request", return_value=make_response(json_data={"status": "OK"})) as mock_request:
        geocode(settings.google_maps, "Boston")

    args, kwargs = mock_request.call_args
    assert args[1] == "https://maps.googleapis.com/maps/api/geocode/json"
    assert kwargs["params"] == {"address": "Boston", "key": "maps-key"}


def test_screening_sends_only_supplied_filters():
    settings = Settings()
    settings.screening_list.api_key = "csl-key"
    with patch("clients.http_client.requests.request", return_value=make_response(json_data={"total": 0})) as mock_request:
        search_screening_list(settings.screening_list, name="acme", countries=None, city="", state=None)

    assert mock_request.call_args.kwargs["params"] == {"subscription-key": "csl-key", "name": "acme"}


def test_nih_search_posts_criteria():
    settings = Settings()
    with patch("clients.http_client.requests.request", return_value=make_response(json_data={"results": []})) as mock_request:
        search_projects(settings.nih_reporter, pi_name_criteria("Smith"), limit=5)

    args, kwargs = mock_request.call_args
    assert args == ("POST", "https://api.reporter.nih.gov/v2/projects/search")
    body = kwargs["json"]
    assert body["limit"] == 5
    assert body["criteria"] == pi_name_criteria("Smith")
    assert body["sort_field"] == "project_start_date"
    assert "Authorization" not in kwargs["headers"]


@pytest.mark.parametrize("client_call", ["geocode", "screening"])
def test_connection_error_text_never_carries_the_api_key(client_call):
    settings = Settings()
    settings.google_maps.api_key = "MAPS/SECRET+KEY"
    settings.screening_list.api_key = "CSLSECRET"
    failure = requests.exceptions.ConnectionError(
        "HTTPConnectionPool(host='127.0.0.1', port=9): Max retries exceeded with url: "
        "/search?subscription-key=CSLSECRET&name=acme "
        "/geocode/json?address=Boston&key=MAPS%2FSECRET%2BKEY (Caused by NewConnectionError)"
    )

    with patch("clients.http_client.requests.request", side_effect=failure):
        with pytest.raises(TransportError) as exc_info:
            if client_call == "geocode":
                geocode(settings.google_maps, "Boston")
            else:
                search_screening_list(settings.screening_list, name="acme")

    text = str(exc_info.value)
    secret = "MAPS" if client_call == "geocode" else "CSLSECRET"
    assert secret not in text
    assert secret not in repr(exc_info.value.details)
    assert "Max retries exceeded" in text


def test_error_body_echoing_the_key_is_masked():
    settings = Settings()
    settings.screening_list.api_key = "CSLSECRET"
    resp = make_response(401, text="Invalid subscription-key CSLSECRET", reason="Unauthorized")
    with patch("clients.http_client.requests.request", return_value=resp):
        with pytest.raises(TransportError) as exc_info:
            search_screening_list(settings.screening_list, name="acme")

    assert exc_info.value.error == "HTTP 401: Invalid subscription-key ***"
