# clients/screening_list_client.py
from typing import Any, Optional

from clients.http_client import fetch_json
from services.settings import RegistryConfig

SEARCH_ENDPOINT = "search"


def search_screening_list(
    config: RegistryConfig,
    name: Optional[str] = None,
    countries: Optional[str] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
) -> Any:
    """Only the filters actually supplied are sent."""
    api_key = config.require_api_key()
    params = {"subscription-key": api_key}
    for key, value in (("name", name), ("countries", countries), ("city", city), ("state", state)):
        if value:
            params[key] = value

    return fetch_json(
        config.name,
        "GET",
        f"{config.base_url}/{SEARCH_ENDPOINT}",
        endpoint=SEARCH_ENDPOINT,
        timeout=config.timeout,
        params=params,
        include_error_body=True,
    )
