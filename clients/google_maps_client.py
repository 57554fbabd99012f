# clients/google_maps_client.py
from typing import Any

from clients.http_client import fetch_json
from services.settings import RegistryConfig

GEOCODE_ENDPOINT = "geocode/json"
DISTANCE_ENDPOINT = "distancematrix/json"


def geocode(config: RegistryConfig, address: str) -> Any:
    api_key = config.require_api_key()
    return fetch_json(
        config.name,
        "GET",
        f"{config.base_url}/{GEOCODE_ENDPOINT}",
        endpoint=GEOCODE_ENDPOINT,
        timeout=config.timeout,
        params={"address": address, "key": api_key},
    )


def distance_matrix(config: RegistryConfig, origin: str, destination: str) -> Any:
    api_key = config.require_api_key()
    return fetch_json(
        config.name,
        "GET",
        f"{config.base_url}/{DISTANCE_ENDPOINT}",
        endpoint=DISTANCE_ENDPOINT,
        timeout=config.timeout,
        params={
            "origins": origin,
            "destinations": destination,
            "units": "metric",
            "key": api_key,
        },
    )
