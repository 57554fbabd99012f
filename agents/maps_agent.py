# agents/maps_agent.py
import asyncio
import logging
from typing import Any

from clients.google_maps_client import distance_matrix, geocode
from services.formatter.schema import CoordinatesResult, DistanceResult
from services.schema.common import validate_payload
from services.schema.google_maps import DistanceMatrixResponse, GeocodeResponse
from services.settings import RegistryConfig
from utils.errors import NotFoundError, RegistryError, TransportError, ValidationError

logger = logging.getLogger(__name__)

# Statuses meaning "the place does not exist", everything else is a failure.
NOT_FOUND_STATUSES = {"ZERO_RESULTS", "NOT_FOUND"}

METERS_PER_KM = 1000


def meters_to_km(meters: float) -> float:
    return meters / METERS_PER_KM


def parse_coordinates(raw: Any, address: str, registry: str = "google_maps") -> CoordinatesResult:
    response = validate_payload(GeocodeResponse, raw, registry, "Google Maps geocoding")

    if response.status in NOT_FOUND_STATUSES or (response.status == "OK" and not response.results):
        raise NotFoundError(
            f"No results found for address: {address}. Please double check the address.",
            registry=registry,
            details={"address": address, "status": response.status},
        )
    if response.status != "OK":
        raise TransportError(
            "Geocoding failed",
            registry=registry,
            endpoint="geocode/json",
            params={"address": address},
            error=response.error_message or response.status or "missing status",
        )

    result = response.results[0]
    location = result.geometry.location if result.geometry else None
    if location is None or location.lat is None or location.lng is None:
        raise ValidationError(
            "Geocoding result has no coordinates",
            registry=registry,
            raw_payload=raw,
        )

    return CoordinatesResult(
        latitude=location.lat,
        longitude=location.lng,
        formatted_address=result.formatted_address,
        address=address,
    )


def parse_distance(raw: Any, origin: str, destination: str, registry: str = "google_maps") -> DistanceResult:
    response = validate_payload(DistanceMatrixResponse, raw, registry, "Google Maps distance matrix")

    if response.status != "OK":
        raise TransportError(
            "Distance calculation failed",
            registry=registry,
            endpoint="distancematrix/json",
            params={"origins": origin, "destinations": destination},
            error=response.error_message or response.status or "missing status",
        )

    rows = response.rows or []
    elements = rows[0].elements if rows and rows[0].elements else []
    if not elements:
        raise NotFoundError(
            "No results found for distance calculation",
            registry=registry,
            details={"origin": origin, "destination": destination},
        )

    element = elements[0]
    if element.status != "OK":
        message = f"Could not calculate distance between '{origin}' and '{destination}': {element.status}"
        if element.status in NOT_FOUND_STATUSES:
            raise NotFoundError(
                f"{message}. Please double check both addresses.",
                registry=registry,
                details={"origin": origin, "destination": destination, "status": element.status},
            )
        raise TransportError(message, registry=registry, endpoint="distancematrix/json")

    if element.distance is None or element.distance.value is None:
        raise ValidationError(
            "Distance element has no distance value",
            registry=registry,
            raw_payload=raw,
        )

    return DistanceResult(
        origin_address=response.origin_addresses[0] if response.origin_addresses else None,
        destination_address=response.destination_addresses[0] if response.destination_addresses else None,
        distance_km=meters_to_km(element.distance.value),
        distance_text=element.distance.text,
        duration=element.duration.text if element.duration else None,
        duration_seconds=element.duration.value if element.duration else None,
    )


class MapsAgent:
    async def get_coordinates(self, address: str, config: RegistryConfig) -> CoordinatesResult:
        config.require_api_key()
        logger.info(f"📍 Maps Agent: geocoding '{address}'")
        try:
            raw = await asyncio.to_thread(geocode, config, address)
            return parse_coordinates(raw, address, config.name)
        except RegistryError:
            raise
        except Exception as e:
            raise TransportError(
                f"Failed to geocode address '{address}'",
                registry=config.name,
                error=str(e),
            ) from e

    async def calculate_distance(self, origin: str, destination: str, config: RegistryConfig) -> DistanceResult:
        config.require_api_key()
        logger.info(f"🗺️ Maps Agent: distance '{origin}' -> '{destination}'")
        try:
            raw = await asyncio.to_thread(distance_matrix, config, origin, destination)
            return parse_distance(raw, origin, destination, config.name)
        except RegistryError:
            raise
        except Exception as e:
            raise TransportError(
                "Failed to calculate distance",
                registry=config.name,
                error=str(e),
            ) from e


maps_agent = MapsAgent()
