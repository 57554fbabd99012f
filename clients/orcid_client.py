# clients/orcid_client.py
from typing import Any

from clients.http_client import fetch_json
from services.settings import RegistryConfig

ORCID_JSON = "application/vnd.orcid+json"
PROFILE_SECTIONS = ("person", "works", "educations", "employments")

NOT_FOUND_HINT = (
    "The requested researcher profile could not be found. "
    "Please verify the ORCID ID is correct."
)


def fetch_orcid_section(config: RegistryConfig, orcid_id: str, section: str) -> Any:
    """GET /{orcid}/{section}. A 404 is a NotFoundError, not a transport failure."""
    headers = {"Accept": ORCID_JSON}
    if config.api_key:
        headers["Authorization"] = f"Bearer {config.api_key}"

    return fetch_json(
        config.name,
        "GET",
        f"{config.base_url}/{orcid_id}/{section}",
        endpoint=section,
        timeout=config.timeout,
        headers=headers,
        not_found_message=f"{NOT_FOUND_HINT} (ORCID: {orcid_id})",
    )
