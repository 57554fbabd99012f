# clients/europe_pmc_client.py
from typing import Any, Dict

from clients.http_client import fetch_json
from services.settings import RegistryConfig

SEARCH_ENDPOINT = "search"


def search_publications(config: RegistryConfig, author_id: str, max_results: int = 20) -> Dict[str, Any]:
    """
    Core-format search for every publication attributed to an author identifier
    (ORCID iD). Returns the raw JSON body.
    """
    params = {
        "query": f'AUTHORID:"{author_id}"',
        "resultType": "core",
        "pageSize": max_results,
        "format": "json",
    }
    return fetch_json(
        config.name,
        "GET",
        f"{config.base_url}/{SEARCH_ENDPOINT}",
        endpoint=SEARCH_ENDPOINT,
        timeout=config.timeout,
        params=params,
    )
