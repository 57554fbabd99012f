# clients/nih_reporter_client.py
from typing import Any, Dict, Optional

from clients.http_client import fetch_json
from services.settings import RegistryConfig

SEARCH_ENDPOINT = "projects/search"


def _text_search(text: str) -> Dict[str, str]:
    return {"operator": "AND", "search_field": "all", "search_text": text}


def pi_name_criteria(pi_name: str) -> Dict[str, Any]:
    return {
        "pi_names": [{"any_name": pi_name}],
        "advanced_text_search": _text_search(pi_name),
    }


def organization_criteria(org_name: str) -> Dict[str, Any]:
    return {
        "org_names": [org_name],
        "advanced_text_search": _text_search(org_name),
    }


def project_number_criteria(project_number: str) -> Dict[str, Any]:
    return {"project_nums": [project_number]}


def search_projects(
    config: RegistryConfig,
    criteria: Dict[str, Any],
    limit: int = 20,
    sort_field: Optional[str] = "project_start_date",
    sort_order: str = "desc",
) -> Any:
    """POSTs a RePORTER project search. Newest projects first unless `sort_field` is None."""
    payload: Dict[str, Any] = {"criteria": criteria, "limit": limit, "offset": 0}
    if sort_field:
        payload["sort_field"] = sort_field
        payload["sort_order"] = sort_order

    headers = {"Content-Type": "application/json"}
    if config.api_key:
        headers["Authorization"] = f"Bearer {config.api_key}"

    return fetch_json(
        config.name,
        "POST",
        f"{config.base_url}/{SEARCH_ENDPOINT}",
        endpoint=SEARCH_ENDPOINT,
        timeout=config.timeout,
        json_body=payload,
        headers=headers,
    )
