# clients/http_client.py
import logging
from typing import Any, Dict, Optional

import requests
from requests.exceptions import RequestException

from utils.errors import NotFoundError, TransportError
from utils.sanitization import redact, scrub_secrets

logger = logging.getLogger(__name__)

USER_AGENT = "RoseScout/1.0"


def fetch_json(
    registry: str,
    method: str,
    url: str,
    endpoint: str,
    timeout: float,
    params: Optional[Dict[str, Any]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    not_found_message: Optional[str] = None,
    include_error_body: bool = False,
) -> Any:
    """
    Performs one blocking HTTP call and returns the decoded JSON body.

    Failures are classified here, closest to their cause:
    - 404 with `not_found_message` set -> NotFoundError
    - any other non-2xx, timeout, connection failure, bad JSON -> TransportError
    """
    request_headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
    request_headers.update(headers or {})

    # Drop unset query parameters, the registries treat "None" literally.
    query = {k: v for k, v in (params or {}).items() if v is not None} or None
    reported_params = redact(query) if query else (json_body or {})

    logger.info(f"🌐 {registry}: {method} {endpoint}")

    try:
        resp = requests.request(
            method,
            url,
            params=query,
            json=json_body,
            headers=request_headers,
            timeout=timeout,
        )
    except requests.exceptions.Timeout as e:
        raise TransportError(
            f"Failed to fetch {endpoint} data",
            registry=registry,
            endpoint=endpoint,
            params=reported_params,
            error=f"Request timed out after {timeout:g}s ({e.__class__.__name__})",
        )
    except RequestException as e:
        raise TransportError(
            f"Failed to fetch {endpoint} data",
            registry=registry,
            endpoint=endpoint,
            params=reported_params,
            # requests puts the full URL, query string included, into the message
            error=scrub_secrets(str(e) or e.__class__.__name__, query),
        )

    if resp.status_code == 404 and not_found_message:
        raise NotFoundError(
            not_found_message,
            registry=registry,
            details={"endpoint": endpoint, "status": 404},
        )

    if not resp.ok:
        error = f"HTTP {resp.status_code}: {resp.reason}"
        if include_error_body and resp.text:
            error = f"HTTP {resp.status_code}: {scrub_secrets(resp.text.strip(), query)}"
        raise TransportError(
            f"Failed to fetch {endpoint} data",
            registry=registry,
            endpoint=endpoint,
            params=reported_params,
            error=error,
            details={"status": resp.status_code},
        )

    try:
        return resp.json()
    except ValueError as e:
        raise TransportError(
            f"Failed to decode {endpoint} response",
            registry=registry,
            endpoint=endpoint,
            params=reported_params,
            error=f"Malformed JSON: {e}",
        )
