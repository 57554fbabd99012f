# agents/screening_agent.py
import asyncio
import logging
from typing import Any, Optional

from clients.screening_list_client import search_screening_list
from services.formatter.schema import ScreeningResult
from services.schema.common import validate_payload
from services.schema.screening_list import CSLSearchResponse
from services.settings import RegistryConfig
from utils.errors import RegistryError, TransportError

logger = logging.getLogger(__name__)


def parse_screening_result(raw: Any, registry: str = "screening_list") -> ScreeningResult:
    response = validate_payload(CSLSearchResponse, raw, registry, "Consolidated Screening List")
    # Same field names on both sides: typing only, no remapping.
    return ScreeningResult.model_validate(response.model_dump(exclude_none=True))


class ScreeningAgent:
    async def search(
        self,
        config: RegistryConfig,
        name: Optional[str] = None,
        countries: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
    ) -> ScreeningResult:
        config.require_api_key()
        logger.info(f"🛡️ Screening Agent: name={name!r} countries={countries!r} city={city!r} state={state!r}")
        try:
            raw = await asyncio.to_thread(search_screening_list, config, name, countries, city, state)
            result = parse_screening_result(raw, config.name)
        except RegistryError:
            raise
        except Exception as e:
            raise TransportError(
                "Failed to search screening list",
                registry=config.name,
                params={"name": name, "countries": countries, "city": city, "state": state},
                error=str(e),
            ) from e

        logger.info(f"🧾 Screening Agent: {result.total} total matches, {len(result.results)} returned")
        return result


screening_agent = ScreeningAgent()
