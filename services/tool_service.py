# File: services/tool_service.py
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from agents.europe_pmc_agent import europe_pmc_agent
from agents.maps_agent import maps_agent
from agents.nih_reporter_agent import nih_reporter_agent
from agents.orcid_agent import orcid_agent
from agents.screening_agent import screening_agent
from api.models.tool_models import (
    DistanceParams,
    GeocodeParams,
    GrantNumberParams,
    GrantSearchParams,
    ProfileParams,
    PublicationDetailParams,
    PublicationSearchParams,
    ScreeningParams,
    ToolDescription,
)
from services.formatter.formatter_core import RecordFormatter
from services.settings import Settings
from utils.errors import RegistryError, classify_exception

logger = logging.getLogger(__name__)

# get_publication_detail looks the index up in a search this large
DETAIL_SEARCH_SIZE = 100


class UnknownToolError(LookupError):
    pass


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    params_model: Type[BaseModel]
    handler: Callable[[Any, Settings], Awaitable[str]]

    def describe(self) -> ToolDescription:
        return ToolDescription(
            name=self.name,
            description=self.description,
            parameters=self.params_model.model_json_schema(),
        )


# ------------------------------------------------------------
# HANDLERS
# ------------------------------------------------------------
async def _search_publications(params: PublicationSearchParams, settings: Settings) -> str:
    publications = await europe_pmc_agent.search_by_author(params.identifier, params.max_results, settings.europe_pmc)
    return RecordFormatter.render(publications)


async def _publication_detail(params: PublicationDetailParams, settings: Settings) -> str:
    publications = await europe_pmc_agent.search_by_author(params.identifier, DETAIL_SEARCH_SIZE, settings.europe_pmc)
    if params.index < 0 or params.index >= len(publications):
        return RecordFormatter.render_error(
            f"Publication index {params.index} is out of range. Found {len(publications)} publications."
        )
    return RecordFormatter.render(publications[params.index])


async def _grants_by_investigator(params: GrantSearchParams, settings: Settings) -> str:
    grants = await nih_reporter_agent.search_by_investigator(params.name, params.max_results, settings.nih_reporter)
    return RecordFormatter.render(grants)


async def _grants_by_organization(params: GrantSearchParams, settings: Settings) -> str:
    grants = await nih_reporter_agent.search_by_organization(params.name, params.max_results, settings.nih_reporter)
    return RecordFormatter.render(grants)


async def _grant_by_number(params: GrantNumberParams, settings: Settings) -> str:
    grant = await nih_reporter_agent.get_by_number(params.project_number, settings.nih_reporter)
    if grant is None:
        return RecordFormatter.render_error(f"Grant {params.project_number} not found.")
    return RecordFormatter.render(grant)


async def _researcher_profile(params: ProfileParams, settings: Settings) -> str:
    profile = await orcid_agent.get_profile(params.identifier, settings.orcid)
    return RecordFormatter.render(profile)


async def _geocode(params: GeocodeParams, settings: Settings) -> str:
    result = await maps_agent.get_coordinates(params.address, settings.google_maps)
    return RecordFormatter.render(result)


async def _distance(params: DistanceParams, settings: Settings) -> str:
    result = await maps_agent.calculate_distance(params.origin, params.destination, settings.google_maps)
    return RecordFormatter.render(result)


async def _screening(params: ScreeningParams, settings: Settings) -> str:
    result = await screening_agent.search(
        settings.screening_list,
        name=params.name,
        countries=params.countries,
        city=params.city,
        state=params.state,
    )
    return RecordFormatter.render(result)


TOOLS: Dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            "search_publications_by_identifier",
            "Search for publications by ORCID ID in Europe PMC database",
            PublicationSearchParams,
            _search_publications,
        ),
        ToolSpec(
            "get_publication_detail",
            "Get detailed information about a specific publication from Europe PMC",
            PublicationDetailParams,
            _publication_detail,
        ),
        ToolSpec(
            "search_grants_by_investigator",
            "Search for NIH grants by principal investigator name",
            GrantSearchParams,
            _grants_by_investigator,
        ),
        ToolSpec(
            "search_grants_by_organization",
            "Search for NIH grants by organization name",
            GrantSearchParams,
            _grants_by_organization,
        ),
        ToolSpec(
            "get_grant_by_number",
            "Get detailed information about a specific NIH grant by project number",
            GrantNumberParams,
            _grant_by_number,
        ),
        ToolSpec(
            "get_researcher_profile",
            "Get comprehensive researcher profile from ORCID including publications, employment, and education",
            ProfileParams,
            _researcher_profile,
        ),
        ToolSpec(
            "geocode_address",
            "Get latitude and longitude coordinates for an address using Google Maps Geocoding API",
            GeocodeParams,
            _geocode,
        ),
        ToolSpec(
            "compute_distance",
            "Calculate distance between two addresses using Google Maps Distance Matrix API",
            DistanceParams,
            _distance,
        ),
        ToolSpec(
            "search_screening_list",
            "Search the U.S. Consolidated Screening List for sanctioned entities, denied parties, "
            "and other restricted organizations",
            ScreeningParams,
            _screening,
        ),
    )
}


def list_tools() -> List[ToolDescription]:
    return [spec.describe() for spec in TOOLS.values()]


async def call_tool(name: str, arguments: Dict[str, Any], settings: Settings) -> str:
    """
    Runs one tool and always returns text: the serialized record on success,
    a single "Error: ..." line on any failure. Only an unknown tool name raises.
    """
    spec = TOOLS.get(name)
    if spec is None:
        raise UnknownToolError(f"Unknown tool: {name}")

    try:
        params = spec.params_model.model_validate(arguments or {})
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}" for err in e.errors()
        )
        logger.warning(f"Invalid arguments for {name}: {problems}")
        return RecordFormatter.render_error(f"Invalid arguments for {name}: {problems}")

    try:
        return await spec.handler(params, settings)
    except RegistryError as e:
        logger.warning(f"⚠️ {name} failed ({e.kind}): {e}")
        return RecordFormatter.render_error(e)
    except Exception as e:
        logger.error(f"❌ {name} failed with an unclassified error", exc_info=True)
        return RecordFormatter.render_error(classify_exception(e, f"{name} failed"))
