# agents/nih_reporter_agent.py
import asyncio
import logging
from typing import Any, Dict, List, Optional

from clients.nih_reporter_client import (
    organization_criteria,
    pi_name_criteria,
    project_number_criteria,
    search_projects,
)
from services.data_normalization_service import join_present, split_contact_pi_name, split_terms
from services.formatter.schema import GrantRecord, PrincipalInvestigator
from services.schema.common import validate_payload
from services.schema.nih_reporter import NIHProject, NIHSearchResponse
from services.settings import RegistryConfig
from utils.errors import RegistryError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_FUNDER = "NIH"
DEFAULT_CURRENCY = "USD"
DEFAULT_AWARD_TYPE = "research"
PHR_HEADING = "### Public Health Relevance: \n"


def normalize_investigators(project: NIHProject) -> List[PrincipalInvestigator]:
    """
    Structured PI list when the registry sends one (even empty), otherwise
    a single PI reconstructed from the "Last, First" contact name.
    """
    if project.principal_investigators is not None:
        return [
            PrincipalInvestigator(
                given_name=pi.first_name,
                family_name=pi.last_name,
                credit_name=pi.full_name,
            )
            for pi in project.principal_investigators
        ]

    if project.contact_pi_name:
        family, given = split_contact_pi_name(project.contact_pi_name)
        return [
            PrincipalInvestigator(
                given_name=given,
                family_name=family,
                credit_name=project.contact_pi_name,
            )
        ]

    return []


def normalize_project(project: NIHProject) -> Optional[GrantRecord]:
    if not project.project_num:
        return None

    org = project.organization
    recipient = None
    if org:
        recipient = join_present([org.org_name, org.org_department, org.org_country])

    funder = DEFAULT_FUNDER
    if project.agency_ic_admin and project.agency_ic_admin.name:
        funder = project.agency_ic_admin.name

    return GrantRecord(
        id=project.project_num,
        title=project.project_title,
        funder=funder,
        year=project.fiscal_year,
        amount=project.award_amount or None,
        currency=DEFAULT_CURRENCY,
        start_date=project.project_start_date,
        end_date=project.project_end_date,
        recipient=recipient,
        principal_investigators=normalize_investigators(project),
        abstract=project.abstract_text,
        keywords=split_terms(project.pref_terms, ";"),
        description=f"{PHR_HEADING}{project.phr_text}" if project.phr_text else None,
        is_active=project.is_active,
        award_type=project.mechanism_code_dc or DEFAULT_AWARD_TYPE,
    )


def parse_grants(raw: Any, registry: str = "nih_reporter") -> List[GrantRecord]:
    if not raw:
        return []

    response = validate_payload(NIHSearchResponse, raw, registry, "NIH RePORTER project")
    grants = []
    for project in response.results or []:
        grant = normalize_project(project)
        if grant is None:
            logger.warning(f"Skipping NIH project without project number (appl_id={project.appl_id})")
            continue
        grants.append(grant)
    return grants


class NIHReporterAgent:
    async def _search(
        self,
        criteria: Dict[str, Any],
        limit: int,
        config: RegistryConfig,
        sort_field: Optional[str] = "project_start_date",
    ) -> List[GrantRecord]:
        try:
            raw = await asyncio.to_thread(search_projects, config, criteria, limit, sort_field)
            return parse_grants(raw, config.name)
        except RegistryError:
            raise
        except Exception as e:
            raise TransportError(
                "Failed to process grants",
                registry=config.name,
                params={"criteria": criteria, "limit": limit},
                error=str(e),
            ) from e

    async def search_by_investigator(self, pi_name: str, max_results: int, config: RegistryConfig) -> List[GrantRecord]:
        logger.info(f"💰 NIH RePORTER Agent: grants for PI '{pi_name}'")
        grants = await self._search(pi_name_criteria(pi_name), max_results, config)
        logger.info(f"💵 NIH RePORTER Agent returned {len(grants)} grants")
        return grants

    async def search_by_organization(self, org_name: str, max_results: int, config: RegistryConfig) -> List[GrantRecord]:
        logger.info(f"🏛️ NIH RePORTER Agent: grants for organization '{org_name}'")
        grants = await self._search(organization_criteria(org_name), max_results, config)
        logger.info(f"💵 NIH RePORTER Agent returned {len(grants)} grants")
        return grants

    async def get_by_number(self, project_number: str, config: RegistryConfig) -> Optional[GrantRecord]:
        """Blank numbers and empty result sets both mean "no such grant"."""
        if not project_number or not project_number.strip():
            return None

        project_number = project_number.strip()
        logger.info(f"🔢 NIH RePORTER Agent: grant '{project_number}'")
        grants = await self._search(project_number_criteria(project_number), 1, config, sort_field=None)
        return grants[0] if grants else None


nih_reporter_agent = NIHReporterAgent()
