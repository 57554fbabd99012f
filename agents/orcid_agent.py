# agents/orcid_agent.py
import asyncio
import logging
from typing import Any, List, Optional

from clients.orcid_client import NOT_FOUND_HINT, PROFILE_SECTIONS, fetch_orcid_section
from services.data_normalization_service import (
    email_sort_key,
    first_present,
    join_present,
    partial_date_to_date,
    partial_date_to_iso,
)
from services.formatter.schema import (
    Affiliation,
    Description,
    DescriptionSection,
    EmailAddress,
    ExternalReference,
    Organization,
    OrganizationAddress,
    ProfilePublication,
    ResearcherId,
    ResearcherProfile,
)
from services.schema.common import validate_payload
from services.schema.orcid import (
    AffiliationSummary,
    FuzzyDate,
    OrcidAffiliations,
    OrcidPerson,
    OrcidWorks,
    WorkGroup,
)
from services.settings import RegistryConfig
from utils.errors import NotFoundError, RegistryError, TransportError
from utils.id_normalization import is_orcid_id, normalize_orcid_id

logger = logging.getLogger(__name__)

BIOGRAPHY_TITLE = "ORCID Profile Biography"
KEYWORDS_TITLE = "ORCID Profile Keywords"
RESEARCHER_URL_SOURCE = "ORCID Profile"


def _value(wrapper: Any) -> Optional[str]:
    return wrapper.value if wrapper is not None else None


def fuzzy_to_date(fuzzy: Optional[FuzzyDate]):
    if fuzzy is None:
        return None
    return partial_date_to_date(_value(fuzzy.year), _value(fuzzy.month), _value(fuzzy.day))


def fuzzy_to_iso(fuzzy: Optional[FuzzyDate]) -> Optional[str]:
    if fuzzy is None:
        return None
    return partial_date_to_iso(_value(fuzzy.year), _value(fuzzy.month), _value(fuzzy.day))


# ------------------------------------------------------------
# SECTION NORMALIZERS
# ------------------------------------------------------------
def normalize_affiliation(summary: AffiliationSummary) -> Affiliation:
    org = summary.organization
    address = None
    if org and org.address:
        address = OrganizationAddress(
            city=org.address.city,
            region=org.address.region,
            country=org.address.country,
        )

    disambiguation_source = None
    if org and org.disambiguated_organization:
        disambiguation_source = org.disambiguated_organization.disambiguation_source

    return Affiliation(
        organization=Organization(
            name=(org.name if org else None) or "",
            address=address,
            disambiguation_source=disambiguation_source,
        ),
        department_name=summary.department_name,
        role_title=summary.role_title,
        start_date=fuzzy_to_iso(summary.start_date),
        end_date=fuzzy_to_iso(summary.end_date),
        source_name=summary.source_label,
    )


def normalize_affiliations(affiliations: OrcidAffiliations) -> List[Affiliation]:
    result = []
    for group in affiliations.affiliation_group or []:
        for wrapper in group.summaries or []:
            summary = wrapper.summary
            if summary is not None:
                result.append(normalize_affiliation(summary))
    return result


def normalize_work_group(group: WorkGroup) -> Optional[ProfilePublication]:
    """
    Merges the summaries of one work group: first title, first dated summary,
    first journal, and every source label in order.
    """
    summaries = group.work_summary or []

    title = first_present(summaries, lambda s: _value(s.title.title) if s.title else None)
    if not title:
        return None

    dated = first_present(
        summaries,
        lambda s: s.publication_date if s.publication_date and _value(s.publication_date.year) else None,
    )
    journal = first_present(summaries, lambda s: _value(s.journal_title))
    sources = [s.source_label for s in summaries if s.source_label]

    external_ids = group.external_ids.external_id if group.external_ids and group.external_ids.external_id else []
    doi = next(
        (x.external_id_value for x in external_ids if x.external_id_type and x.external_id_type.lower() == "doi"),
        None,
    )

    return ProfilePublication(
        title=title,
        publication_date=fuzzy_to_date(dated),
        journal_name=journal,
        source=join_present(sources, ", "),
        doi=doi,
    )


def normalize_works(works: OrcidWorks) -> List[ProfilePublication]:
    return [p for p in (normalize_work_group(g) for g in works.group or []) if p]


def build_profile(
    orcid_id: str,
    person: OrcidPerson,
    works: OrcidWorks,
    educations: OrcidAffiliations,
    employments: OrcidAffiliations,
) -> ResearcherProfile:
    name = person.name
    raw_emails = [e for e in (person.emails.email if person.emails and person.emails.email else []) if e.email]
    # sorted() is stable, ties keep registry order
    emails = sorted(raw_emails, key=lambda e: email_sort_key(e.primary, e.verified))

    researcher_id = ResearcherId(
        orcid=orcid_id,
        given_name=_value(name.given_names) if name else None,
        family_name=_value(name.family_name) if name else None,
        credit_name=_value(name.credit_name) if name else None,
        emails=[
            EmailAddress(address=e.email, primary=bool(e.primary), verified=bool(e.verified))
            for e in emails
        ],
    )

    sections = []
    biography = person.biography.content if person.biography else None
    if biography:
        sections.append(DescriptionSection(title=BIOGRAPHY_TITLE, content=biography))

    keywords = person.keywords.keyword if person.keywords and person.keywords.keyword else []
    keyword_text = join_present([k.content for k in keywords], ", ")
    if keyword_text:
        sections.append(DescriptionSection(title=KEYWORDS_TITLE, content=keyword_text))

    references = []
    if person.external_identifiers and person.external_identifiers.external_identifier:
        for ext in person.external_identifiers.external_identifier:
            references.append(ExternalReference(
                url=_value(ext.external_id_url),
                name=ext.external_id_type,
                source=ext.source_label,
            ))
    if person.researcher_urls and person.researcher_urls.researcher_url:
        for url in person.researcher_urls.researcher_url:
            references.append(ExternalReference(
                url=_value(url.url),
                name=url.url_name,
                source=RESEARCHER_URL_SOURCE,
            ))

    return ResearcherProfile(
        researcher_id=researcher_id,
        description=Description(sections=sections),
        external_references=references,
        educations=normalize_affiliations(educations),
        employments=normalize_affiliations(employments),
        publications=normalize_works(works),
    )


# ------------------------------------------------------------
# AGGREGATOR
# ------------------------------------------------------------
class OrcidAgent:
    async def _fetch_all(self, orcid_id: str, config: RegistryConfig) -> List[Any]:
        """
        Fetches every profile section concurrently and waits for all of them.
        The first failure cancels the sections still in flight and propagates.
        """
        tasks = [
            asyncio.create_task(asyncio.to_thread(fetch_orcid_section, config, orcid_id, section))
            for section in PROFILE_SECTIONS
        ]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def get_profile(self, raw_orcid_id: str, config: RegistryConfig) -> ResearcherProfile:
        orcid_id = normalize_orcid_id(raw_orcid_id)
        if not orcid_id:
            raise NotFoundError(NOT_FOUND_HINT, registry=config.name, details={"orcid_id": raw_orcid_id})
        if not is_orcid_id(orcid_id):
            logger.warning(f"'{orcid_id}' does not look like an ORCID iD, querying anyway")

        logger.info(f"🧑‍🔬 ORCID Agent: building profile for {orcid_id}")

        try:
            person_raw, works_raw, educations_raw, employments_raw = await self._fetch_all(orcid_id, config)

            if person_raw is None:
                raise TransportError(
                    "No person data found",
                    registry=config.name,
                    endpoint="person",
                    params={"orcid_id": orcid_id},
                )

            person = validate_payload(OrcidPerson, person_raw, config.name, "ORCID person")
            works = validate_payload(OrcidWorks, works_raw or {}, config.name, "ORCID works")
            educations = validate_payload(OrcidAffiliations, educations_raw or {}, config.name, "ORCID educations")
            employments = validate_payload(OrcidAffiliations, employments_raw or {}, config.name, "ORCID employments")

            profile = build_profile(orcid_id, person, works, educations, employments)
        except RegistryError as e:
            e.details.setdefault("orcid_id", orcid_id)
            raise
        except Exception as e:
            raise TransportError(
                "Failed to process author metadata",
                registry=config.name,
                params={"orcid_id": orcid_id},
                error=str(e),
            ) from e

        logger.info(
            f"📇 ORCID Agent: {len(profile.publications)} works, "
            f"{len(profile.educations)} educations, {len(profile.employments)} employments"
        )
        return profile


orcid_agent = OrcidAgent()
