# agents/europe_pmc_agent.py
import asyncio
import logging
from typing import Any, List, Optional

from clients.europe_pmc_client import search_publications
from services.data_normalization_service import first_present, format_mesh_subject
from services.formatter.schema import Author, PublicationGrant, PublicationRecord
from services.schema.common import validate_payload
from services.schema.europe_pmc import EpmcAuthor, EpmcResponse, EpmcResult
from services.settings import RegistryConfig
from utils.errors import RegistryError, TransportError
from utils.id_normalization import is_orcid_type
from utils.sanitization import is_nonempty_text

logger = logging.getLogger(__name__)

SOURCE_LABEL = "Europe PMC"


def normalize_author(author: EpmcAuthor) -> Optional[Author]:
    if not author.full_name:
        return None

    affiliations: List[str] = []
    if author.author_affiliation_details_list and author.author_affiliation_details_list.author_affiliation:
        affiliations = [
            a.affiliation
            for a in author.author_affiliation_details_list.author_affiliation
            if a.affiliation
        ]

    orcid = None
    if author.author_id and is_orcid_type(author.author_id.type) and author.author_id.value:
        orcid = author.author_id.value

    return Author(
        full_name=author.full_name,
        first_name=author.first_name,
        last_name=author.last_name,
        initials=author.initials,
        orcid=orcid,
        affiliations=affiliations,
    )


def normalize_result(result: EpmcResult) -> Optional[PublicationRecord]:
    """One search hit -> PublicationRecord, or None when title or abstract is missing."""
    if not (is_nonempty_text(result.title) and is_nonempty_text(result.abstract_text)):
        return None

    authors = []
    if result.author_list and result.author_list.author:
        authors = [a for a in (normalize_author(x) for x in result.author_list.author) if a]

    grants = []
    if result.grants_list and result.grants_list.grant:
        grants = [
            PublicationGrant(grant_id=g.grant_id, agency=g.agency, acronym=g.acronym)
            for g in result.grants_list.grant
            if g.grant_id
        ]

    full_text_url = None
    if result.full_text_url_list and result.full_text_url_list.full_text_url:
        full_text_url = first_present(result.full_text_url_list.full_text_url, lambda u: u.url)

    subjects = []
    if result.mesh_heading_list and result.mesh_heading_list.mesh_heading:
        for mesh in result.mesh_heading_list.mesh_heading:
            if not mesh.descriptor_name:
                continue
            qualifiers = []
            if mesh.mesh_qualifier_list and mesh.mesh_qualifier_list.mesh_qualifier:
                qualifiers = [q.qualifier_name for q in mesh.mesh_qualifier_list.mesh_qualifier]
            subjects.append(format_mesh_subject(mesh.descriptor_name, mesh.major_topic_yn, qualifiers))

    journal = result.journal_info.journal if result.journal_info else None
    keywords = result.keyword_list.keyword if result.keyword_list and result.keyword_list.keyword else []

    return PublicationRecord(
        title=result.title,
        abstract=result.abstract_text,
        doi=result.doi,
        pmid=result.pmid,
        pmcid=result.pmcid,
        publication_date=result.first_publication_date,
        journal_name=journal.title if journal else None,
        journal_issn=journal.issn if journal else None,
        authors=authors,
        source=SOURCE_LABEL,
        full_text_url=full_text_url,
        citation_count=result.cited_by_count,
        keywords=list(keywords),
        subjects=subjects,
        grants=grants,
        is_open_access=result.is_open_access == "Y",
    )


def parse_publications(raw: Any, registry: str = "europe_pmc") -> List[PublicationRecord]:
    response = validate_payload(EpmcResponse, raw, registry, "Europe PMC publication")
    if not response.result_list or not response.result_list.result:
        return []

    publications = []
    for result in response.result_list.result:
        record = normalize_result(result)
        if record is None:
            logger.debug(f"Skipping Europe PMC hit {result.id} without title or abstract")
            continue
        publications.append(record)
    return publications


class EuropePMCAgent:
    async def search_by_author(self, author_id: str, max_results: int, config: RegistryConfig) -> List[PublicationRecord]:
        logger.info(f"📚 Europe PMC Agent: publications for '{author_id}' (max {max_results})")
        try:
            raw = await asyncio.to_thread(search_publications, config, author_id, max_results)
            publications = parse_publications(raw, config.name)
        except RegistryError:
            raise
        except Exception as e:
            raise TransportError(
                "Failed to process publications",
                registry=config.name,
                params={"author_id": author_id},
                error=str(e),
            ) from e

        logger.info(f"📘 Europe PMC Agent returned {len(publications)} publications")
        return publications


europe_pmc_agent = EuropePMCAgent()
