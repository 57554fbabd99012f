# services/schema/europe_pmc.py
"""
Europe PMC REST `search` response (resultType=core), the subset we read.
Docs: https://europepmc.org/RestfulWebService
"""
from typing import List, Optional

from pydantic import ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel

from services.schema.common import Number, RawModel


class EpmcModel(RawModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class EpmcAuthorId(EpmcModel):
    type: Optional[StrictStr] = None
    value: Optional[StrictStr] = None


class EpmcAuthorAffiliation(EpmcModel):
    affiliation: Optional[StrictStr] = None


class EpmcAuthorAffiliationList(EpmcModel):
    author_affiliation: Optional[List[EpmcAuthorAffiliation]] = None


class EpmcAuthor(EpmcModel):
    full_name: Optional[StrictStr] = None
    last_name: Optional[StrictStr] = None
    first_name: Optional[StrictStr] = None
    initials: Optional[StrictStr] = None
    author_id: Optional[EpmcAuthorId] = None
    collective_name: Optional[StrictStr] = None
    author_affiliation_details_list: Optional[EpmcAuthorAffiliationList] = None


class EpmcJournal(EpmcModel):
    title: Optional[StrictStr] = None
    medline_abbreviation: Optional[StrictStr] = None
    nlmid: Optional[StrictStr] = None
    isoabbreviation: Optional[StrictStr] = None
    issn: Optional[StrictStr] = None
    essn: Optional[StrictStr] = None


class EpmcJournalInfo(EpmcModel):
    issue: Optional[StrictStr] = None
    volume: Optional[StrictStr] = None
    journal_issue_id: Optional[Number] = None
    date_of_publication: Optional[StrictStr] = None
    month_of_publication: Optional[Number] = None
    year_of_publication: Optional[Number] = None
    print_publication_date: Optional[StrictStr] = None
    journal: Optional[EpmcJournal] = None


class EpmcGrant(EpmcModel):
    grant_id: Optional[StrictStr] = None
    agency: Optional[StrictStr] = None
    acronym: Optional[StrictStr] = None
    order_in: Optional[Number] = None


class EpmcMeshQualifier(EpmcModel):
    abbreviation: Optional[StrictStr] = None
    qualifier_name: Optional[StrictStr] = None
    major_topic_yn: Optional[StrictStr] = Field(None, alias="majorTopic_YN")


class EpmcMeshQualifierList(EpmcModel):
    mesh_qualifier: Optional[List[EpmcMeshQualifier]] = None


class EpmcMeshHeading(EpmcModel):
    major_topic_yn: Optional[StrictStr] = Field(None, alias="majorTopic_YN")
    descriptor_name: Optional[StrictStr] = None
    mesh_qualifier_list: Optional[EpmcMeshQualifierList] = None


class EpmcFullTextUrl(EpmcModel):
    availability: Optional[StrictStr] = None
    availability_code: Optional[StrictStr] = None
    document_style: Optional[StrictStr] = None
    site: Optional[StrictStr] = None
    url: Optional[StrictStr] = None


class EpmcAuthorList(EpmcModel):
    author: Optional[List[EpmcAuthor]] = None


class EpmcAuthorIdList(EpmcModel):
    author_id: Optional[List[EpmcAuthorId]] = None


class EpmcPubTypeList(EpmcModel):
    pub_type: Optional[List[StrictStr]] = None


class EpmcKeywordList(EpmcModel):
    keyword: Optional[List[StrictStr]] = None


class EpmcGrantsList(EpmcModel):
    grant: Optional[List[EpmcGrant]] = None


class EpmcMeshHeadingList(EpmcModel):
    mesh_heading: Optional[List[EpmcMeshHeading]] = None


class EpmcFullTextUrlList(EpmcModel):
    full_text_url: Optional[List[EpmcFullTextUrl]] = None


class EpmcResult(EpmcModel):
    id: Optional[StrictStr] = None
    source: Optional[StrictStr] = None
    pmid: Optional[StrictStr] = None
    pmcid: Optional[StrictStr] = None
    doi: Optional[StrictStr] = None
    title: Optional[StrictStr] = None
    author_string: Optional[StrictStr] = None
    author_list: Optional[EpmcAuthorList] = None
    author_id_list: Optional[EpmcAuthorIdList] = None
    journal_info: Optional[EpmcJournalInfo] = None
    pub_year: Optional[StrictStr] = None
    page_info: Optional[StrictStr] = None
    abstract_text: Optional[StrictStr] = None
    affiliation: Optional[StrictStr] = None
    language: Optional[StrictStr] = None
    pub_type_list: Optional[EpmcPubTypeList] = None
    keyword_list: Optional[EpmcKeywordList] = None
    grants_list: Optional[EpmcGrantsList] = None
    mesh_heading_list: Optional[EpmcMeshHeadingList] = None
    full_text_url_list: Optional[EpmcFullTextUrlList] = None
    is_open_access: Optional[StrictStr] = None
    cited_by_count: Optional[Number] = None
    has_references: Optional[StrictStr] = None
    has_text_mined_terms: Optional[StrictStr] = None
    first_publication_date: Optional[StrictStr] = None


class EpmcResultList(EpmcModel):
    result: Optional[List[EpmcResult]] = None


class EpmcResponse(EpmcModel):
    version: Optional[StrictStr] = None
    hit_count: Optional[Number] = None
    result_list: Optional[EpmcResultList] = None
