# services/schema/orcid.py
"""
ORCID public API v3.0 shapes for the four sections read to build a
researcher profile: person, works, educations, employments.

ORCID keys are kebab-case and most scalars are wrapped in {"value": ...}.
Docs: https://info.orcid.org/documentation/integration-guide/orcid-record/
"""
from typing import List, Optional

from pydantic import ConfigDict, StrictBool, StrictStr

from services.schema.common import Number, RawModel


def to_kebab(name: str) -> str:
    return name.replace("_", "-")


class OrcidModel(RawModel):
    model_config = ConfigDict(alias_generator=to_kebab, populate_by_name=True, extra="ignore")


class StringValue(OrcidModel):
    value: Optional[StrictStr] = None


class NumberValue(OrcidModel):
    value: Optional[Number] = None


class SourceName(OrcidModel):
    source_name: Optional[StringValue] = None


class Sourced(OrcidModel):
    source: Optional[SourceName] = None

    @property
    def source_label(self) -> Optional[str]:
        if self.source and self.source.source_name:
            return self.source.source_name.value
        return None


# ---- person ----

class PersonName(OrcidModel):
    given_names: Optional[StringValue] = None
    family_name: Optional[StringValue] = None
    credit_name: Optional[StringValue] = None


class Biography(OrcidModel):
    content: Optional[StrictStr] = None


class Keyword(Sourced):
    content: Optional[StrictStr] = None


class Keywords(OrcidModel):
    keyword: Optional[List[Keyword]] = None


class OtherName(Sourced):
    content: Optional[StrictStr] = None


class OtherNames(OrcidModel):
    other_name: Optional[List[OtherName]] = None


class Email(OrcidModel):
    email: Optional[StrictStr] = None
    verified: Optional[StrictBool] = None
    primary: Optional[StrictBool] = None


class Emails(OrcidModel):
    email: Optional[List[Email]] = None


class ExternalIdentifier(Sourced):
    external_id_type: Optional[StrictStr] = None
    external_id_value: Optional[StrictStr] = None
    external_id_url: Optional[StringValue] = None


class ExternalIdentifiers(OrcidModel):
    external_identifier: Optional[List[ExternalIdentifier]] = None


class ResearcherUrl(OrcidModel):
    url_name: Optional[StrictStr] = None
    url: Optional[StringValue] = None


class ResearcherUrls(OrcidModel):
    researcher_url: Optional[List[ResearcherUrl]] = None


class OrcidPerson(OrcidModel):
    name: Optional[PersonName] = None
    biography: Optional[Biography] = None
    keywords: Optional[Keywords] = None
    other_names: Optional[OtherNames] = None
    emails: Optional[Emails] = None
    external_identifiers: Optional[ExternalIdentifiers] = None
    researcher_urls: Optional[ResearcherUrls] = None
    last_modified_date: Optional[NumberValue] = None


# ---- dates ----

class FuzzyDate(OrcidModel):
    """Year, month and day are each optional; values are digit strings."""

    year: Optional[StringValue] = None
    month: Optional[StringValue] = None
    day: Optional[StringValue] = None


# ---- works ----

class WorkTitle(OrcidModel):
    title: Optional[StringValue] = None


class WorkSummary(Sourced):
    title: Optional[WorkTitle] = None
    type: Optional[StrictStr] = None
    publication_date: Optional[FuzzyDate] = None
    journal_title: Optional[StringValue] = None
    url: Optional[StringValue] = None


class WorkExternalId(Sourced):
    external_id_type: Optional[StrictStr] = None
    external_id_value: Optional[StrictStr] = None
    external_id_url: Optional[StringValue] = None


class WorkExternalIds(OrcidModel):
    external_id: Optional[List[WorkExternalId]] = None


class WorkGroup(OrcidModel):
    external_ids: Optional[WorkExternalIds] = None
    work_summary: Optional[List[WorkSummary]] = None


class OrcidWorks(OrcidModel):
    group: Optional[List[WorkGroup]] = None


# ---- educations / employments ----

class OrganizationAddress(OrcidModel):
    city: Optional[StrictStr] = None
    region: Optional[StrictStr] = None
    country: Optional[StrictStr] = None


class DisambiguatedOrganization(OrcidModel):
    disambiguated_organization_identifier: Optional[StrictStr] = None
    disambiguation_source: Optional[StrictStr] = None


class Organization(OrcidModel):
    name: Optional[StrictStr] = None
    address: Optional[OrganizationAddress] = None
    disambiguated_organization: Optional[DisambiguatedOrganization] = None


class AffiliationSummary(Sourced):
    organization: Optional[Organization] = None
    department_name: Optional[StrictStr] = None
    role_title: Optional[StrictStr] = None
    start_date: Optional[FuzzyDate] = None
    end_date: Optional[FuzzyDate] = None


class AffiliationSummaryWrapper(OrcidModel):
    education_summary: Optional[AffiliationSummary] = None
    employment_summary: Optional[AffiliationSummary] = None

    @property
    def summary(self) -> Optional[AffiliationSummary]:
        if self.education_summary is not None:
            return self.education_summary
        return self.employment_summary


class AffiliationGroup(OrcidModel):
    summaries: Optional[List[AffiliationSummaryWrapper]] = None


class OrcidAffiliations(OrcidModel):
    affiliation_group: Optional[List[AffiliationGroup]] = None
