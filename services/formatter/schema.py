# services/formatter/schema.py
from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# JSON numbers keep their int/float form through serialization.
Numeric = Union[int, float]


# ---- Publications (Europe PMC) ----

class Author(BaseModel):
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    initials: Optional[str] = None
    orcid: Optional[str] = None
    affiliations: List[str] = Field(default_factory=list)


class PublicationGrant(BaseModel):
    grant_id: Optional[str] = None
    agency: Optional[str] = None
    acronym: Optional[str] = None


class PublicationRecord(BaseModel):
    title: str
    abstract: str
    doi: Optional[str] = None
    pmid: Optional[str] = None
    pmcid: Optional[str] = None
    publication_date: Optional[str] = None
    journal_name: Optional[str] = None
    journal_issn: Optional[str] = None
    authors: List[Author] = Field(default_factory=list)
    source: str = "Europe PMC"
    full_text_url: Optional[str] = None
    citation_count: Optional[Numeric] = None
    keywords: List[str] = Field(default_factory=list)
    subjects: List[str] = Field(default_factory=list)  # "*Descriptor/qualifier"
    grants: List[PublicationGrant] = Field(default_factory=list)
    is_open_access: Optional[bool] = None


# ---- Grants (NIH RePORTER) ----

class PrincipalInvestigator(BaseModel):
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    credit_name: Optional[str] = None


class GrantRecord(BaseModel):
    id: str
    title: Optional[str] = None
    funder: Optional[str] = None
    year: Optional[int] = None
    amount: Optional[Numeric] = None
    currency: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    recipient: Optional[str] = None
    principal_investigators: List[PrincipalInvestigator] = Field(default_factory=list)
    abstract: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    is_active: Optional[bool] = None
    award_type: Optional[str] = None


# ---- Researcher profile (ORCID) ----

class EmailAddress(BaseModel):
    address: Optional[str] = None
    primary: bool = False
    verified: bool = False


class ResearcherId(BaseModel):
    orcid: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    credit_name: Optional[str] = None
    emails: List[EmailAddress] = Field(default_factory=list)


class DescriptionSection(BaseModel):
    title: str
    content: str


class Description(BaseModel):
    sections: List[DescriptionSection] = Field(default_factory=list)


class ExternalReference(BaseModel):
    url: Optional[str] = None
    name: Optional[str] = None
    source: Optional[str] = None


class OrganizationAddress(BaseModel):
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None


class Organization(BaseModel):
    name: str = ""
    address: Optional[OrganizationAddress] = None
    disambiguation_source: Optional[str] = None


class Affiliation(BaseModel):
    organization: Organization
    department_name: Optional[str] = None
    role_title: Optional[str] = None
    start_date: Optional[str] = None  # partial ISO: "2015", "2015-09", "2015-09-01"
    end_date: Optional[str] = None
    source_name: Optional[str] = None


class ProfilePublication(BaseModel):
    title: Optional[str] = None
    publication_date: Optional[date] = None
    journal_name: Optional[str] = None
    source: Optional[str] = None
    doi: Optional[str] = None


class ResearcherProfile(BaseModel):
    researcher_id: ResearcherId
    description: Description = Field(default_factory=Description)
    external_references: List[ExternalReference] = Field(default_factory=list)
    educations: List[Affiliation] = Field(default_factory=list)
    employments: List[Affiliation] = Field(default_factory=list)
    publications: List[ProfilePublication] = Field(default_factory=list)


# ---- Screening (Consolidated Screening List) ----

class ScreeningAddress(BaseModel):
    model_config = ConfigDict(extra="allow")

    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class ScreeningEntityId(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    number: Optional[str] = None
    country: Optional[str] = None


class ScreeningEntity(BaseModel):
    # Registry keys without a declared field pass through as-is
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    alt_names: Optional[List[str]] = None
    addresses: Optional[List[ScreeningAddress]] = None
    source: Optional[str] = None
    source_list_url: Optional[str] = None
    source_information_url: Optional[str] = None
    federal_register_notice: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    standard_order: Optional[str] = None
    license_requirement: Optional[str] = None
    license_policy: Optional[str] = None
    call_sign: Optional[str] = None
    vessel_type: Optional[str] = None
    gross_tonnage: Optional[str] = None
    gross_registered_tonnage: Optional[str] = None
    vessel_flag: Optional[str] = None
    vessel_owner: Optional[str] = None
    remarks: Optional[str] = None
    title: Optional[str] = None
    programs: Optional[List[str]] = None
    ids: Optional[List[ScreeningEntityId]] = None


class ScreeningSourceCount(BaseModel):
    value: Optional[str] = None
    count: Optional[Numeric] = None


class ScreeningResult(BaseModel):
    total: Numeric = 0
    results: List[ScreeningEntity] = Field(default_factory=list)
    sources: Optional[List[ScreeningSourceCount]] = None


# ---- Geography (Google Maps) ----

class CoordinatesResult(BaseModel):
    latitude: float
    longitude: float
    formatted_address: Optional[str] = None
    address: str


class DistanceResult(BaseModel):
    origin_address: Optional[str] = None
    destination_address: Optional[str] = None
    distance_km: float
    distance_text: Optional[str] = None
    duration: Optional[str] = None
    duration_seconds: Optional[Numeric] = None
