# File: api/models/tool_models.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

# ---- Tool parameters ----

class PublicationSearchParams(BaseModel):
    identifier: str = Field(..., min_length=1, description="The ORCID identifier of the researcher")
    max_results: int = Field(20, ge=1, le=1000, description="Maximum number of results to return")


class PublicationDetailParams(BaseModel):
    identifier: str = Field(..., min_length=1, description="The ORCID identifier of the researcher")
    index: int = Field(..., description="The index of the publication in the search results (0-based)")


class GrantSearchParams(BaseModel):
    name: str = Field(..., min_length=1, description="Investigator or organization name")
    max_results: int = Field(20, ge=1, le=500, description="Maximum number of results to return")


class GrantNumberParams(BaseModel):
    project_number: str = Field(..., description="The NIH project/grant number")


class ProfileParams(BaseModel):
    identifier: str = Field(..., min_length=1, description="The ORCID identifier of the researcher")


class GeocodeParams(BaseModel):
    address: str = Field(..., min_length=1, description="The address to geocode")


class DistanceParams(BaseModel):
    origin: str = Field(..., min_length=1, description="The starting address")
    destination: str = Field(..., min_length=1, description="The destination address")


class ScreeningParams(BaseModel):
    name: Optional[str] = Field(None, description="Name of person or entity to search for")
    countries: Optional[str] = Field(None, description="Comma-separated list of country codes (e.g., 'RU,CN')")
    city: Optional[str] = Field(None, description="City name to filter results")
    state: Optional[str] = Field(None, description="State or province to filter results")


# ---- HTTP surface ----

class ToolCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ToolCallResponse(BaseModel):
    name: str
    result: str


class ToolDescription(BaseModel):
    name: str
    description: str
    parameters: Dict[str, Any]
