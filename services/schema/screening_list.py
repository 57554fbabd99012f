# services/schema/screening_list.py
"""
trade.gov Consolidated Screening List `search` response.
The registry shape is already close to what we emit, so this is typing only.
Entities carry many list-specific keys (dates_of_birth, nationalities, ...);
those are passed through untouched.
"""
from typing import List, Optional

from pydantic import ConfigDict, StrictStr

from services.schema.common import Number, RawModel


class CSLPassThrough(RawModel):
    """Declared fields are typed, any other registry key is kept as sent."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class CSLAddress(CSLPassThrough):
    address: Optional[StrictStr] = None
    city: Optional[StrictStr] = None
    state: Optional[StrictStr] = None
    postal_code: Optional[StrictStr] = None
    country: Optional[StrictStr] = None


class CSLEntityId(CSLPassThrough):
    type: Optional[StrictStr] = None
    number: Optional[StrictStr] = None
    country: Optional[StrictStr] = None


class CSLEntity(CSLPassThrough):
    name: Optional[StrictStr] = None
    alt_names: Optional[List[StrictStr]] = None
    addresses: Optional[List[CSLAddress]] = None
    source: Optional[StrictStr] = None
    source_list_url: Optional[StrictStr] = None
    source_information_url: Optional[StrictStr] = None
    federal_register_notice: Optional[StrictStr] = None
    start_date: Optional[StrictStr] = None
    end_date: Optional[StrictStr] = None
    standard_order: Optional[StrictStr] = None
    license_requirement: Optional[StrictStr] = None
    license_policy: Optional[StrictStr] = None
    call_sign: Optional[StrictStr] = None
    vessel_type: Optional[StrictStr] = None
    gross_tonnage: Optional[StrictStr] = None
    gross_registered_tonnage: Optional[StrictStr] = None
    vessel_flag: Optional[StrictStr] = None
    vessel_owner: Optional[StrictStr] = None
    remarks: Optional[StrictStr] = None
    title: Optional[StrictStr] = None
    programs: Optional[List[StrictStr]] = None
    ids: Optional[List[CSLEntityId]] = None


class CSLSourceCount(RawModel):
    value: Optional[StrictStr] = None
    count: Optional[Number] = None


class CSLSearchResponse(RawModel):
    total: Optional[Number] = None
    results: Optional[List[CSLEntity]] = None
    sources: Optional[List[CSLSourceCount]] = None
