# services/schema/nih_reporter.py
"""
NIH RePORTER v2 `projects/search` response.
Docs: https://api.reporter.nih.gov/
"""
from typing import List, Optional, Union

from pydantic import StrictBool, StrictInt, StrictStr

from services.schema.common import Number, RawModel


class NIHPrincipalInvestigator(RawModel):
    profile_id: Optional[Number] = None
    first_name: Optional[StrictStr] = None
    middle_name: Optional[StrictStr] = None
    last_name: Optional[StrictStr] = None
    full_name: Optional[StrictStr] = None
    title: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    is_contact_pi: Optional[StrictBool] = None


class NIHOrganization(RawModel):
    org_name: Optional[StrictStr] = None
    org_city: Optional[StrictStr] = None
    org_state: Optional[StrictStr] = None
    org_country: Optional[StrictStr] = None
    org_zipcode: Optional[StrictStr] = None
    # Single DUNS or a list of them depending on the record age
    org_duns: Optional[Union[StrictStr, List[StrictStr]]] = None
    org_fips: Optional[StrictStr] = None
    dept_type: Optional[StrictStr] = None
    org_department: Optional[StrictStr] = None


class NIHAgency(RawModel):
    code: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    abbreviation: Optional[StrictStr] = None


class NIHProjectNumSplit(RawModel):
    appl_type_code: Optional[StrictStr] = None
    activity_code: Optional[StrictStr] = None
    ic_code: Optional[StrictStr] = None
    serial_num: Optional[StrictStr] = None
    support_year: Optional[StrictStr] = None


class NIHSpendingCategory(RawModel):
    code: Optional[StrictStr] = None
    name: Optional[StrictStr] = None


class NIHStudySection(RawModel):
    srg_code: Optional[StrictStr] = None
    srg_flex: Optional[StrictStr] = None
    sra_designator_code: Optional[StrictStr] = None
    sra_flex_code: Optional[StrictStr] = None
    group_code: Optional[StrictStr] = None
    name: Optional[StrictStr] = None


class NIHProject(RawModel):
    appl_id: Optional[Number] = None
    project_num: Optional[StrictStr] = None
    project_serial_num: Optional[StrictStr] = None
    project_title: Optional[StrictStr] = None
    project_start_date: Optional[StrictStr] = None
    project_end_date: Optional[StrictStr] = None
    budget_start: Optional[StrictStr] = None
    budget_end: Optional[StrictStr] = None
    fiscal_year: Optional[StrictInt] = None
    award_amount: Optional[Number] = None
    award_notice_date: Optional[StrictStr] = None
    is_active: Optional[StrictBool] = None
    project_num_split: Optional[NIHProjectNumSplit] = None
    principal_investigators: Optional[List[NIHPrincipalInvestigator]] = None
    contact_pi_name: Optional[StrictStr] = None
    other_pi_names: Optional[List[StrictStr]] = None
    organization: Optional[NIHOrganization] = None
    agency_ic_admin: Optional[NIHAgency] = None
    agency_ic_fundings: Optional[List[NIHAgency]] = None
    cong_dist: Optional[StrictStr] = None
    project_terms: Optional[StrictStr] = None
    pref_terms: Optional[StrictStr] = None
    abstract_text: Optional[StrictStr] = None
    phr_text: Optional[StrictStr] = None
    spending_cats: Optional[List[NIHSpendingCategory]] = None
    covid_response: Optional[List[StrictStr]] = None
    arra_funded: Optional[StrictStr] = None
    is_new: Optional[StrictBool] = None
    mechanism_code_dc: Optional[StrictStr] = None
    core_project_num: Optional[StrictStr] = None
    full_study_section: Optional[NIHStudySection] = None
    subproject_id: Optional[Union[StrictInt, StrictStr]] = None
    total_cost: Optional[Number] = None
    total_cost_sub_project: Optional[Number] = None


class NIHSearchMeta(RawModel):
    search_id: Optional[StrictStr] = None
    total: Optional[StrictInt] = None
    offset: Optional[StrictInt] = None
    limit: Optional[StrictInt] = None
    sort_field: Optional[StrictStr] = None
    sort_order: Optional[StrictStr] = None


class NIHSearchResponse(RawModel):
    meta: Optional[NIHSearchMeta] = None
    results: Optional[List[NIHProject]] = None
