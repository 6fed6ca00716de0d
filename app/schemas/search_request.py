from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Eligibility payload node; camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Subscriber(WireModel):
    entity_identifier: str


class Contact(WireModel):
    communication_mode: str
    communication_number: str


class ContactInformation(WireModel):
    contacts: List[Contact]


class Payer(WireModel):
    entity_identifier: str
    entity_type: str
    last_name: str
    name: str
    federal_taxpayers_id_number: str
    contact_information: ContactInformation


class PlanInformation(WireModel):
    group_number: str
    group_description: str


class PlanDateInformation(WireModel):
    plan_begin: str
    plan_end: str
    eligibility_begin: str


class PlanStatus(WireModel):
    status_code: str
    status: str
    plan_details: str
    service_type_codes: List[str]


class BenefitInformation(WireModel):
    code: str
    name: str
    service_type_codes: Optional[List[str]] = None
    service_types: Optional[List[str]] = None
    plan_coverage: Optional[str] = None
    coverage_level_code: Optional[str] = None
    coverage_level: Optional[str] = None
    time_qualifier_code: Optional[str] = None
    time_qualifier: Optional[str] = None
    benefit_amount: Optional[str] = None
    in_plan_network_indicator_code: Optional[str] = None
    in_plan_network_indicator: Optional[str] = None


class SearchRequest(WireModel):
    symptoms: str
    trading_partner_service_id: str
    lat: float
    lng: float
    subscriber: Subscriber
    payer: Payer
    plan_information: PlanInformation
    plan_date_information: PlanDateInformation
    plan_status: List[PlanStatus]
    benefits_information: List[BenefitInformation]

    def to_wire(self) -> Dict[str, Any]:
        # unset benefit fields are left out of the payload entirely
        return self.model_dump(by_alias=True, exclude_none=True)
