from datetime import date
from typing import List, Optional

from app.schemas.eligibility import EligibilityRecord, PayerInfo, PlanDates, PlanInfo, UserProfile
from app.schemas.search_request import (
    BenefitInformation,
    Contact,
    ContactInformation,
    Payer,
    PlanDateInformation,
    PlanInformation,
    PlanStatus,
    SearchRequest,
    Subscriber,
)
from app.services.request_defaults import RequestDefaults


ACTIVE_COVERAGE = "Active Coverage"


def _or(value: Optional[str], default: str) -> str:
    # only a missing value falls back; an empty stored string is kept
    return default if value is None else value


def plan_end_for(today: date) -> str:
    # plan always reported as running through Dec 31 of next year, whatever was stored
    return f"{today.year + 1:04d}1231"


class SearchRequestBuilder:
    def __init__(self, defaults: Optional[RequestDefaults] = None):
        self.defaults = defaults or RequestDefaults()

    def trading_partner_id(self, profile: Optional[UserProfile]) -> str:
        provider = profile.insurance_provider if profile else None
        if provider is None:
            return self.defaults.default_trading_partner_id
        return self.defaults.trading_partners.get(provider, self.defaults.default_trading_partner_id)

    def contacts(self, payer_info: Optional[PayerInfo]) -> List[Contact]:
        if payer_info is not None and payer_info.contacts is not None:
            return [
                Contact(
                    communication_mode=_or(c.communication_mode, ""),
                    communication_number=_or(c.communication_number, ""),
                )
                for c in payer_info.contacts
            ]
        return [
            Contact(communication_mode=mode, communication_number=number)
            for mode, number in self.defaults.payer_contacts
        ]

    def payer(self, payer_info: Optional[PayerInfo]) -> Payer:
        info = payer_info or PayerInfo()
        d = self.defaults
        return Payer(
            entity_identifier="Payer",
            entity_type="Non-Person Entity",
            last_name=_or(info.last_name, d.payer_last_name),
            name=_or(info.name, d.payer_name),
            federal_taxpayers_id_number=_or(info.federal_taxpayers_id_number, d.payer_federal_taxpayers_id_number),
            contact_information=ContactInformation(contacts=self.contacts(payer_info)),
        )

    def plan_information(self, plan_info: Optional[PlanInfo]) -> PlanInformation:
        info = plan_info or PlanInfo()
        return PlanInformation(
            group_number=_or(info.group_number, self.defaults.group_number),
            group_description=_or(info.group_description, self.defaults.group_description),
        )

    def plan_dates(self, plan_dates: Optional[PlanDates], today: date) -> PlanDateInformation:
        dates = plan_dates or PlanDates()
        return PlanDateInformation(
            plan_begin=_or(dates.plan_begin, self.defaults.plan_begin),
            plan_end=plan_end_for(today),
            eligibility_begin=_or(dates.eligibility_begin, self.defaults.eligibility_begin),
        )

    def plan_status(self) -> List[PlanStatus]:
        return [
            PlanStatus(
                status_code="1",
                status=ACTIVE_COVERAGE,
                plan_details=self.defaults.plan_details,
                service_type_codes=[code],
            )
            for code in ("30", "A6")
        ]

    def benefits(self) -> List[BenefitInformation]:
        d = self.defaults
        return [
            BenefitInformation(
                code="1",
                name=ACTIVE_COVERAGE,
                service_type_codes=["30"],
                service_types=[d.service_type],
                plan_coverage=d.plan_details,
            ),
            BenefitInformation(
                code="C",
                name="Deductible",
                service_type_codes=["30"],
                service_types=[d.service_type],
                coverage_level_code="IND",
                coverage_level="Individual",
                time_qualifier_code="23",
                time_qualifier="Calendar Year",
                benefit_amount=d.deductible_amount,
                in_plan_network_indicator_code="Y",
                in_plan_network_indicator="Yes",
            ),
        ]

    def build(
        self,
        symptoms: str,
        lat: float,
        lng: float,
        eligibility: EligibilityRecord,
        profile: Optional[UserProfile],
        today: Optional[date] = None,
    ) -> SearchRequest:
        today = today or date.today()
        return SearchRequest(
            symptoms=symptoms,
            trading_partner_service_id=self.trading_partner_id(profile),
            lat=lat,
            lng=lng,
            subscriber=Subscriber(entity_identifier="Insured or Subscriber"),
            payer=self.payer(eligibility.payer_info),
            plan_information=self.plan_information(eligibility.plan_info),
            plan_date_information=self.plan_dates(eligibility.plan_dates, today),
            plan_status=self.plan_status(),
            benefits_information=self.benefits(),
        )
