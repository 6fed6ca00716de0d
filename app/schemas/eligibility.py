from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class StoredModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class PayerContact(StoredModel):
    communication_mode: Optional[str] = None
    communication_number: Optional[str] = None


class PayerInfo(StoredModel):
    name: Optional[str] = None
    last_name: Optional[str] = None
    federal_taxpayers_id_number: Optional[str] = None
    contacts: Optional[List[PayerContact]] = None


class PlanInfo(StoredModel):
    group_number: Optional[str] = None
    group_description: Optional[str] = None


class PlanDates(StoredModel):
    plan_begin: Optional[str] = None
    plan_end: Optional[str] = None
    eligibility_begin: Optional[str] = None


class EligibilityRecord(StoredModel):
    """Simplified 271 eligibility reply as kept for a member."""

    payer_info: Optional[PayerInfo] = None
    plan_info: Optional[PlanInfo] = None
    plan_dates: Optional[PlanDates] = None


class UserProfile(StoredModel):
    user_id: str
    full_name: Optional[str] = None
    insurance_provider: Optional[str] = None
