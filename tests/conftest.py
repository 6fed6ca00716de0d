from __future__ import annotations

import json
from typing import Callable, Dict, Optional

import httpx
import pytest

from app.schemas.eligibility import EligibilityRecord, UserProfile
from app.services.mock_data import MOCK_SEARCH_RESPONSE_JSON
from app.services.search_client import HospitalSearchClient


class FakeProfileStore:
    """In-memory stand-in for the database-backed ProfileStore."""

    def __init__(
        self,
        profiles: Optional[Dict[str, UserProfile]] = None,
        eligibility: Optional[Dict[str, EligibilityRecord]] = None,
    ) -> None:
        self.profiles = profiles or {}
        self.eligibility = eligibility or {}

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return self.profiles.get(user_id)

    async def get_eligibility(self, user_id: str) -> Optional[EligibilityRecord]:
        return self.eligibility.get(user_id)


@pytest.fixture
def search_url() -> str:
    return "https://agent.test/search"


@pytest.fixture
def make_search_client(search_url) -> Callable[..., HospitalSearchClient]:
    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        mock_on_decode_failure: bool = True,
    ) -> HospitalSearchClient:
        return HospitalSearchClient(
            search_url,
            mock_on_decode_failure=mock_on_decode_failure,
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def agent_payload() -> Callable[..., dict]:
    def _payload(**overrides) -> dict:
        payload = json.loads(MOCK_SEARCH_RESPONSE_JSON)
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def eligibility() -> EligibilityRecord:
    return EligibilityRecord.model_validate(
        {
            "payer_info": {
                "name": "CIGNA HEALTH",
                "last_name": "CIGNA",
                "federal_taxpayers_id_number": "060303370",
                "contacts": [
                    {"communication_mode": "Telephone", "communication_number": "8005551234"},
                    {"communication_mode": "Electronic Mail"},
                ],
            },
            "plan_info": {"group_number": "3340123", "group_description": "Acme Corp"},
            "plan_dates": {"plan_begin": "20250101", "plan_end": "20231231", "eligibility_begin": "20220601"},
        }
    )


@pytest.fixture
def bare_eligibility() -> EligibilityRecord:
    return EligibilityRecord()


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(user_id="u-1", full_name="Dana Rivera", insurance_provider="Cigna")


@pytest.fixture
def store(eligibility, profile) -> FakeProfileStore:
    return FakeProfileStore(
        profiles={"u-1": profile, "no-elig": UserProfile(user_id="no-elig")},
        eligibility={"u-1": eligibility, "no-profile": EligibilityRecord()},
    )
