from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

from app.db.models import UserProfileRow
from app.services.profile_store import ProfileStore


def session_returning(value) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)
    return session


def test_get_profile_maps_row() -> None:
    row = UserProfileRow(user_id="u-1", full_name="Dana Rivera", insurance_provider="Aetna")
    store = ProfileStore(session_returning(row))

    profile = asyncio.run(store.get_profile("u-1"))

    assert profile.user_id == "u-1"
    assert profile.insurance_provider == "Aetna"
    assert "user_profiles.user_id" in str(store.session.execute.call_args.args[0])


def test_get_eligibility_parses_payload() -> None:
    payload = {
        "payer_info": {"name": "AETNA", "contacts": [{"communication_mode": "Telephone"}]},
        "plan_dates": {"plan_begin": "20250101"},
        "raw_271": {"ignored": True},
    }
    store = ProfileStore(session_returning(payload))

    record = asyncio.run(store.get_eligibility("u-1"))

    assert record.payer_info.name == "AETNA"
    assert record.payer_info.contacts[0].communication_number is None
    assert record.plan_dates.plan_begin == "20250101"
    assert record.plan_info is None


def test_absent_rows_return_none() -> None:
    store = ProfileStore(session_returning(None))

    assert asyncio.run(store.get_profile("ghost")) is None
    assert asyncio.run(store.get_eligibility("ghost")) is None
