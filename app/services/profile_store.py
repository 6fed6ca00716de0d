from typing import Optional

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import EligibilityRecordRow, UserProfileRow
from app.schemas.eligibility import EligibilityRecord, UserProfile


class ProfileStore:
    """Read-only lookups of a member's profile and stored eligibility."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        row = (
            await self.session.execute(sa.select(UserProfileRow).where(UserProfileRow.user_id == user_id))
        ).scalar_one_or_none()
        if row is None:
            return None
        return UserProfile(
            user_id=row.user_id,
            full_name=row.full_name,
            insurance_provider=row.insurance_provider,
        )

    async def get_eligibility(self, user_id: str) -> Optional[EligibilityRecord]:
        payload = (
            await self.session.execute(
                sa.select(EligibilityRecordRow.payload).where(EligibilityRecordRow.user_id == user_id)
            )
        ).scalar_one_or_none()
        if payload is None:
            return None
        return EligibilityRecord.model_validate(payload)
