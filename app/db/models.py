from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class UserProfileRow(Base):
    __tablename__ = "user_profiles"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    full_name: Mapped[Optional[str]] = mapped_column(String(255))
    insurance_provider: Mapped[Optional[str]] = mapped_column(String(128))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), server_default=func.now(), nullable=False)

    eligibility: Mapped[Optional[EligibilityRecordRow]] = relationship(
        "EligibilityRecordRow", back_populates="profile", uselist=False
    )


class EligibilityRecordRow(Base):
    __tablename__ = "eligibility_records"

    user_id: Mapped[str] = mapped_column(ForeignKey("user_profiles.user_id"), primary_key=True)
    # simplified 271 reply: payer_info / plan_info / plan_dates
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    profile: Mapped[UserProfileRow] = relationship("UserProfileRow", back_populates="eligibility")
