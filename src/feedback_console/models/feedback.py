from __future__ import annotations

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from feedback_console.db.base import RecordBase


class UserFeedback(RecordBase):
    __tablename__ = "user_feedback"

    feedback: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    email: Mapped[str | None] = mapped_column(String(254), default=None)
    user_id: Mapped[str | None] = mapped_column(String(64), default=None)
    submitted_by: Mapped[str | None] = mapped_column(String(128), default=None)
    is_resolved: Mapped[bool] = mapped_column(Boolean, default=False)
