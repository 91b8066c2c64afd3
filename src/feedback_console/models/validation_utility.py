from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from feedback_console.db.base import RecordBase


class ValidationUtility(RecordBase):
    """A named configuration or validation rule used by the wider platform."""

    __tablename__ = "configuration_validation_utilities"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    validation_rule: Mapped[str | None] = mapped_column(Text, default=None)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    enabled_for_production: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
