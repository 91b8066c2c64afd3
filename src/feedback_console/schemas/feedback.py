from __future__ import annotations

from datetime import datetime
from typing import TypedDict

from pydantic import ConfigDict, Field, field_validator

from feedback_console.schemas.generic import CamelModel, blank_to_none, reject_none


class FeedbackCreate(CamelModel):
    """Fields a user may submit for a new feedback record."""

    feedback: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    email: str | None = None
    user_id: str | None = None
    submitted_by: str | None = None
    is_resolved: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "feedback": "The suggested questions were spot on.",
                "rating": 5,
                "email": "analyst@example.com",
            }
        },
    )

    @field_validator("email", "user_id", "submitted_by", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        return blank_to_none(v)


class FeedbackUpdate(CamelModel):
    """Partial update. Only keys present in the request are written."""

    feedback: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=5)
    email: str | None = None
    user_id: str | None = None
    submitted_by: str | None = None
    is_resolved: bool | None = None

    @field_validator("email", "user_id", "submitted_by", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        return blank_to_none(v)

    @field_validator("feedback", "rating", "is_resolved", mode="before")
    @classmethod
    def reject_none_for_non_nullable(cls, v: object, info) -> object:  # noqa: ANN401
        return reject_none(v, info.field_name)


class FeedbackRead(CamelModel):
    id: str
    feedback: str
    rating: int
    email: str | None
    user_id: str | None
    submitted_by: str | None
    is_resolved: bool
    created_at: datetime
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class FeedbackFormValues(TypedDict, total=False):
    feedback: str
    rating: str
    email: str
