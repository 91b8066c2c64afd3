from __future__ import annotations

from datetime import datetime
from typing import TypedDict

from pydantic import ConfigDict, Field, field_validator

from feedback_console.schemas.generic import CamelModel, blank_to_none, reject_none


class RecommenderCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    model_version: str | None = Field(default=None, max_length=50)
    is_active: bool = True

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "follow-up-questions",
                "description": "Suggests follow-up questions from project metadata",
                "modelVersion": "deepseek-chat",
                "isActive": True,
            }
        },
    )

    @field_validator("description", "model_version", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        return blank_to_none(v)


class RecommenderUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    model_version: str | None = Field(default=None, max_length=50)
    is_active: bool | None = None

    @field_validator("description", "model_version", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        return blank_to_none(v)

    @field_validator("name", "is_active", mode="before")
    @classmethod
    def reject_none_for_non_nullable(cls, v: object, info) -> object:  # noqa: ANN401
        return reject_none(v, info.field_name)


class RecommenderRead(CamelModel):
    id: str
    name: str
    description: str | None
    model_version: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class RecommenderFormValues(TypedDict, total=False):
    name: str
    description: str
    model_version: str
    is_active: bool
