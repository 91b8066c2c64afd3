from __future__ import annotations

from datetime import datetime
from typing import TypedDict

from pydantic import ConfigDict, Field, field_validator

from feedback_console.schemas.generic import CamelModel, blank_to_none, reject_none


class ValidationUtilityCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    validation_rule: str | None = None
    description: str | None = None
    enabled_for_production: bool = False
    is_active: bool = True

    @field_validator("validation_rule", "description", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        return blank_to_none(v)


class ValidationUtilityUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    validation_rule: str | None = None
    description: str | None = None
    enabled_for_production: bool | None = None
    is_active: bool | None = None

    @field_validator("validation_rule", "description", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        return blank_to_none(v)

    @field_validator("name", "enabled_for_production", "is_active", mode="before")
    @classmethod
    def reject_none_for_non_nullable(cls, v: object, info) -> object:  # noqa: ANN401
        return reject_none(v, info.field_name)


class ValidationUtilityRead(CamelModel):
    id: str
    name: str
    validation_rule: str | None
    description: str | None
    enabled_for_production: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ValidationUtilityFormValues(TypedDict, total=False):
    name: str
    validation_rule: str
    description: str
    enabled_for_production: bool
    is_active: bool
