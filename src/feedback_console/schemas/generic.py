"""Shared schema building blocks for every resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotFoundError(BaseModel):
    """Standard 404 error response."""

    message: str
    id: str


def blank_to_none(value: object) -> object:
    """Treat an empty or whitespace-only form string as an omitted value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def reject_none(value: object, field_name: str) -> object:
    """Reject explicit null for columns that are NOT NULL."""
    if value is None:
        msg = f"{field_name} cannot be null"
        raise ValueError(msg)
    return value
