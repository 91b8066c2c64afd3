"""Declarative list filters for the generic resource routers."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic.alias_generators import to_camel
from sqlalchemy.sql import Select


class FilterType(Enum):
    """Supported filter types."""

    EXACT = "exact"
    ILIKE = "ilike"
    DATE_RANGE = "date_range"


@dataclasses.dataclass(frozen=True)
class FilterField:
    """One filterable column.

    Args:
        column_name: SQLAlchemy model column name.
        filter_type: How to filter (EXACT, ILIKE, DATE_RANGE).
        param_name: Query parameter name. Defaults to the camelCase column
            name, matching the JSON keys of the resource.
        python_type: Python type for EXACT filters. Default str.
    """

    column_name: str
    filter_type: FilterType
    param_name: str | None = None
    python_type: type = str

    @property
    def effective_param_name(self) -> str:
        if self.param_name is not None:
            return self.param_name
        return to_camel(self.column_name)

    def query_params(self) -> list[str]:
        """Names of the query parameters this filter reads."""
        param = self.effective_param_name
        if self.filter_type == FilterType.DATE_RANGE:
            return [f"{param}After", f"{param}Before"]
        return [param]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def apply_filters(
    query: Select,
    model: type,
    filter_config: list[FilterField],
    filter_values: dict[str, Any],
) -> Select:
    """Add a WHERE clause for every filter that received a value.

    Args:
        query: Base SELECT query.
        model: SQLAlchemy model class.
        filter_config: List of FilterField declarations.
        filter_values: Dict of query parameter name -> value from the request.

    Returns:
        Query with WHERE clauses applied.
    """
    for field in filter_config:
        column = getattr(model, field.column_name)

        if field.filter_type == FilterType.EXACT:
            value = filter_values.get(field.effective_param_name)
            if value is not None:
                query = query.where(column == value)

        elif field.filter_type == FilterType.ILIKE:
            value = filter_values.get(field.effective_param_name)
            if value:
                query = query.where(column.ilike(f"%{_escape_like(value)}%", escape="\\"))

        elif field.filter_type == FilterType.DATE_RANGE:
            after_param, before_param = field.query_params()
            after_value = filter_values.get(after_param)
            before_value = filter_values.get(before_param)
            if after_value is not None:
                query = query.where(column >= after_value)
            if before_value is not None:
                query = query.where(column <= before_value)

    return query


def make_filter_dependency(
    filter_config: list[FilterField],
    resource_name: str = "",
) -> type:
    """Build a dataclass FastAPI can use with ``Depends()``.

    FastAPI introspects the dataclass fields as optional query parameters.

    Args:
        filter_config: List of FilterField declarations.
        resource_name: Used for a unique class name in the OpenAPI schema.
    """
    fields: list[tuple[str, Any, dataclasses.Field]] = []

    for field in filter_config:
        if field.filter_type == FilterType.DATE_RANGE:
            param_type: Any = datetime | None
        elif field.filter_type == FilterType.EXACT:
            param_type = field.python_type | None
        else:
            param_type = str | None
        for param in field.query_params():
            fields.append((param, param_type, dataclasses.field(default=None)))

    class_name = f"{resource_name.replace(' ', '')}FilterParams" if resource_name else "FilterParams"
    return dataclasses.make_dataclass(class_name, fields)
