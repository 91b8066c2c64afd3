"""Generic CRUD utilities for declarative resource endpoints."""

from __future__ import annotations

from feedback_console.api.generic.filters import FilterField, FilterType
from feedback_console.api.generic.router import (
    CrudResource,
    create_create_router,
    create_delete_router,
    create_read_router,
    create_resource_router,
    create_update_router,
)

__all__ = [
    "CrudResource",
    "FilterField",
    "FilterType",
    "create_create_router",
    "create_delete_router",
    "create_read_router",
    "create_resource_router",
    "create_update_router",
]
