"""Configuration & validation utilities: ``/configuration-validation-utilities``."""

from __future__ import annotations

from feedback_console.api.generic import (
    CrudResource,
    FilterField,
    FilterType,
    create_resource_router,
)
from feedback_console.models.validation_utility import ValidationUtility
from feedback_console.schemas.validation_utility import (
    ValidationUtilityCreate,
    ValidationUtilityRead,
    ValidationUtilityUpdate,
)

resource = CrudResource(
    prefix="/configuration-validation-utilities",
    resource_name="Configuration validation utility",
    key="validation_utility",
    model=ValidationUtility,
    read_schema=ValidationUtilityRead,
    create_schema=ValidationUtilityCreate,
    update_schema=ValidationUtilityUpdate,
    filter_config=[
        FilterField("name", FilterType.ILIKE),
        FilterField("is_active", FilterType.EXACT, python_type=bool),
        FilterField("enabled_for_production", FilterType.EXACT, python_type=bool),
    ],
)

router = create_resource_router(resource)
