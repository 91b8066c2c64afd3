"""Recommender definitions: ``/recommenders``."""

from __future__ import annotations

from feedback_console.api.generic import (
    CrudResource,
    FilterField,
    FilterType,
    create_resource_router,
)
from feedback_console.models.recommender import Recommender
from feedback_console.schemas.recommender import (
    RecommenderCreate,
    RecommenderRead,
    RecommenderUpdate,
)

resource = CrudResource(
    prefix="/recommenders",
    resource_name="Recommender",
    key="recommender",
    model=Recommender,
    read_schema=RecommenderRead,
    create_schema=RecommenderCreate,
    update_schema=RecommenderUpdate,
    filter_config=[
        FilterField("name", FilterType.ILIKE),
        FilterField("model_version", FilterType.EXACT),
        FilterField("is_active", FilterType.EXACT, python_type=bool),
    ],
)

router = create_resource_router(resource)
