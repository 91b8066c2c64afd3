"""User feedback records: ``/user-feedback``."""

from __future__ import annotations

from feedback_console.api.generic import (
    CrudResource,
    FilterField,
    FilterType,
    create_resource_router,
)
from feedback_console.models.feedback import UserFeedback
from feedback_console.schemas.feedback import FeedbackCreate, FeedbackRead, FeedbackUpdate

resource = CrudResource(
    prefix="/user-feedback",
    resource_name="Feedback",
    key="feedback",
    model=UserFeedback,
    read_schema=FeedbackRead,
    create_schema=FeedbackCreate,
    update_schema=FeedbackUpdate,
    filter_config=[
        FilterField("feedback", FilterType.ILIKE, param_name="search"),
        FilterField("rating", FilterType.EXACT, python_type=int),
        FilterField("user_id", FilterType.EXACT),
        FilterField("is_resolved", FilterType.EXACT, python_type=bool),
        FilterField("created_at", FilterType.DATE_RANGE),
    ],
)

router = create_resource_router(resource)
