"""The resources shown in the console and how each one is presented."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from pydantic import BaseModel

from feedback_console.console.forms import EMAIL_PATTERN, FieldKind, FormField, ResourceForm
from feedback_console.console.page import ResourcePage
from feedback_console.console.services import ResourceService
from feedback_console.console.tables import Column, ResourceTable
from feedback_console.schemas.feedback import (
    FeedbackCreate,
    FeedbackFormValues,
    FeedbackRead,
    FeedbackUpdate,
)
from feedback_console.schemas.recommender import (
    RecommenderCreate,
    RecommenderFormValues,
    RecommenderRead,
    RecommenderUpdate,
)
from feedback_console.schemas.validation_utility import (
    ValidationUtilityCreate,
    ValidationUtilityFormValues,
    ValidationUtilityRead,
    ValidationUtilityUpdate,
)

RATING_OPTIONS = (
    ("1", "1 - Poor"),
    ("2", "2 - Fair"),
    ("3", "3 - Good"),
    ("4", "4 - Very Good"),
    ("5", "5 - Excellent"),
)


@dataclass(frozen=True)
class ConsoleResource:
    slug: str
    title: str
    singular: str
    plural: str
    api_path: str
    record_schema: type[BaseModel]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    form: ResourceForm
    table: ResourceTable

    def service(self, client: httpx.AsyncClient, api_prefix: str = "/api") -> ResourceService:
        if self.api_path.startswith(("http://", "https://")):
            base_path = self.api_path
        else:
            base_path = f"{api_prefix}{self.api_path}"
        return ResourceService(
            client,
            base_path,
            record_schema=self.record_schema,
            create_schema=self.create_schema,
            update_schema=self.update_schema,
        )

    def page(self, client: httpx.AsyncClient, api_prefix: str = "/api") -> ResourcePage:
        return ResourcePage(
            self.service(client, api_prefix),
            singular=self.singular,
            plural=self.plural,
        )


FEEDBACK = ConsoleResource(
    slug="user-feedback",
    title="User Feedback",
    singular="feedback",
    plural="feedbacks",
    api_path="/user-feedback",
    record_schema=FeedbackRead,
    create_schema=FeedbackCreate,
    update_schema=FeedbackUpdate,
    form=ResourceForm(
        values_type=FeedbackFormValues,
        fields=[
            FormField(
                "feedback",
                "Feedback",
                kind=FieldKind.TEXTAREA,
                required="Feedback is required",
            ),
            FormField(
                "rating",
                "Rating",
                kind=FieldKind.SELECT,
                required="Rating is required",
                options=RATING_OPTIONS,
                placeholder="Select a rating",
            ),
            FormField(
                "email",
                "Email (Optional)",
                kind=FieldKind.EMAIL,
                pattern=EMAIL_PATTERN,
                pattern_message="Please enter a valid email",
            ),
        ],
        submit_label="Submit Feedback",
    ),
    table=ResourceTable(
        columns=[
            Column("Feedback", "feedback"),
            Column("Rating", "rating"),
            Column("Submitted By", "submitted_by"),
            Column("Created At", "created_at"),
        ],
        empty_message="No feedback available",
    ),
)

RECOMMENDERS = ConsoleResource(
    slug="recommenders",
    title="Recommender System",
    singular="recommender",
    plural="recommenders",
    api_path="/recommenders",
    record_schema=RecommenderRead,
    create_schema=RecommenderCreate,
    update_schema=RecommenderUpdate,
    form=ResourceForm(
        values_type=RecommenderFormValues,
        fields=[
            FormField("name", "Name", required="Name is required"),
            FormField("description", "Description", kind=FieldKind.TEXTAREA, rows=3),
            FormField("model_version", "Model Version"),
            FormField("is_active", "Active", kind=FieldKind.CHECKBOX),
        ],
    ),
    table=ResourceTable(
        columns=[
            Column("Name", "name"),
            Column("Model Version", "model_version"),
            Column("Active", "is_active"),
            Column("Created At", "created_at"),
        ],
        empty_message="No recommenders available",
    ),
)

VALIDATION_UTILITIES = ConsoleResource(
    slug="configuration-validation-utilities",
    title="Configuration & Validation Utilities",
    singular="configuration validation utility",
    plural="configuration validation utilities",
    api_path="/configuration-validation-utilities",
    record_schema=ValidationUtilityRead,
    create_schema=ValidationUtilityCreate,
    update_schema=ValidationUtilityUpdate,
    form=ResourceForm(
        values_type=ValidationUtilityFormValues,
        fields=[
            FormField("name", "Name", required="Name is required"),
            FormField("validation_rule", "Validation Rule", kind=FieldKind.TEXTAREA, rows=3),
            FormField("description", "Description", kind=FieldKind.TEXTAREA, rows=3),
            FormField("enabled_for_production", "Enabled for production", kind=FieldKind.CHECKBOX),
            FormField("is_active", "Active", kind=FieldKind.CHECKBOX),
        ],
    ),
    table=ResourceTable(
        columns=[
            Column("Name", "name"),
            Column("Validation Rule", "validation_rule"),
            Column("Production", "enabled_for_production"),
            Column("Active", "is_active"),
            Column("Created At", "created_at"),
        ],
        empty_message="No utilities available",
    ),
)

CONSOLE_RESOURCES: dict[str, ConsoleResource] = {
    resource.slug: resource for resource in (FEEDBACK, RECOMMENDERS, VALIDATION_UTILITIES)
}


def build_pages(client: httpx.AsyncClient, api_prefix: str = "/api") -> dict[str, ResourcePage]:
    """One page per resource, all sharing ``client``."""
    return {slug: resource.page(client, api_prefix) for slug, resource in CONSOLE_RESOURCES.items()}
