"""Declarative forms: field definitions, validation and HTML rendering.

A form never talks to the network. ``ResourceForm.submit`` runs the
validation pass and hands the untouched values to the caller's callback
only when every field is valid.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from markupsafe import Markup

from feedback_console.console.templating import render_fragment

FormValues = dict[str, Any]
FieldErrors = dict[str, str]
SubmitCallback = Callable[[FormValues], Any]

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class FieldKind(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    SELECT = "select"
    CHECKBOX = "checkbox"


def _typed_dict_keys(values_type: object) -> frozenset[str] | None:
    required = getattr(values_type, "__required_keys__", None)
    optional = getattr(values_type, "__optional_keys__", None)
    if required is None or optional is None:
        return None
    return frozenset(required) | frozenset(optional)


@dataclass(frozen=True)
class FormField:
    """One input bound to a key of the form values.

    ``required`` holds the message shown when the value is empty; ``None``
    makes the field optional. ``pattern`` is only checked for non-empty
    values.
    """

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: str | None = None
    pattern: re.Pattern[str] | None = None
    pattern_message: str = "Invalid value"
    options: Sequence[tuple[str, str]] = ()
    placeholder: str = ""
    rows: int = 4

    @property
    def is_checkbox(self) -> bool:
        return self.kind == FieldKind.CHECKBOX

    def validate(self, value: Any) -> str | None:
        empty = value is None or value == ""
        if empty:
            return self.required
        if self.pattern is not None and isinstance(value, str):
            if not self.pattern.match(value):
                return self.pattern_message
        return None


@dataclass
class ResourceForm:
    """A form over ``fields`` whose values are shaped as ``values_type``.

    ``values_type`` is usually one of the per-resource ``*FormValues``
    TypedDicts; every field name must be one of its keys.
    """

    fields: list[FormField]
    values_type: Callable[..., FormValues] = dict
    submit_label: str = "Submit"
    update_label: str = "Update"
    css_class: str = "resource-form"

    def __post_init__(self) -> None:
        keys = _typed_dict_keys(self.values_type)
        if keys is None:
            return
        unknown = [f.name for f in self.fields if f.name not in keys]
        if unknown:
            names = ", ".join(unknown)
            msg = f"{self.values_type.__name__} has no key for field(s): {names}"
            raise ValueError(msg)

    def validate(self, values: Mapping[str, Any]) -> FieldErrors:
        """Map each invalid field name to its message. Empty means valid."""
        errors: FieldErrors = {}
        for form_field in self.fields:
            message = form_field.validate(values.get(form_field.name))
            if message is not None:
                errors[form_field.name] = message
        return errors

    async def submit(self, values: FormValues, on_submit: SubmitCallback) -> FieldErrors:
        """Validate ``values`` and pass them unchanged to ``on_submit``.

        Returns the field errors; when there are any the callback is not
        invoked.
        """
        errors = self.validate(values)
        if errors:
            return errors
        result = on_submit(values)
        if inspect.isawaitable(result):
            await result
        return errors

    def collect(self, form_data: Mapping[str, Any]) -> FormValues:
        """Read the posted fields the way a browser types them.

        Checkboxes become booleans (unchecked boxes are not posted), every
        other field stays the submitted string. Unknown keys are dropped.
        """
        values: FormValues = {}
        for form_field in self.fields:
            if form_field.is_checkbox:
                values[form_field.name] = form_field.name in form_data
            else:
                raw = form_data.get(form_field.name)
                values[form_field.name] = "" if raw is None else str(raw)
        return self.values_type(**values)

    def initial_values(self, record: Any) -> FormValues:
        """Prefill values from an existing record for edit mode."""
        values: FormValues = {}
        for form_field in self.fields:
            value = getattr(record, form_field.name, None)
            if form_field.is_checkbox:
                values[form_field.name] = bool(value)
            else:
                values[form_field.name] = "" if value is None else str(value)
        return self.values_type(**values)

    def blank_values(self) -> FormValues:
        return self.values_type(**{f.name: (False if f.is_checkbox else "") for f in self.fields})

    def render(
        self,
        *,
        action: str,
        values: Mapping[str, Any] | None = None,
        errors: Mapping[str, str] | None = None,
        editing: bool = False,
        cancel_action: str | None = None,
    ) -> Markup:
        return render_fragment(
            "components/form.html",
            form=self,
            action=action,
            values=values if values is not None else self.blank_values(),
            errors=errors or {},
            editing=editing,
            cancel_action=cancel_action,
        )
