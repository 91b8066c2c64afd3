"""Form validation, submission and rendering."""

from __future__ import annotations

import pytest

from feedback_console.console.forms import FieldKind, FormField, ResourceForm
from feedback_console.console.resources import CONSOLE_RESOURCES, FEEDBACK, RECOMMENDERS
from feedback_console.schemas.feedback import FeedbackFormValues
from feedback_console.schemas.recommender import RecommenderRead


class Recorder:
    def __init__(self) -> None:
        self.calls: list[dict] = []

    async def __call__(self, values: dict) -> None:
        self.calls.append(values)


@pytest.fixture
def form() -> ResourceForm:
    return FEEDBACK.form


class TestValidate:
    def test_valid_values_have_no_errors(self, form: ResourceForm) -> None:
        assert form.validate({"feedback": "Nice", "rating": "4", "email": ""}) == {}

    def test_required_fields_reported(self, form: ResourceForm) -> None:
        errors = form.validate({"feedback": "", "rating": "", "email": ""})

        assert errors == {
            "feedback": "Feedback is required",
            "rating": "Rating is required",
        }

    def test_missing_key_counts_as_empty(self, form: ResourceForm) -> None:
        assert form.validate({"rating": "3"}) == {"feedback": "Feedback is required"}

    def test_bad_email_reported(self, form: ResourceForm) -> None:
        errors = form.validate({"feedback": "x", "rating": "3", "email": "not-an-email"})
        assert errors == {"email": "Please enter a valid email"}

    @pytest.mark.parametrize("email", ["a@b.co", "first.last@example.org", "x+tag@sub.domain.io"])
    def test_good_emails_pass(self, form: ResourceForm, email: str) -> None:
        assert form.validate({"feedback": "x", "rating": "3", "email": email}) == {}

    @pytest.mark.parametrize("email", ["a@b", "a b@c.de", "@b.co", "a@.co x"])
    def test_bad_emails_fail(self, form: ResourceForm, email: str) -> None:
        assert "email" in form.validate({"feedback": "x", "rating": "3", "email": email})

    def test_unchecked_checkbox_is_not_empty(self) -> None:
        form = ResourceForm(
            fields=[FormField("flag", "Flag", kind=FieldKind.CHECKBOX, required="Required")]
        )
        assert form.validate({"flag": False}) == {}


class TestSubmit:
    @pytest.mark.asyncio
    async def test_valid_submit_passes_values_unmodified(self, form: ResourceForm) -> None:
        on_submit = Recorder()
        values = {"feedback": "  spaced  ", "rating": "3", "email": ""}

        errors = await form.submit(values, on_submit)

        assert errors == {}
        assert on_submit.calls == [{"feedback": "  spaced  ", "rating": "3", "email": ""}]
        assert on_submit.calls[0] is values

    @pytest.mark.asyncio
    async def test_empty_required_field_blocks_submit(self, form: ResourceForm) -> None:
        on_submit = Recorder()

        errors = await form.submit({"feedback": "", "rating": "3", "email": ""}, on_submit)

        assert errors == {"feedback": "Feedback is required"}
        assert on_submit.calls == []

    @pytest.mark.asyncio
    async def test_empty_email_submits(self, form: ResourceForm) -> None:
        on_submit = Recorder()

        await form.submit({"feedback": "x", "rating": "2", "email": ""}, on_submit)

        assert len(on_submit.calls) == 1

    @pytest.mark.asyncio
    async def test_invalid_email_does_not_submit(self, form: ResourceForm) -> None:
        on_submit = Recorder()

        errors = await form.submit(
            {"feedback": "x", "rating": "2", "email": "not-an-email"}, on_submit
        )

        assert errors == {"email": "Please enter a valid email"}
        assert on_submit.calls == []

    @pytest.mark.asyncio
    async def test_sync_callback_supported(self, form: ResourceForm) -> None:
        received = []

        await form.submit({"feedback": "x", "rating": "1"}, received.append)

        assert received == [{"feedback": "x", "rating": "1"}]

    @pytest.mark.asyncio
    async def test_values_not_reset_after_submit(self, form: ResourceForm) -> None:
        values = {"feedback": "x", "rating": "1", "email": ""}

        await form.submit(values, Recorder())

        assert values == {"feedback": "x", "rating": "1", "email": ""}


class TestCollect:
    def test_strings_kept_and_unknown_keys_dropped(self, form: ResourceForm) -> None:
        values = form.collect({"feedback": "hi", "rating": "5", "csrf": "zzz"})
        assert values == {"feedback": "hi", "rating": "5", "email": ""}

    def test_checkbox_presence_is_boolean(self) -> None:
        form = RECOMMENDERS.form

        checked = form.collect({"name": "r", "is_active": "true"})
        unchecked = form.collect({"name": "r"})

        assert checked["is_active"] is True
        assert unchecked["is_active"] is False

    def test_initial_values_from_record(self) -> None:
        record = RecommenderRead(
            id="r1",
            name="follow-up",
            description=None,
            model_version="v3",
            is_active=True,
            created_at="2025-01-01T00:00:00Z",
        )

        values = RECOMMENDERS.form.initial_values(record)

        assert values == {
            "name": "follow-up",
            "description": "",
            "model_version": "v3",
            "is_active": True,
        }


class TestRender:
    def test_field_errors_rendered_inline(self, form: ResourceForm) -> None:
        html = form.render(
            action="/console/user-feedback",
            values={"feedback": "", "rating": "", "email": "bad"},
            errors={"feedback": "Feedback is required", "email": "Please enter a valid email"},
        )

        assert 'data-field="feedback">Feedback is required' in html
        assert 'data-field="email">Please enter a valid email' in html
        assert 'data-field="rating"' not in html

    def test_selected_rating_and_escaping(self, form: ResourceForm) -> None:
        html = form.render(
            action="/console/user-feedback",
            values={"feedback": "<script>alert(1)</script>", "rating": "4", "email": ""},
        )

        assert '<option value="4" selected>' in html
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_edit_mode_shows_update_and_cancel(self, form: ResourceForm) -> None:
        html = form.render(
            action="/console/user-feedback",
            editing=True,
            cancel_action="/console/user-feedback/cancel",
        )

        assert "Update" in html
        assert 'formaction="/console/user-feedback/cancel"' in html

    def test_create_mode_has_no_cancel(self, form: ResourceForm) -> None:
        html = form.render(action="/console/user-feedback", cancel_action="/x/cancel")

        assert "Submit Feedback" in html
        assert "cancel-button" not in html


class TestValuesType:
    def test_each_resource_form_is_bound_to_its_form_values(self) -> None:
        for resource in CONSOLE_RESOURCES.values():
            keys = resource.form.values_type.__optional_keys__
            assert {f.name for f in resource.form.fields} == set(keys), resource.slug

    def test_field_missing_from_form_values_rejected(self) -> None:
        with pytest.raises(ValueError, match="FeedbackFormValues has no key for field\\(s\\): mood"):
            ResourceForm(
                fields=[FormField("feedback", "Feedback"), FormField("mood", "Mood")],
                values_type=FeedbackFormValues,
            )

    def test_plain_dict_accepts_any_field(self) -> None:
        form = ResourceForm(fields=[FormField("anything", "Anything")])
        assert form.collect({"anything": "x"}) == {"anything": "x"}
