from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from feedback_console.console.resources import FEEDBACK
from feedback_console.console.tables import Column, ResourceTable, format_value


@dataclass
class Item:
    id: str
    feedback: str
    rating: int
    submitted_by: str | None = None
    created_at: datetime | None = None


def _urls():
    return {
        "edit_url": lambda record_id: f"/c/{record_id}/edit",
        "delete_url": lambda record_id: f"/c/{record_id}/delete",
    }


def test_rows_follow_input_order() -> None:
    records = [Item("b", "second", 2), Item("a", "first", 1)]

    rows = FEEDBACK.table.rows(records)

    assert [row.record_id for row in rows] == ["b", "a"]
    assert rows[0].cells[:2] == ["second", "2"]


def test_empty_list_renders_single_placeholder_row() -> None:
    html = FEEDBACK.table.render([], **_urls())

    assert html.count("<tr") == 2  # header row + placeholder
    assert "No feedback available" in html
    assert "data-id=" not in html


def test_one_row_per_record_with_actions() -> None:
    records = [Item("1", "x", 3), Item("2", "y", 4)]

    html = FEEDBACK.table.render(records, **_urls())

    assert html.count('<tr data-id="') == 2
    assert 'href="/c/1/edit"' in html
    assert 'action="/c/2/delete"' in html
    assert "No feedback available" not in html


def test_cells_escaped() -> None:
    html = FEEDBACK.table.render([Item("1", "<b>bold</b>", 3)], **_urls())

    assert "<b>bold</b>" not in html
    assert "&lt;b&gt;bold&lt;/b&gt;" in html


def test_format_value() -> None:
    assert format_value(None) == ""
    assert format_value(True) == "Yes"
    assert format_value(False) == "No"
    assert format_value(datetime(2025, 3, 4, 5, 6)) == "2025-03-04 05:06"
    assert format_value(5) == "5"


def test_custom_formatter() -> None:
    table = ResourceTable(columns=[Column("Rating", "rating", formatter=lambda v: "*" * v)])

    rows = table.rows([Item("1", "x", 3)])

    assert rows[0].cells == ["***"]
