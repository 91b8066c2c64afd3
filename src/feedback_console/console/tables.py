"""Read-only record tables with per-row edit and delete actions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from markupsafe import Markup

from feedback_console.console.templating import render_fragment


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return str(value)


@dataclass(frozen=True)
class Column:
    label: str
    attr: str
    formatter: Callable[[Any], str] = format_value

    def cell(self, record: Any) -> str:
        return self.formatter(getattr(record, self.attr, None))


@dataclass(frozen=True)
class TableRow:
    record_id: str
    cells: list[str]


@dataclass
class ResourceTable:
    columns: list[Column]
    empty_message: str = "No records available"

    def rows(self, records: Sequence[Any]) -> list[TableRow]:
        return [
            TableRow(record_id=record.id, cells=[column.cell(record) for column in self.columns])
            for record in records
        ]

    def render(
        self,
        records: Sequence[Any],
        *,
        edit_url: Callable[[str], str],
        delete_url: Callable[[str], str],
    ) -> Markup:
        """Render the table; an empty ``records`` gives one placeholder row."""
        return render_fragment(
            "components/table.html",
            table=self,
            rows=self.rows(records),
            edit_url=edit_url,
            delete_url=delete_url,
        )
