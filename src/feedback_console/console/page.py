"""Per-resource page state and the handlers that drive it.

The page state is one of three values:

* ``Loading``: the initial fetch has not finished.
* ``Ready``: the records as last returned by the server, the id being
  edited (``None`` in create mode) and the message of the last failed
  action, cleared by the next one that succeeds.
* ``Failed``: the initial fetch failed; only the message is kept.

Handlers await a single service call and then derive the next state from
whatever the state is *after* the await, so a handler never overwrites the
result of another one that finished in between. If the page was re-mounted
meanwhile (no longer ``Ready``) the result is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar, Union

import httpx

from feedback_console.console.services import ResourceService

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

# Transport failures and non-2xx statuses (httpx.HTTPError) look the same to
# the page; ValueError covers undecodable bodies and pydantic validation.
SERVICE_ERRORS = (httpx.HTTPError, ValueError)


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Ready(Generic[RecordT]):
    records: tuple[RecordT, ...] = ()
    editing_id: str | None = None
    error: str | None = None

    @property
    def editing_record(self) -> RecordT | None:
        if self.editing_id is None:
            return None
        return find_record(self.records, self.editing_id)


@dataclass(frozen=True)
class Failed:
    message: str


PageState = Union[Loading, Ready, Failed]


class PageNotReadyError(RuntimeError):
    """An action was attempted before the records were loaded."""


def find_record(records: tuple[Any, ...], record_id: str) -> Any | None:
    for record in records:
        if record.id == record_id:
            return record
    return None


def describe_error(exc: BaseException, fallback: str) -> str:
    """Prefer the error's own message, else the fixed per-operation text."""
    message = str(exc).strip()
    if not message:
        return fallback
    return message.splitlines()[0]


class ResourcePage(Generic[RecordT]):
    def __init__(
        self,
        service: ResourceService,
        *,
        singular: str,
        plural: str,
    ) -> None:
        self.service = service
        self.singular = singular
        self.plural = plural
        self.state: PageState = Loading()

    @property
    def mounted(self) -> bool:
        return not isinstance(self.state, Loading)

    def fallback_message(self, operation: str) -> str:
        noun = self.plural if operation == "fetch" else self.singular
        return f"Failed to {operation} {noun}"

    async def mount(self) -> PageState:
        """Fetch every record once; the page ends up Ready or Failed."""
        self.state = Loading()
        try:
            records = await self.service.get_all()
        except SERVICE_ERRORS as exc:
            logger.warning("Error fetching %s: %s", self.plural, exc)
            self.state = Failed(describe_error(exc, self.fallback_message("fetch")))
        else:
            self.state = Ready(records=tuple(records))
        return self.state

    def _require_ready(self) -> Ready:
        if not isinstance(self.state, Ready):
            raise PageNotReadyError(f"{self.plural} page is not ready")
        return self.state

    def _patch(self, change: Callable[[Ready], Ready]) -> None:
        current = self.state
        if isinstance(current, Ready):
            self.state = change(current)

    def _action_failed(self, operation: str, exc: BaseException) -> None:
        logger.warning("Error during %s of %s: %s", operation, self.singular, exc)
        message = describe_error(exc, self.fallback_message(operation))
        self._patch(lambda state: replace(state, error=message))

    async def submit(self, values: Mapping[str, Any]) -> None:
        """Form callback: update in edit mode, create otherwise."""
        state = self._require_ready()
        if state.editing_id is not None:
            await self.update(state.editing_id, values)
        else:
            await self.create(values)

    async def create(self, values: Mapping[str, Any]) -> None:
        self._require_ready()
        try:
            created = await self.service.create(values)
        except SERVICE_ERRORS as exc:
            self._action_failed("create", exc)
            return
        self._patch(lambda state: replace(state, records=state.records + (created,), error=None))

    async def update(self, record_id: str, values: Mapping[str, Any]) -> None:
        self._require_ready()
        try:
            updated = await self.service.update(record_id, values)
        except SERVICE_ERRORS as exc:
            self._action_failed("update", exc)
            return

        def apply(state: Ready) -> Ready:
            records = tuple(
                updated if record.id == record_id else record for record in state.records
            )
            return replace(state, records=records, editing_id=None, error=None)

        self._patch(apply)

    async def delete(self, record_id: str) -> None:
        self._require_ready()
        try:
            await self.service.delete(record_id)
        except SERVICE_ERRORS as exc:
            self._action_failed("delete", exc)
            return

        def apply(state: Ready) -> Ready:
            editing_id = None if state.editing_id == record_id else state.editing_id
            return replace(
                state,
                records=tuple(record for record in state.records if record.id != record_id),
                editing_id=editing_id,
                error=None,
            )

        self._patch(apply)

    def start_edit(self, record: Any) -> None:
        state = self._require_ready()
        self.state = replace(state, editing_id=record.id)

    def cancel_edit(self) -> None:
        state = self._require_ready()
        self.state = replace(state, editing_id=None)
