"""HTTP clients for the REST resources the console manages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class ResourceService(Generic[RecordT]):
    """List, create, update and delete records under one base path.

    Every call issues exactly one request through the shared client and
    either returns the parsed body or raises: ``httpx.HTTPStatusError`` for a
    non-2xx answer, ``httpx.TransportError`` when the request never got one,
    ``pydantic.ValidationError`` when the body is not the expected shape.
    Nothing is retried.

    ``base_path`` is resolved against the client's ``base_url`` unless it is
    an absolute URL.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_path: str,
        *,
        record_schema: type[RecordT],
        create_schema: type[BaseModel],
        update_schema: type[BaseModel],
    ) -> None:
        self._client = client
        self.base_path = base_path.rstrip("/")
        self.record_schema = record_schema
        self.create_schema = create_schema
        self.update_schema = update_schema
        self._list_adapter = TypeAdapter(list[record_schema])

    def _item_url(self, record_id: str) -> str:
        return f"{self.base_path}/{record_id}"

    @staticmethod
    def _body(schema: type[BaseModel], payload: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
        if not isinstance(payload, schema):
            payload = schema.model_validate(payload)
        return payload.model_dump(mode="json", by_alias=True, exclude_unset=True)

    async def get_all(self) -> list[RecordT]:
        response = await self._client.get(self.base_path)
        response.raise_for_status()
        return self._list_adapter.validate_python(response.json())

    async def create(self, payload: BaseModel | Mapping[str, Any]) -> RecordT:
        body = self._body(self.create_schema, payload)
        response = await self._client.post(self.base_path, json=body)
        response.raise_for_status()
        record = self.record_schema.model_validate(response.json())
        logger.debug("Created %s at %s", record.id, self.base_path)
        return record

    async def update(self, record_id: str, payload: BaseModel | Mapping[str, Any]) -> RecordT:
        body = self._body(self.update_schema, payload)
        response = await self._client.put(self._item_url(record_id), json=body)
        response.raise_for_status()
        return self.record_schema.model_validate(response.json())

    async def delete(self, record_id: str) -> None:
        response = await self._client.delete(self._item_url(record_id))
        response.raise_for_status()
        logger.debug("Deleted %s at %s", record_id, self.base_path)
