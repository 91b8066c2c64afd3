"""Generic router factories for declarative CRUD endpoints."""

from __future__ import annotations

import dataclasses
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_409_CONFLICT

from feedback_console.db.base import ID_PATTERN
from feedback_console.db.session import get_db
from feedback_console.schemas.generic import NotFoundError

from .filters import FilterField, apply_filters, make_filter_dependency

logger = logging.getLogger(__name__)

DEFAULT_SORT_COLUMNS = [("created_at", "asc"), ("id", "asc")]


@dataclasses.dataclass(frozen=True)
class CrudResource:
    """Everything the factories need to expose one table over REST.

    Args:
        prefix: URL prefix (e.g. "/user-feedback").
        resource_name: Human-readable name for 404 messages ("Feedback").
        key: Identifier used in route and operation names ("feedback").
        model: SQLAlchemy model class.
        read_schema: Pydantic schema for responses.
        create_schema: Pydantic schema for POST bodies.
        update_schema: Pydantic schema for PUT bodies (all fields optional).
        filter_config: Declarative list filters.
        sort_columns: (column, direction) pairs for ORDER BY on list.
    """

    prefix: str
    resource_name: str
    key: str
    model: type
    read_schema: type
    create_schema: type
    update_schema: type
    filter_config: list[FilterField] = dataclasses.field(default_factory=list)
    sort_columns: list[tuple[str, str]] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_SORT_COLUMNS)
    )

    @property
    def tags(self) -> list[str]:
        return [self.prefix.strip("/")]


def _not_found(resource_name: str, item_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={"message": f"{resource_name} not found", "id": item_id},
    )


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=HTTP_409_CONFLICT,
            detail=f"Record conflicts with an existing entry: {exc.orig}",
        ) from None


def create_read_router(
    *,
    prefix: str,
    tags: list[str],
    model: type,
    response_schema: type,
    filter_config: list[FilterField],
    resource_name: str,
    key: str,
    id_pattern: str = ID_PATTERN,
    sort_columns: list[tuple[str, str]] | None = None,
) -> APIRouter:
    """Create an APIRouter with list and get-by-id endpoints.

    The list endpoint returns a plain JSON array of every matching record.

    Returns:
        Configured APIRouter with GET "" and GET "/{item_id}" routes.
    """
    if sort_columns is None:
        sort_columns = DEFAULT_SORT_COLUMNS

    router = APIRouter(prefix=prefix, tags=tags)
    filter_dep = make_filter_dependency(filter_config, resource_name=resource_name)

    def list_items(
        filters: Any = Depends(filter_dep),
        db: Session = Depends(get_db),
    ) -> list[Any]:
        filter_values = dataclasses.asdict(filters)
        query = apply_filters(select(model), model, filter_config, filter_values)

        order_clauses = []
        for col_name, direction in sort_columns:
            column = getattr(model, col_name)
            order_clauses.append(column.desc() if direction == "desc" else column.asc())
        query = query.order_by(*order_clauses)

        items = db.execute(query).scalars().all()
        return [response_schema.model_validate(item) for item in items]

    def get_item(
        item_id: str = Path(pattern=id_pattern),
        db: Session = Depends(get_db),
    ) -> Any:
        item = db.get(model, item_id)
        if item is None:
            raise _not_found(resource_name, item_id)
        return response_schema.model_validate(item)

    # Unique OpenAPI operation ids across resources
    list_items.__name__ = f"list_{key}"
    get_item.__name__ = f"get_{key}"

    router.add_api_route(
        "",
        list_items,
        methods=["GET"],
        response_model=list[response_schema],
        name=f"list_{key}",
    )
    router.add_api_route(
        "/{item_id}",
        get_item,
        methods=["GET"],
        response_model=response_schema,
        responses={404: {"model": NotFoundError}},
        name=f"get_{key}",
    )

    return router


def create_create_router(
    *,
    prefix: str,
    tags: list[str],
    model: type,
    response_schema: type,
    create_schema: type,
    resource_name: str,
    key: str,
) -> APIRouter:
    """Create an APIRouter with a POST endpoint for creating records.

    Returns:
        Configured APIRouter with POST "" route answering 201.
    """
    router = APIRouter(prefix=prefix, tags=tags)

    # `payload: create_schema` cannot be written inline because of
    # `from __future__ import annotations`; the annotation is set below.
    def create_item(payload, *, db: Session = Depends(get_db)) -> Any:
        item = model(**payload.model_dump())
        db.add(item)
        _commit(db)
        db.refresh(item)
        logger.info("Created %s %s", resource_name, item.id)
        return response_schema.model_validate(item)

    create_item.__annotations__["payload"] = create_schema
    create_item.__name__ = f"create_{key}"

    router.add_api_route(
        "",
        create_item,
        methods=["POST"],
        response_model=response_schema,
        status_code=HTTP_201_CREATED,
        name=f"create_{key}",
    )

    return router


def create_update_router(
    *,
    prefix: str,
    tags: list[str],
    model: type,
    response_schema: type,
    update_schema: type,
    resource_name: str,
    key: str,
    id_pattern: str = ID_PATTERN,
) -> APIRouter:
    """Create an APIRouter with a PUT endpoint for updating records.

    Accepts partial updates: only keys present in the body are written.

    Returns:
        Configured APIRouter with PUT "/{item_id}" route.
    """
    router = APIRouter(prefix=prefix, tags=tags)

    def update_item(item_id, payload, *, db: Session = Depends(get_db)) -> Any:
        item = db.get(model, item_id)
        if item is None:
            raise _not_found(resource_name, item_id)
        update_data = payload.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(item, field, value)
        _commit(db)
        db.refresh(item)
        logger.info("Updated %s %s (%s)", resource_name, item_id, ", ".join(sorted(update_data)))
        return response_schema.model_validate(item)

    update_item.__annotations__["item_id"] = Annotated[str, Path(pattern=id_pattern)]
    update_item.__annotations__["payload"] = update_schema
    update_item.__name__ = f"update_{key}"

    router.add_api_route(
        "/{item_id}",
        update_item,
        methods=["PUT"],
        response_model=response_schema,
        responses={404: {"model": NotFoundError}},
        name=f"update_{key}",
    )

    return router


def create_delete_router(
    *,
    prefix: str,
    tags: list[str],
    model: type,
    resource_name: str,
    key: str,
    id_pattern: str = ID_PATTERN,
) -> APIRouter:
    """Create an APIRouter with a DELETE endpoint answering 204.

    Returns:
        Configured APIRouter with DELETE "/{item_id}" route.
    """
    router = APIRouter(prefix=prefix, tags=tags)

    def delete_item(item_id, *, db: Session = Depends(get_db)) -> None:
        item = db.get(model, item_id)
        if item is None:
            raise _not_found(resource_name, item_id)
        db.delete(item)
        db.commit()
        logger.info("Deleted %s %s", resource_name, item_id)

    delete_item.__annotations__["item_id"] = Annotated[str, Path(pattern=id_pattern)]
    delete_item.__name__ = f"delete_{key}"

    router.add_api_route(
        "/{item_id}",
        delete_item,
        methods=["DELETE"],
        status_code=HTTP_204_NO_CONTENT,
        responses={404: {"model": NotFoundError}},
        name=f"delete_{key}",
    )

    return router


def create_resource_router(resource: CrudResource) -> APIRouter:
    """Combine the read, create, update and delete routers for one resource."""
    common = {
        "prefix": resource.prefix,
        "tags": resource.tags,
        "model": resource.model,
        "resource_name": resource.resource_name,
        "key": resource.key,
    }
    router = APIRouter()
    router.include_router(
        create_read_router(
            **common,
            response_schema=resource.read_schema,
            filter_config=resource.filter_config,
            sort_columns=resource.sort_columns,
        )
    )
    router.include_router(
        create_create_router(
            **common,
            response_schema=resource.read_schema,
            create_schema=resource.create_schema,
        )
    )
    router.include_router(
        create_update_router(
            **common,
            response_schema=resource.read_schema,
            update_schema=resource.update_schema,
        )
    )
    router.include_router(create_delete_router(**common))
    return router
