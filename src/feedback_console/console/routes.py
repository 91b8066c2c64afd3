"""Server-rendered console pages, one per resource."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from starlette.status import HTTP_200_OK

from feedback_console.console.page import Failed, Ready, ResourcePage, find_record
from feedback_console.console.resources import CONSOLE_RESOURCES, ConsoleResource
from feedback_console.console.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["console"], default_response_class=HTMLResponse)


def get_console_pages(request: Request) -> dict[str, ResourcePage]:
    """Pages stored on ``app.state`` by the lifespan."""
    return request.app.state.console_pages


def _resolve(slug: str, pages: dict[str, ResourcePage]) -> tuple[ConsoleResource, ResourcePage]:
    resource = CONSOLE_RESOURCES.get(slug)
    if resource is None or slug not in pages:
        raise HTTPException(status_code=404, detail=f"Unknown console resource: {slug}")
    return resource, pages[slug]


async def _ensure_mounted(page: ResourcePage) -> None:
    if not page.mounted:
        await page.mount()


def _render_page(
    request: Request,
    resource: ConsoleResource,
    page: ResourcePage,
    *,
    values: dict[str, Any] | None = None,
    errors: dict[str, str] | None = None,
    status_code: int = HTTP_200_OK,
) -> HTMLResponse:
    base = str(request.url_for("console_page", slug=resource.slug).path)
    state = page.state
    context: dict[str, Any] = {
        "resource": resource,
        "state": state,
        "base": base,
        "loading": False,
        "failed_message": None,
    }

    if isinstance(state, Failed):
        context["failed_message"] = state.message
    elif isinstance(state, Ready):
        editing_record = state.editing_record
        if values is None and editing_record is not None:
            values = resource.form.initial_values(editing_record)
        context["error"] = state.error
        context["form_html"] = resource.form.render(
            action=base,
            values=values,
            errors=errors,
            editing=state.editing_id is not None,
            cancel_action=f"{base}/cancel",
        )
        context["table_html"] = resource.table.render(
            state.records,
            edit_url=lambda record_id: f"{base}/{record_id}/edit",
            delete_url=lambda record_id: f"{base}/{record_id}/delete",
        )
    else:
        context["loading"] = True

    return templates.TemplateResponse(request, "page.html", context, status_code=status_code)


@router.get("", name="console_index")
def console_index(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "index.html", {"resources": list(CONSOLE_RESOURCES.values())}
    )


@router.get("/{slug}", name="console_page")
async def show_page(
    request: Request,
    slug: str,
    reload: bool = False,
    pages: dict[str, ResourcePage] = Depends(get_console_pages),
) -> HTMLResponse:
    resource, page = _resolve(slug, pages)
    if reload or not page.mounted:
        await page.mount()
    return _render_page(request, resource, page)


@router.post("/{slug}", name="console_submit")
async def submit_form(
    request: Request,
    slug: str,
    pages: dict[str, ResourcePage] = Depends(get_console_pages),
) -> HTMLResponse:
    resource, page = _resolve(slug, pages)
    await _ensure_mounted(page)
    if not isinstance(page.state, Ready):
        return _render_page(request, resource, page)

    form_data = await request.form()
    values = resource.form.collect(form_data)
    errors = await resource.form.submit(values, page.submit)
    if errors:
        logger.debug("Rejected %s form: %s", resource.slug, ", ".join(sorted(errors)))
        return _render_page(
            request,
            resource,
            page,
            values=values,
            errors=errors,
            status_code=422,
        )
    # The form keeps what was typed; only the page state moved on.
    return _render_page(request, resource, page, values=values)


@router.get("/{slug}/{record_id}/edit", name="console_edit")
async def start_edit(
    request: Request,
    slug: str,
    record_id: str,
    pages: dict[str, ResourcePage] = Depends(get_console_pages),
) -> HTMLResponse:
    resource, page = _resolve(slug, pages)
    await _ensure_mounted(page)
    state = page.state
    if not isinstance(state, Ready):
        return _render_page(request, resource, page)
    record = find_record(state.records, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"{resource.singular} not found")
    page.start_edit(record)
    return _render_page(request, resource, page)


@router.post("/{slug}/cancel", name="console_cancel")
async def cancel_edit(
    request: Request,
    slug: str,
    pages: dict[str, ResourcePage] = Depends(get_console_pages),
) -> HTMLResponse:
    resource, page = _resolve(slug, pages)
    await _ensure_mounted(page)
    if isinstance(page.state, Ready):
        page.cancel_edit()
    return _render_page(request, resource, page)


@router.post("/{slug}/{record_id}/delete", name="console_delete")
async def delete_record(
    request: Request,
    slug: str,
    record_id: str,
    pages: dict[str, ResourcePage] = Depends(get_console_pages),
) -> HTMLResponse:
    resource, page = _resolve(slug, pages)
    await _ensure_mounted(page)
    if isinstance(page.state, Ready):
        await page.delete(record_id)
    return _render_page(request, resource, page)
