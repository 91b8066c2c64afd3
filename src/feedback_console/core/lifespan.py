from __future__ import annotations

from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI

from feedback_console.core.config import get_settings
from feedback_console.db.session import close_db, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("Application starting")
    init_db(app)

    client: httpx.AsyncClient | None = None
    if settings.console_enabled:
        from feedback_console.console.resources import build_pages

        # The console reaches the REST API over HTTP like any other client
        client = httpx.AsyncClient(base_url=settings.console_api_base_url)
        app.state.console_pages = build_pages(client, settings.api_prefix)
        logger.info("Console talking to %s", settings.console_api_base_url)

    yield

    if client is not None:
        await client.aclose()
    close_db(app)
    logger.info("Application shutting down")
