"""ASGI entry point: ``uvicorn feedback_console.main:app``."""

from __future__ import annotations

from feedback_console.app import create_app

app = create_app()
