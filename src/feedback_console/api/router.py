from __future__ import annotations

from fastapi import APIRouter

from feedback_console.api.routes import feedback, health, recommenders, validation_utilities

router = APIRouter()
router.include_router(health.router)
router.include_router(feedback.router)
router.include_router(recommenders.router)
router.include_router(validation_utilities.router)
