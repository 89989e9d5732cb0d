"""API router registration."""

from fastapi import APIRouter

from . import health, window

router = APIRouter()

router.include_router(window.router)
router.include_router(health.router)
