"""API routes."""

from .router import router

__all__ = ["router"]
