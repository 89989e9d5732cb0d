"""Shared dependencies for API endpoints."""

from collections.abc import Callable
from datetime import datetime
from typing import Annotated

from fastapi import Depends, Request

from ..services.tag_resolver import TagResolver

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local wall-clock time, timezone-aware."""
    return datetime.now().astimezone()


def get_tag_resolver(request: Request) -> TagResolver:
    """Get the resolver built from the application settings at startup."""
    return request.app.state.tag_resolver


def get_clock() -> Clock:
    """Get the clock used to timestamp window requests."""
    return local_now


# Type aliases for cleaner endpoint signatures
ResolverDep = Annotated[TagResolver, Depends(get_tag_resolver)]
ClockDep = Annotated[Clock, Depends(get_clock)]
