"""Maintenance window endpoints."""

import structlog
from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from ..exceptions import ImageTagException
from ..models.errors import ErrorResponse
from ..models.window import parse_window
from . import convertors  # noqa: F401  registers the weekday and hour path convertors
from .dependencies import ClockDep, ResolverDep

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["window"])


@router.get(
    "/window/{day:weekday}/{hour:hour}",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={422: {"model": ErrorResponse, "description": "Invalid day or hour"}},
    summary="Redirect to the image tag for a maintenance window",
)
async def get_window(
    day: str,
    hour: str,
    resolver: ResolverDep,
    clock: ClockDep,
) -> RedirectResponse:
    """Resolve the tag for a weekly window and redirect to it."""
    current_time = clock()
    try:
        window = parse_window(day, hour)
        tag = resolver.resolve(window.day, window.hour, current_time)
    except ImageTagException as e:
        logger.error("window_rejected", day=day, hour=hour, error=e.message)
        raise

    logger.info(
        "window_resolved",
        current_time=current_time.isoformat(),
        day=window.day,
        hour=window.hour,
        tag=tag,
    )
    return RedirectResponse(url=f"/tag/{tag}", status_code=status.HTTP_302_FOUND)
