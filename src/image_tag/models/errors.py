"""Error response models."""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error codes for API responses."""

    INVALID_WINDOW = "INVALID_WINDOW"
    INVALID_WINDOW_FORMAT = "INVALID_WINDOW_FORMAT"


class ErrorResponse(BaseModel):
    """Unified error response format."""

    detail: str = Field(..., description="Error description")
    code: str = Field(..., description="Error code")
