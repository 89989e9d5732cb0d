"""Structured exception types for the image tag service.

Every exception maps to an HTTP status code and an error code, so the API
layer can translate them with a single exception handler.

Usage:
    from image_tag.exceptions import InvalidWindowError

    if not 0 <= hour <= 23:
        raise InvalidWindowError(f"hour {hour} is outside 0-23")
"""

from image_tag.models.errors import ErrorCode


class ImageTagException(Exception):
    """Base exception for the image tag service.

    Attributes:
        error_code: ErrorCode enum value for API responses
        status_code: HTTP status code to return
        message: Human-readable error message
    """

    error_code: ErrorCode = ErrorCode.INVALID_WINDOW
    status_code: int = 422

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidWindowError(ImageTagException):
    """Raised when a maintenance window day or hour is out of range."""

    error_code = ErrorCode.INVALID_WINDOW
    status_code = 422


class WindowParseError(ImageTagException):
    """Raised when a maintenance window day or hour is not a number."""

    error_code = ErrorCode.INVALID_WINDOW_FORMAT
    status_code = 422
