"""Domain models."""

from .errors import ErrorCode, ErrorResponse

__all__ = ["ErrorCode", "ErrorResponse"]
