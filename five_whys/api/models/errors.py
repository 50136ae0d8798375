"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed or the step broke the protocol."""

    INQUIRY_COMPLETE = "INQUIRY_COMPLETE"
    """The inquiry was already summarized and cannot continue."""

    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    """The session id is unknown, expired or evicted."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information."""

    field: str | None = None
    """The field that caused the error, if applicable."""

    message: str
    """Human-readable error description."""


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "SESSION_NOT_FOUND",
                "message": "Session session_ab12 not found. ..."
            }
        }
    """

    error: ErrorBody
