"""API exception hierarchy for consistent error handling.

All API exceptions inherit from FiveWhysAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses.
"""

from five_whys.api.models.errors import ErrorCode, ErrorDetail


class FiveWhysAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: list[ErrorDetail] | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidRequestError(FiveWhysAPIError):
    """Raised when a step is malformed or out of protocol."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class InquiryCompleteError(FiveWhysAPIError):
    """Raised when continuing an inquiry that already has a summary."""

    status_code = 400
    error_code = ErrorCode.INQUIRY_COMPLETE


class SessionNotFoundError(FiveWhysAPIError):
    """Raised when session_id doesn't exist."""

    status_code = 404
    error_code = ErrorCode.SESSION_NOT_FOUND
