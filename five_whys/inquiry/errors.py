"""Inquiry error hierarchy.

Every error is raised before any record is written, so a failed step
leaves the stored inquiry exactly as it was.
"""


class InquiryError(Exception):
    """Base exception for inquiry protocol errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InquiryValidationError(InquiryError):
    """Raised when a step is malformed or breaks the protocol."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InquiryCompleteError(InquiryValidationError):
    """Raised when a finished inquiry is asked to continue."""


class SessionNotFoundError(InquiryError):
    """Raised when a session id has no live record.

    Unknown, expired and evicted sessions all raise this with the same
    guidance.
    """

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id
