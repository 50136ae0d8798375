"""Five-step root cause inquiries.

The engine decides each step; the session store keeps progress between
otherwise stateless requests.
"""

from five_whys.inquiry.engine import InquiryEngine
from five_whys.inquiry.errors import (
    InquiryCompleteError,
    InquiryError,
    InquiryValidationError,
    SessionNotFoundError,
)

__all__ = [
    "InquiryEngine",
    "InquiryCompleteError",
    "InquiryError",
    "InquiryValidationError",
    "SessionNotFoundError",
]
