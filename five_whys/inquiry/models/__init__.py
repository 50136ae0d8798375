"""Inquiry domain models.

- InquiryRecord and WhyEntry for stored inquiry progress
- StepRequest / StepResponse for engine input and output
"""

from five_whys.inquiry.models.record import MAX_STEPS, InquiryRecord, WhyEntry, utc_now
from five_whys.inquiry.models.step import (
    InquirySummary,
    ResponseKind,
    StepRequest,
    StepResponse,
)

__all__ = [
    "MAX_STEPS",
    "InquiryRecord",
    "WhyEntry",
    "utc_now",
    "InquirySummary",
    "ResponseKind",
    "StepRequest",
    "StepResponse",
]
