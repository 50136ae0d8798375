"""Session introspection models."""

from datetime import datetime

from pydantic import BaseModel

from five_whys.inquiry.models import InquiryRecord


class WhyEntryView(BaseModel):
    step_number: int
    answer: str


class SessionResponse(BaseModel):
    """Snapshot of one stored inquiry for GET /v1/sessions/{session_id}."""

    session_id: str
    problem: str
    step_number: int
    continuing: bool
    history: list[WhyEntryView]
    created_at: datetime
    last_touched: datetime

    @classmethod
    def from_record(cls, session_id: str, record: InquiryRecord) -> "SessionResponse":
        return cls(
            session_id=session_id,
            problem=record.problem,
            step_number=record.step_number,
            continuing=record.continuing,
            history=[
                WhyEntryView(step_number=e.step_number, answer=e.answer)
                for e in record.history
            ],
            created_at=record.created_at,
            last_touched=record.last_touched,
        )
