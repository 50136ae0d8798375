"""Inquiry record models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

MAX_STEPS = 5


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class WhyEntry(BaseModel):
    """One answered step of an inquiry."""

    model_config = ConfigDict(frozen=True)

    step_number: int = Field(..., ge=1, le=MAX_STEPS, description="Step answered")
    answer: str = Field(..., min_length=1, description="Answer given at that step")


class InquiryRecord(BaseModel):
    """Progress of one five-step inquiry.

    `step_number` is the step about to be answered (or, once finalized,
    the last one answered). `history` holds one entry per answered step,
    in step order.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    problem: str = Field(..., min_length=1, description="Original problem statement")
    step_number: int = Field(default=1, ge=1, le=MAX_STEPS, description="Current step")
    history: list[WhyEntry] = Field(
        default_factory=list, max_length=MAX_STEPS, description="Answered steps"
    )
    continuing: bool = Field(default=True, description="More steps expected")
    created_at: datetime = Field(default_factory=utc_now, description="Creation time")
    last_touched: datetime = Field(
        default_factory=utc_now, description="Last read or write"
    )

    @property
    def root_cause(self) -> str:
        """Last recorded answer, or the problem itself when nothing was answered."""
        if self.history:
            return self.history[-1].answer
        return self.problem
