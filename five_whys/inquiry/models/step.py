"""Step request and response models for the inquiry engine."""

from enum import Enum

from pydantic import BaseModel, Field

from five_whys.inquiry.models.record import WhyEntry


class ResponseKind(str, Enum):
    """What a step response carries."""

    QUESTION = "question"
    SUMMARY = "summary"


class StepRequest(BaseModel):
    """A single exchange with the inquiry engine.

    Omit `session_id` and give `problem` to start an inquiry. Give
    `session_id` and `answer` to advance one. `needs_more_whys` is the
    continuation flag the engine owns; callers setting it is an error.
    """

    session_id: str | None = None
    problem: str | None = None
    answer: str | None = None
    needs_more_whys: bool | None = None


class InquirySummary(BaseModel):
    """Result of a finished inquiry."""

    problem: str
    history: list[WhyEntry]
    root_cause: str


class StepResponse(BaseModel):
    """Engine output for one step."""

    kind: ResponseKind
    session_id: str
    continuing: bool
    step_number: int = Field(..., description="Step whose question is being asked, or last step answered")
    problem: str
    question: str | None = None
    summary: InquirySummary | None = None
