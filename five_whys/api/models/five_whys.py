"""Request and response models for the five_whys tool endpoint.

Field names on the wire are camelCase to match what agents already send
to the five_whys tool.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from five_whys.inquiry.models import StepRequest, StepResponse


class FiveWhysRequest(BaseModel):
    """Body of POST /v1/five-whys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    session_id: str | None = Field(
        default=None,
        min_length=1,
        description=(
            "Session ID to maintain state across calls. REQUIRED for all calls "
            "after the first one. The tool creates it and returns it in the first "
            "response - do not generate session IDs yourself."
        ),
    )
    problem: str | None = Field(
        default=None,
        min_length=1,
        description="The initial problem statement. REQUIRED only for the first call.",
    )
    current_reason: str | None = Field(
        default=None,
        description=(
            "Your answer to the previous 'why' question. "
            "REQUIRED for all calls after the first one."
        ),
    )
    needs_more_whys: bool | None = Field(
        default=None,
        description=(
            "Whether to continue asking 'why' questions. Let the tool determine "
            "this value - do not set this yourself."
        ),
    )

    def to_step(self) -> StepRequest:
        return StepRequest(
            session_id=self.session_id,
            problem=self.problem,
            answer=self.current_reason,
            needs_more_whys=self.needs_more_whys,
        )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WhyAnswer(_CamelModel):
    """One answered step."""

    why_number: int
    answer: str


class FiveWhysSummary(_CamelModel):
    """Completed analysis."""

    problem: str
    history: list[WhyAnswer]
    root_cause: str


class FiveWhysResponse(_CamelModel):
    """Result of one five_whys call."""

    kind: Literal["question", "summary"]
    session_id: str
    needs_more_whys: bool
    why_number: int
    problem: str
    question: str | None = None
    summary: FiveWhysSummary | None = None
    text: str

    @classmethod
    def from_step(cls, response: StepResponse, text: str) -> "FiveWhysResponse":
        summary = None
        if response.summary is not None:
            summary = FiveWhysSummary(
                problem=response.summary.problem,
                history=[
                    WhyAnswer(why_number=entry.step_number, answer=entry.answer)
                    for entry in response.summary.history
                ],
                root_cause=response.summary.root_cause,
            )
        return cls(
            kind=response.kind.value,
            session_id=response.session_id,
            needs_more_whys=response.continuing,
            why_number=response.step_number,
            problem=response.problem,
            question=response.question,
            summary=summary,
            text=text,
        )
