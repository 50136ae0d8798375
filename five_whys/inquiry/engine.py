"""Inquiry engine: the five-step root cause protocol.

Each call to `step` either starts an inquiry (problem only) or advances
one by a single answer (session id and answer). An inquiry moves through

    NEW -> ACTIVE(step 1..5) -> FINALIZED

and the fifth answer produces a summary whose root cause is the last
answer given. The engine owns the continuation decision; callers only
ever supply answers.
"""

from collections.abc import Callable
from uuid import uuid4

from five_whys.inquiry.errors import (
    InquiryCompleteError,
    InquiryValidationError,
    SessionNotFoundError,
)
from five_whys.inquiry.models import (
    MAX_STEPS,
    InquiryRecord,
    InquirySummary,
    ResponseKind,
    StepRequest,
    StepResponse,
    WhyEntry,
)
from five_whys.inquiry.rendering import first_question, follow_up_question
from five_whys.inquiry.store import SessionStore
from five_whys.observability.logging import get_logger
from five_whys.observability.metrics import ERRORS, STEPS

logger = get_logger(__name__)


def new_session_id() -> str:
    """Generate an opaque, unpredictable session id."""
    return f"session_{uuid4().hex}"


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class InquiryEngine:
    """Drives inquiries against a session store."""

    def __init__(
        self,
        session_store: SessionStore,
        id_factory: Callable[[], str] = new_session_id,
    ) -> None:
        self._store = session_store
        self._id_factory = id_factory

    async def step(self, request: StepRequest) -> StepResponse:
        """Process one exchange.

        Raises:
            InquiryValidationError: Malformed or out-of-protocol input
            InquiryCompleteError: The inquiry has already been summarized
            SessionNotFoundError: Unknown, expired or evicted session id
        """
        try:
            if request.session_id is None:
                return await self._start(request)
            return await self._advance(request.session_id, request)
        except (InquiryValidationError, SessionNotFoundError) as e:
            ERRORS.labels(error_type=type(e).__name__).inc()
            logger.info(
                "inquiry_step_rejected",
                error_type=type(e).__name__,
                session_id=request.session_id,
                message=e.message,
            )
            raise

    async def _start(self, request: StepRequest) -> StepResponse:
        if _blank(request.problem):
            raise InquiryValidationError(
                "Problem is required to start a new analysis. "
                'Expected format: {"problem": "your problem statement"}',
                field="problem",
            )
        if request.answer is not None:
            raise InquiryValidationError(
                "First call error: provide only the 'problem' parameter. "
                "Do not include currentReason in the first call.",
                field="currentReason",
            )
        if request.needs_more_whys is not None:
            raise InquiryValidationError(
                "Do not set 'needsMoreWhys'; the tool decides when to continue.",
                field="needsMoreWhys",
            )

        problem = request.problem or ""

        session_id = await self._unused_session_id()
        record = InquiryRecord(problem=problem)
        await self._store.put(session_id, record)

        STEPS.labels(outcome="started").inc()
        logger.info("inquiry_started", session_id=session_id, problem_length=len(problem))

        return StepResponse(
            kind=ResponseKind.QUESTION,
            session_id=session_id,
            continuing=True,
            step_number=record.step_number,
            problem=problem,
            question=first_question(problem),
        )

    async def _advance(self, session_id: str, request: StepRequest) -> StepResponse:
        if request.problem is not None:
            raise InquiryValidationError(
                "Provide either 'problem' to start a new analysis or "
                "'sessionId' with 'currentReason' to continue one, not both.",
                field="problem",
            )

        record = await self._store.get(session_id)
        if record is None:
            raise SessionNotFoundError(session_id)

        if not record.continuing:
            raise InquiryCompleteError(
                f"Analysis for session {session_id} is already complete. "
                "Start a new analysis with a 'problem' to investigate further.",
                field="sessionId",
            )
        if _blank(request.answer):
            raise InquiryValidationError(
                "currentReason is required when continuing an existing session. "
                f"Current session: Why #{record.step_number} for problem: "
                f'"{record.problem}"',
                field="currentReason",
            )
        if request.needs_more_whys is not None:
            raise InquiryValidationError(
                "Do not set 'needsMoreWhys'; the tool decides when to continue.",
                field="needsMoreWhys",
            )

        answer = request.answer or ""

        answered_step = record.step_number
        record.history.append(WhyEntry(step_number=answered_step, answer=answer))
        next_step = answered_step + 1

        if record.continuing and next_step <= MAX_STEPS:
            record.step_number = next_step
            await self._store.put(session_id, record)

            STEPS.labels(outcome="advanced").inc()
            logger.info(
                "inquiry_advanced",
                session_id=session_id,
                answered_step=answered_step,
                step_number=next_step,
            )

            return StepResponse(
                kind=ResponseKind.QUESTION,
                session_id=session_id,
                continuing=True,
                step_number=next_step,
                problem=record.problem,
                question=follow_up_question(answer, answered_step),
            )

        return await self._finalize(session_id, record)

    async def _finalize(self, session_id: str, record: InquiryRecord) -> StepResponse:
        record.continuing = False
        await self._store.put(session_id, record)

        STEPS.labels(outcome="completed").inc()
        logger.info(
            "inquiry_completed",
            session_id=session_id,
            answers=len(record.history),
        )

        return StepResponse(
            kind=ResponseKind.SUMMARY,
            session_id=session_id,
            continuing=False,
            step_number=record.step_number,
            problem=record.problem,
            summary=InquirySummary(
                problem=record.problem,
                history=list(record.history),
                root_cause=record.root_cause,
            ),
        )

    async def _unused_session_id(self) -> str:
        session_id = self._id_factory()
        while await self._store.exists(session_id):
            logger.warning("session_id_collision", session_id=session_id)
            session_id = self._id_factory()
        return session_id
