"""The five_whys tool endpoint."""

from fastapi import APIRouter

from five_whys.api.dependencies import InquiryEngineDep
from five_whys.api.exceptions import (
    InquiryCompleteError,
    InvalidRequestError,
    SessionNotFoundError,
)
from five_whys.api.models.errors import ErrorDetail
from five_whys.api.models.five_whys import FiveWhysRequest, FiveWhysResponse
from five_whys.inquiry import errors as inquiry_errors
from five_whys.inquiry.rendering import render_response, session_not_found_message

router = APIRouter()


@router.post("/five-whys", response_model=FiveWhysResponse)
async def five_whys(
    payload: FiveWhysRequest,
    engine: InquiryEngineDep,
) -> FiveWhysResponse:
    """Run one step of a 5-Whys analysis.

    First call: send only `problem`; the response carries a new
    `sessionId` and the first question. Every later call: send the
    `sessionId` and `currentReason`, your answer to the last question.
    After the fifth answer the response is a summary and
    `needsMoreWhys` is false.
    """
    try:
        step = await engine.step(payload.to_step())
    except inquiry_errors.SessionNotFoundError as e:
        raise SessionNotFoundError(session_not_found_message(e.session_id)) from e
    except inquiry_errors.InquiryCompleteError as e:
        raise InquiryCompleteError(e.message) from e
    except inquiry_errors.InquiryValidationError as e:
        raise InvalidRequestError(
            e.message,
            details=[ErrorDetail(field=e.field, message=e.message)],
        ) from e

    return FiveWhysResponse.from_step(step, render_response(step))
