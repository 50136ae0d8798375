"""Plain-text rendering of inquiry steps.

Agents read these messages verbatim, so every message repeats the
session id and the exact shape of the next call.
"""

import json

from five_whys.inquiry.models import MAX_STEPS, ResponseKind, StepResponse

CALL_AGAIN_REMINDER = (
    "CRITICAL: You MUST call this tool again with your answer. "
    "Do NOT think through the analysis yourself."
)

RESTART_GUIDANCE = (
    "Please start a new analysis by providing only the 'problem' parameter:\n"
    '{"problem": "your problem statement"}'
)


def first_question(problem: str) -> str:
    return f'Why does the problem "{problem}" occur?'


def follow_up_question(subject: str, answered_step: int) -> str:
    """Question about the latest answer.

    The answer to step 1 is still phrased as "the problem"; deeper
    answers are asked about directly.
    """
    if answered_step == 1:
        return f'Why does the problem "{subject}" occur?'
    return f'Why does "{subject}" occur?'


def next_call_format(session_id: str) -> str:
    example = {
        "sessionId": session_id,
        "currentReason": "your answer to this why question",
    }
    return json.dumps(example, ensure_ascii=False)


def render_response(response: StepResponse) -> str:
    """Render a step response as the text shown to the agent."""
    if response.kind is ResponseKind.SUMMARY:
        return render_summary(response)

    if response.step_number == 1:
        header = "FIVE WHYS ANALYSIS STARTED"
    else:
        header = f"WHY #{response.step_number} OF {MAX_STEPS}"

    return (
        f"{header}\n\n"
        f'Problem: "{response.problem}"\n\n'
        f"Question: {response.question}\n\n"
        f"SESSION ID: {response.session_id}\n\n"
        f"NEXT CALL FORMAT:\n"
        f"{next_call_format(response.session_id)}\n\n"
        f"{CALL_AGAIN_REMINDER}"
    )


def render_summary(response: StepResponse) -> str:
    summary = response.summary
    if summary is None:
        raise ValueError("summary response without a summary")

    lines = [f"Problem: {summary.problem}"]
    lines.extend(f"Why {entry.step_number}: {entry.answer}" for entry in summary.history)
    lines.append(f"\nRoot cause: {summary.root_cause}")

    return (
        "FIVE WHYS ANALYSIS COMPLETE\n\n"
        + "\n".join(lines)
        + f"\n\nSESSION ID: {response.session_id}\n"
        + "ANALYSIS FINISHED - No more calls needed"
    )


def session_not_found_message(session_id: str) -> str:
    return (
        f"Session {session_id} not found. This could be because:\n"
        "1. The session has expired\n"
        "2. The sessionId was mistyped\n"
        "3. The session was cleared from memory\n\n"
        f"{RESTART_GUIDANCE}"
    )
