"""Tests for step response text."""

import json

from five_whys.inquiry.models import (
    InquirySummary,
    ResponseKind,
    StepResponse,
    WhyEntry,
)
from five_whys.inquiry.rendering import (
    follow_up_question,
    next_call_format,
    render_response,
    session_not_found_message,
)


def question_response(step_number: int, question: str) -> StepResponse:
    return StepResponse(
        kind=ResponseKind.QUESTION,
        session_id="session_abc",
        continuing=True,
        step_number=step_number,
        problem="The website is slow",
        question=question,
    )


class TestQuestions:
    def test_follow_up_after_first_step(self):
        assert follow_up_question("Server overloaded", 1) == (
            'Why does the problem "Server overloaded" occur?'
        )

    def test_follow_up_after_later_steps(self):
        assert follow_up_question("Server overloaded", 3) == 'Why does "Server overloaded" occur?'

    def test_next_call_format_is_json(self):
        payload = json.loads(next_call_format("session_abc"))

        assert payload["sessionId"] == "session_abc"
        assert "currentReason" in payload


class TestRenderResponse:
    def test_started(self):
        text = render_response(
            question_response(1, 'Why does the problem "The website is slow" occur?')
        )

        assert text.startswith("FIVE WHYS ANALYSIS STARTED")
        assert 'Problem: "The website is slow"' in text
        assert "SESSION ID: session_abc" in text
        assert '"sessionId": "session_abc"' in text

    def test_next_question(self):
        text = render_response(question_response(3, 'Why does "Too many users" occur?'))

        assert text.startswith("WHY #3 OF 5")
        assert 'Question: Why does "Too many users" occur?' in text

    def test_summary(self):
        response = StepResponse(
            kind=ResponseKind.SUMMARY,
            session_id="session_abc",
            continuing=False,
            step_number=5,
            problem="The website is slow",
            summary=InquirySummary(
                problem="The website is slow",
                history=[
                    WhyEntry(step_number=1, answer="Server overloaded"),
                    WhyEntry(step_number=2, answer="No autoscaling"),
                ],
                root_cause="No autoscaling",
            ),
        )

        text = render_response(response)

        assert text.startswith("FIVE WHYS ANALYSIS COMPLETE")
        assert "Problem: The website is slow\nWhy 1: Server overloaded\nWhy 2: No autoscaling" in text
        assert "Root cause: No autoscaling" in text
        assert text.endswith("ANALYSIS FINISHED - No more calls needed")


def test_session_not_found_message_offers_restart():
    message = session_not_found_message("session_gone")

    assert "Session session_gone not found" in message
    assert '{"problem": "your problem statement"}' in message
