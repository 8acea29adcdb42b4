"""
Interview session state machine.

Flow per answer:
1. Record the candidate's answer
2. Ask the backend for feedback (with an advisory NEXT: directive)
3. Record the feedback
4. Either present the next local question, or request the final summary

The local question list is the source of truth for what comes next; the
backend's directive can only end the interview early.
"""
import logging
from typing import Callable, List, Optional, Tuple

import config
from agents.completion import CompletionGateway
from agents.interpreter import parse_interview_summary, parse_turn_feedback
from agents.interviewer import InterviewTurnRequest, interview_turn
from errors import ValidationError
from schemas import InterviewQuestion, InterviewSummary, MatchAnalysis
from state import (
    InterviewSession,
    Message,
    SessionStatus,
    TRANSITIONS,
    initialize_session,
)

logger = logging.getLogger(__name__)

CLOSING_MESSAGE = "That concludes the interview. Thank you! Here is your performance summary."

TurnFn = Callable[[InterviewTurnRequest], str]


def opening_message(question: str, total: int) -> str:
    return (
        f"Let's begin your mock interview. I'll ask you {total} questions.\n\n"
        f"Question 1 of {total}: {question}"
    )


def question_message(position: int, total: int, question: str) -> str:
    return f"Question {position} of {total}: {question}"


class InterviewRunner:
    """
    High-level interface for running one mock interview.

    The runner owns the session's transcript and index. Presentation code
    reads through the accessors and drives it with start() and submit_answer().
    """

    def __init__(
        self,
        initial_state: InterviewSession,
        gateway: Optional[CompletionGateway] = None,
        turn_fn: Optional[TurnFn] = None,
        feedback_format: Optional[str] = None,
    ):
        self.state = initial_state
        self.summary_pending = False
        self._feedback_format = feedback_format or config.FEEDBACK_FORMAT
        if turn_fn is None:
            gateway = gateway or CompletionGateway()

            def _local_turn(request: InterviewTurnRequest) -> str:
                return interview_turn(request, gateway=gateway, feedback_format=self._feedback_format)

            turn_fn = _local_turn

        self._turn = turn_fn

    @classmethod
    def from_analysis(
        cls,
        analysis: MatchAnalysis,
        job_description: str,
        **kwargs,
    ) -> "InterviewRunner":
        """Create a not-yet-started runner over the analysis' questions."""
        return cls(initialize_session(analysis.interview_questions, job_description), **kwargs)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> str:
        """Start the interview and return the opening message."""
        if self.state["status"] != SessionStatus.NOT_STARTED:
            raise ValidationError("The interview has already started.")

        questions = self.state["questions"]
        if not questions:
            raise ValidationError("There are no interview questions to ask.")

        self._advance(SessionStatus.IN_PROGRESS)
        self.state["current_index"] = 0
        self._append("assistant", opening_message(questions[0].question, len(questions)))
        return self._get_last_assistant_message()

    def submit_answer(self, answer: str) -> str:
        """
        Process the candidate's answer and return the latest assistant message.

        Backend or parse failures propagate and leave the status unchanged.
        The appended answer is kept.
        """
        if self.state["status"] != SessionStatus.IN_PROGRESS:
            raise ValidationError("The interview is not in progress.")
        if self.summary_pending:
            raise ValidationError("All questions are answered. Retry the summary to finish.")
        if not answer or not answer.strip():
            raise ValidationError("Please enter an answer.")

        questions = self.state["questions"]
        index = self.state["current_index"]

        # 1. Record the answer
        self._append("user", answer)

        # 2-3. Feedback turn
        response = self._turn(self._build_request(is_complete=False))
        turn = parse_turn_feedback(response)

        # 4. Record the feedback
        self._append("assistant", turn.feedback)

        # 5. Local index decides; the directive can only end early
        at_last_question = index == len(questions) - 1
        if at_last_question or turn.requests_completion:
            if not at_last_question:
                logger.info("Backend ended the interview early at question %d of %d", index + 1, len(questions))
            # 6. Summary
            self.summary_pending = True
            self._finish()
        else:
            # 7. Next local question
            self.state["current_index"] = index + 1
            self._append(
                "assistant",
                question_message(index + 2, len(questions), questions[index + 1].question),
            )

        return self._get_last_assistant_message()

    def retry_summary(self) -> str:
        """Retry a failed summary request."""
        if not self.summary_pending or self.state["status"] != SessionStatus.IN_PROGRESS:
            raise ValidationError("There is no pending summary to retry.")
        self._finish()
        return self._get_last_assistant_message()

    def _finish(self):
        response = self._turn(self._build_request(is_complete=True))
        summary = parse_interview_summary(response)

        self.state["summary"] = summary
        self.summary_pending = False
        self._append("assistant", CLOSING_MESSAGE)
        self._advance(SessionStatus.COMPLETE)
        logger.info(
            "Interview complete: score=%d, recommendation=%s",
            summary.overall_score, summary.recommendation.value,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _advance(self, target: SessionStatus):
        current = self.state["status"]
        if TRANSITIONS.get(current) != target:
            raise ValidationError(f"Cannot move interview from {current.value} to {target.value}.")
        self.state["status"] = target

    def _append(self, role: str, content: str):
        self.state["transcript"] = self.state["transcript"] + [Message(role=role, content=content)]

    def _build_request(self, is_complete: bool) -> InterviewTurnRequest:
        questions = self.state["questions"]
        index = self.state["current_index"]
        return InterviewTurnRequest(
            transcript=[dict(m) for m in self.state["transcript"]],
            job_description=self.state["job_description"],
            current_question=questions[index].question,
            is_complete=is_complete,
            remaining_questions=[q.question for q in questions[index + 1:]],
        )

    def _get_last_assistant_message(self) -> str:
        for msg in reversed(self.state["transcript"]):
            if msg["role"] == "assistant":
                return msg["content"]
        return ""

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    def is_complete(self) -> bool:
        return self.state["status"] == SessionStatus.COMPLETE

    @property
    def status(self) -> SessionStatus:
        return self.state["status"]

    @property
    def summary(self) -> Optional[InterviewSummary]:
        return self.state["summary"]

    def current_question(self) -> Optional[InterviewQuestion]:
        if self.state["status"] != SessionStatus.IN_PROGRESS:
            return None
        return self.state["questions"][self.state["current_index"]]

    def progress(self) -> Tuple[int, int]:
        """1-based position of the current question and the total."""
        return self.state["current_index"] + 1, len(self.state["questions"])

    def get_messages(self) -> List[Message]:
        return list(self.state["transcript"])
