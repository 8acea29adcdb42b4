"""
State definitions for an interview session.
"""
from typing import TypedDict, List, Optional, Literal, Sequence, Tuple
from enum import Enum

from schemas import InterviewQuestion, InterviewSummary


class SessionStatus(str, Enum):
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETE = "Complete"


# Allowed forward transitions
TRANSITIONS = {
    SessionStatus.NOT_STARTED: SessionStatus.IN_PROGRESS,
    SessionStatus.IN_PROGRESS: SessionStatus.COMPLETE,
}


class Message(TypedDict):
    role: Literal["user", "assistant"]
    content: str


class InterviewSession(TypedDict):
    # Read-only view of MatchAnalysis.interview_questions
    questions: Tuple[InterviewQuestion, ...]

    # Context replayed into every turn prompt
    job_description: str

    # Current position (0-based, < len(questions) while not complete)
    current_index: int

    # Conversation tracking (append-only)
    transcript: List[Message]

    # Control
    status: SessionStatus
    summary: Optional[InterviewSummary]


def initialize_session(
    questions: Sequence[InterviewQuestion], job_description: str
) -> InterviewSession:
    """Create a fresh, not-yet-started session."""
    return InterviewSession(
        questions=tuple(questions),
        job_description=job_description,
        current_index=0,
        transcript=[],
        status=SessionStatus.NOT_STARTED,
        summary=None,
    )
