"""
InterviewTurn operation - one stateless request/response for the interview.

All session state travels with the request. The response is always the
backend's raw text; summaries are parsed by the caller.
"""
import logging
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

import config
from agents.completion import CompletionGateway
from errors import ValidationError
from prompts import build_interview_turn_prompt
from state import Message

logger = logging.getLogger(__name__)


class TranscriptMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class InterviewTurnRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transcript: List[TranscriptMessage] = Field(
        default_factory=list,
        validation_alias=AliasChoices("transcript", "messages"),
    )
    job_description: str = Field(alias="jobDescription")
    current_question: str = Field(default="", alias="currentQuestion")
    is_complete: bool = Field(default=False, alias="isComplete")

    # Questions still to come, listed in the feedback prompt (advisory only)
    remaining_questions: List[str] = Field(default_factory=list, alias="remainingQuestions")

    def transcript_messages(self) -> List[Message]:
        return [Message(role=m.role, content=m.content) for m in self.transcript]


def interview_turn(
    request: InterviewTurnRequest,
    gateway: Optional[CompletionGateway] = None,
    feedback_format: Optional[str] = None,
) -> str:
    """
    Run one interview turn and return the raw response text.

    Raises:
        ValidationError: a feedback turn without a trailing candidate answer
        BackendError: the completion backend failed
    """
    transcript = request.transcript_messages()

    if not request.is_complete and (not transcript or transcript[-1]["role"] != "user"):
        raise ValidationError("The transcript must end with the candidate's answer.")
    if request.is_complete and not transcript:
        raise ValidationError("A summary needs a non-empty transcript.")

    prompt = build_interview_turn_prompt(
        transcript=transcript,
        job_description=request.job_description,
        current_question=request.current_question,
        is_complete=request.is_complete,
        remaining_questions=request.remaining_questions,
        feedback_format=feedback_format or config.FEEDBACK_FORMAT,
    )

    gateway = gateway or CompletionGateway()
    text = gateway.complete(prompt)

    logger.debug(
        "Interview turn (%s): %d transcript entries, %d chars back",
        "summary" if request.is_complete else "feedback", len(transcript), len(text),
    )
    return text
