"""
Response Interpreter - turns raw backend text into structured results.

Two strategies:
- structured-JSON parse for analysis results and final summaries
- marker-delimited split (on the first NEXT:) for per-turn feedback

A failed structured parse is a hard failure for that turn; nothing is repaired.
"""
import json
import logging
from typing import NamedTuple, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from errors import MalformedResponseError
from prompts import INTERVIEW_COMPLETE, NEXT_MARKER
from schemas import InterviewSummary, MatchAnalysis

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class TurnFeedback(NamedTuple):
    feedback: str
    directive: Optional[str]  # advisory: next question text or INTERVIEW_COMPLETE

    @property
    def requests_completion(self) -> bool:
        return is_complete_directive(self.directive)


def is_complete_directive(directive: Optional[str]) -> bool:
    """
    True when the directive is the INTERVIEW_COMPLETE token.

    Only the first line counts; markdown bold, quotes and a trailing period are ignored.
    """
    if not directive or not directive.strip():
        return False
    first_line = directive.strip().splitlines()[0]
    return first_line.strip(" *\"'.") == INTERVIEW_COMPLETE


def _load_json_object(text: str) -> dict:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.warning("Backend response is not valid JSON: %r", text)
        raise MalformedResponseError("Response is not valid JSON", raw=text) from exc

    if not isinstance(data, dict):
        logger.warning("Backend response is not a JSON object: %r", text)
        raise MalformedResponseError("Response is not a JSON object", raw=text)
    return data


def parse_structured(text: str, model: Type[ModelT]) -> ModelT:
    """Parse the whole response text as JSON and validate it against model."""
    data = _load_json_object(text)
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        logger.warning(
            "Backend response does not match %s (%d errors): %r",
            model.__name__, exc.error_count(), text,
        )
        raise MalformedResponseError(f"Response does not match {model.__name__}", raw=text) from exc


def parse_match_analysis(text: str) -> MatchAnalysis:
    return parse_structured(text, MatchAnalysis)


def parse_interview_summary(text: str) -> InterviewSummary:
    return parse_structured(text, InterviewSummary)


def split_feedback(text: str) -> TurnFeedback:
    """
    Split on the first NEXT: marker.

    Without a marker the whole text is feedback and there is no directive.
    """
    before, marker, after = text.partition(NEXT_MARKER)
    if not marker:
        return TurnFeedback(feedback=text.strip(), directive=None)
    # A bolded marker (**NEXT:**) leaves asterisks on both sides of the split
    return TurnFeedback(
        feedback=before.strip().rstrip("*").rstrip(),
        directive=after.strip().lstrip("*").lstrip(),
    )


def parse_turn_feedback(text: str) -> TurnFeedback:
    """
    Parse per-turn feedback in either format.

    A JSON object with a "feedback" string is read directly; anything else
    goes through the marker split.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return split_feedback(text)

    if not isinstance(data, dict) or not isinstance(data.get("feedback"), str):
        return split_feedback(text)

    directive = data.get("next")
    return TurnFeedback(
        feedback=data["feedback"].strip(),
        directive=directive.strip() if isinstance(directive, str) else None,
    )
