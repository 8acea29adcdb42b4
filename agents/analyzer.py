"""
Analyze operation - compares one job description against one resume.
"""
import logging
from typing import Optional

from agents.completion import CompletionGateway
from agents.interpreter import parse_match_analysis
from errors import ValidationError
from prompts import build_analysis_prompt
from schemas import MatchAnalysis

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Job description and resume are required."


def validate_analysis_input(job_description: Optional[str], resume: Optional[str]) -> None:
    """Reject missing, empty or whitespace-only inputs."""
    if not job_description or not job_description.strip():
        raise ValidationError(MISSING_INPUT_MESSAGE)
    if not resume or not resume.strip():
        raise ValidationError(MISSING_INPUT_MESSAGE)


def analyze(
    job_description: str,
    resume: str,
    gateway: Optional[CompletionGateway] = None,
) -> MatchAnalysis:
    """
    Request a structured match analysis.

    Raises:
        ValidationError: an input is empty (no backend call is made)
        BackendError: the completion backend failed
        MalformedResponseError: the backend did not return a MatchAnalysis
    """
    validate_analysis_input(job_description, resume)

    gateway = gateway or CompletionGateway()
    prompt = build_analysis_prompt(job_description, resume)
    text = gateway.complete(prompt)
    analysis = parse_match_analysis(text)

    logger.info(
        "Analysis complete: score=%d, %d questions",
        analysis.match_score, len(analysis.interview_questions),
    )
    return analysis
