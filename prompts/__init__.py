"""
Prompt templates for the completion backend.
"""
from .analysis_prompt import build_analysis_prompt
from .interview_prompt import (
    INTERVIEW_COMPLETE,
    NEXT_MARKER,
    build_interview_turn_prompt,
    format_transcript,
)

__all__ = [
    "build_analysis_prompt",
    "build_interview_turn_prompt",
    "format_transcript",
    "INTERVIEW_COMPLETE",
    "NEXT_MARKER",
]
