"""
Data structures for match analysis and interview summaries.

These mirror the JSON the completion backend is asked to return. Field names
on the wire are camelCase (matchScore, missingSkills, ...); Python code uses
the snake_case attributes.
"""

from typing import List
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================

class QuestionType(str, Enum):
    BEHAVIORAL = "Behavioral"
    TECHNICAL = "Technical"
    SITUATIONAL = "Situational"


class Recommendation(str, Enum):
    HIRE = "Hire"
    CONSIDER = "Consider"
    NOT_READY = "Not Ready"


class ScoreBand(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


HIGH_SCORE_THRESHOLD = 70
MEDIUM_SCORE_THRESHOLD = 40


def score_band(score: int) -> ScoreBand:
    """Classify a 0-100 score: >= 70 high, 40-69 medium, below 40 low."""
    if score >= HIGH_SCORE_THRESHOLD:
        return ScoreBand.HIGH
    if score >= MEDIUM_SCORE_THRESHOLD:
        return ScoreBand.MEDIUM
    return ScoreBand.LOW


# =============================================================================
# MODELS
# =============================================================================

class _WireModel(BaseModel):
    """Immutable model that accepts and emits camelCase keys."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class InterviewQuestion(_WireModel):
    question: str
    type: QuestionType


class MatchAnalysis(_WireModel):
    """Result of comparing one job description against one resume."""
    match_score: int = Field(alias="matchScore", ge=0, le=100)
    summary: str
    strengths: List[str]  # usually 3
    missing_skills: List[str] = Field(alias="missingSkills")  # usually 2
    interview_questions: List[InterviewQuestion] = Field(alias="interviewQuestions")  # interview order

    @property
    def band(self) -> ScoreBand:
        return score_band(self.match_score)


class InterviewSummary(_WireModel):
    """Final performance summary, produced once when the interview completes."""
    overall_score: int = Field(alias="overallScore", ge=0, le=100)
    summary: str
    strengths: List[str]
    improvements: List[str]
    recommendation: Recommendation

    @property
    def band(self) -> ScoreBand:
        return score_band(self.overall_score)
