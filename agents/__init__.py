"""
Backend-facing operations for the Interview Coach.
"""
from .completion import CompletionGateway
from .analyzer import analyze
from .interviewer import InterviewTurnRequest, interview_turn

__all__ = ["CompletionGateway", "analyze", "InterviewTurnRequest", "interview_turn"]
