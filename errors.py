"""
Error taxonomy for the Interview Coach.

Every failure a user action can hit is one of three kinds. All of them are
caught at the boundary of the action (Analyze, Submit Answer) and turned into
a single user-facing message.
"""

USER_FACING_ERROR = "Something went wrong. Please try again."


class InterviewCoachError(Exception):
    """Base class for errors surfaced to the user."""

    user_message = USER_FACING_ERROR


class ValidationError(InterviewCoachError):
    """Missing or empty required input. Raised before any backend call."""

    def __init__(self, message: str):
        super().__init__(message)
        self.user_message = message


class BackendError(InterviewCoachError):
    """The completion backend failed (network, status, policy rejection)."""


class MalformedResponseError(InterviewCoachError):
    """The backend returned text that does not parse into the expected shape."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw
