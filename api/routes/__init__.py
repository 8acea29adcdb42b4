"""
API routers and shared dependencies.
"""
import logging

from fastapi.responses import JSONResponse

from agents.completion import CompletionGateway
from errors import InterviewCoachError, ValidationError

logger = logging.getLogger(__name__)


def get_gateway() -> CompletionGateway:
    """Completion gateway dependency (overridden in tests)."""
    return CompletionGateway()


def error_response(exc: InterviewCoachError) -> JSONResponse:
    """Convert a coach error into the single client-visible error body."""
    if isinstance(exc, ValidationError):
        return JSONResponse(status_code=400, content={"error": exc.user_message})
    logger.error("Request failed: %s: %s", type(exc).__name__, exc)
    return JSONResponse(status_code=500, content={"error": exc.user_message})
