"""
Interview turn route.
Stateless: the client sends the whole transcript with every turn.
"""
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from agents.completion import CompletionGateway
from agents.interviewer import InterviewTurnRequest, interview_turn
from api.routes import error_response, get_gateway
from errors import InterviewCoachError

router = APIRouter(prefix="/api", tags=["interview"])


class InterviewTurnResponse(BaseModel):
    response: str


@router.post("/interview", response_model=InterviewTurnResponse)
async def run_interview_turn(
    request: InterviewTurnRequest,
    gateway: CompletionGateway = Depends(get_gateway),
):
    """Get feedback on the latest answer, or the raw summary when isComplete is set."""
    try:
        text = await run_in_threadpool(interview_turn, request, gateway)
    except InterviewCoachError as exc:
        return error_response(exc)
    return InterviewTurnResponse(response=text)
