"""
Analyze route.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field

from agents.analyzer import analyze
from agents.completion import CompletionGateway
from api.routes import error_response, get_gateway
from errors import InterviewCoachError

router = APIRouter(prefix="/api", tags=["analyze"])


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_description: Optional[str] = Field(default=None, alias="jobDescription")
    resume: Optional[str] = None


@router.post("/analyze")
async def analyze_resume(request: AnalyzeRequest, gateway: CompletionGateway = Depends(get_gateway)):
    """Compare a resume with a job description and propose interview questions."""
    try:
        analysis = await run_in_threadpool(analyze, request.job_description, request.resume, gateway)
    except InterviewCoachError as exc:
        return error_response(exc)
    return analysis.to_wire()
