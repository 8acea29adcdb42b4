"""
FastAPI application for the Interview Coach.
Provides the stateless Analyze and InterviewTurn endpoints.

Run with: uvicorn api.main:app --reload --port 8000
"""
from pathlib import Path
import logging
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from api.routes.analyze import router as analyze_router
from api.routes.interview import router as interview_router

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Interview Coach API",
    description="Resume matching and mock interview turns backed by an LLM",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze_router)
app.include_router(interview_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors, reported like any other validation failure."""
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Interview Coach API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
