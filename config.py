"""
Configuration for the Interview Coach.
Values come from the environment, optionally loaded from a project-root .env file.
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# LLM backend (ANTHROPIC_API_KEY is read by langchain-anthropic directly)
COACH_MODEL = os.getenv("COACH_MODEL", "claude-sonnet-4-20250514")
COACH_TEMPERATURE = float(os.getenv("COACH_TEMPERATURE", "0.3"))
COACH_MAX_TOKENS = int(os.getenv("COACH_MAX_TOKENS", "2048"))

# Per-turn feedback format: "marker" (NEXT: line) or "json"
FEEDBACK_FORMAT = os.getenv("FEEDBACK_FORMAT", "marker").strip().lower()

# API
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:8501,http://localhost:3000,http://127.0.0.1:8501,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = None):
    """Configure root logging once for an entry point."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
