"""
Shared fixtures: canned backend responses and scripted chat models.
"""
import json
from typing import Any, List, Optional

import pytest
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult

from agents.completion import CompletionGateway
from schemas import MatchAnalysis

JOB_DESCRIPTION = "Senior Python engineer. FastAPI, PostgreSQL, AWS. 5+ years."
RESUME = "Jane Doe. 6 years of Python, Django and FastAPI. Some GCP experience."

ANALYSIS_PAYLOAD = {
    "matchScore": 78,
    "summary": "Strong Python background with relevant API experience.",
    "strengths": ["Python depth", "FastAPI", "API design"],
    "missingSkills": ["AWS", "PostgreSQL tuning"],
    "interviewQuestions": [
        {"question": "Tell me about a service you scaled.", "type": "Technical"},
        {"question": "Describe a conflict with a teammate.", "type": "Behavioral"},
        {"question": "How would you handle a production outage?", "type": "Situational"},
        {"question": "How do you structure FastAPI projects?", "type": "Technical"},
        {"question": "Why do you want this role?", "type": "Behavioral"},
    ],
}

SUMMARY_PAYLOAD = {
    "overallScore": 72,
    "summary": "Clear, structured answers with good technical depth.",
    "strengths": ["Communication", "Technical depth", "Ownership"],
    "improvements": ["Quantify impact", "Cloud experience"],
    "recommendation": "Hire",
}


class ScriptedChatModel(BaseChatModel):
    """Returns queued responses in order; an Exception entry is raised instead."""

    responses: List[Any] = []
    prompts: List[str] = []

    @property
    def _llm_type(self) -> str:
        return "scripted"

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager=None,
        **kwargs: Any,
    ) -> ChatResult:
        self.prompts.append(messages[-1].content)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content=item))])


@pytest.fixture
def analysis_payload():
    return json.loads(json.dumps(ANALYSIS_PAYLOAD))


@pytest.fixture
def analysis_json():
    return json.dumps(ANALYSIS_PAYLOAD)


@pytest.fixture
def summary_json():
    return json.dumps(SUMMARY_PAYLOAD)


@pytest.fixture
def analysis():
    return MatchAnalysis.model_validate(ANALYSIS_PAYLOAD)


@pytest.fixture
def scripted_llm():
    return ScriptedChatModel(responses=[], prompts=[])


@pytest.fixture
def gateway(scripted_llm):
    return CompletionGateway(llm=scripted_llm)


@pytest.fixture
def job_description():
    return JOB_DESCRIPTION


@pytest.fixture
def resume():
    return RESUME
