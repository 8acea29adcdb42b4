"""
API route tests.

Run with: pytest tests/test_api.py -v
"""
import json

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routes import get_gateway
from errors import USER_FACING_ERROR


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_analyze_success(client, scripted_llm, analysis_json, analysis_payload, job_description, resume):
    scripted_llm.responses.append(analysis_json)

    response = client.post("/api/analyze", json={"jobDescription": job_description, "resume": resume})

    assert response.status_code == 200
    assert response.json() == analysis_payload


@pytest.mark.parametrize("body", [
    {"jobDescription": "", "resume": "A resume"},
    {"jobDescription": "A JD", "resume": "  "},
    {"jobDescription": "A JD"},
    {},
])
def test_analyze_validation_error(client, scripted_llm, body):
    response = client.post("/api/analyze", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Job description and resume are required."}
    assert scripted_llm.prompts == []


def test_analyze_backend_error(client, scripted_llm, job_description, resume):
    scripted_llm.responses.append(ConnectionError("down"))

    response = client.post("/api/analyze", json={"jobDescription": job_description, "resume": resume})

    assert response.status_code == 500
    assert response.json() == {"error": USER_FACING_ERROR}


def test_analyze_malformed_response(client, scripted_llm, job_description, resume):
    scripted_llm.responses.append("Not JSON at all")

    response = client.post("/api/analyze", json={"jobDescription": job_description, "resume": resume})

    assert response.status_code == 500
    assert response.json() == {"error": USER_FACING_ERROR}
    assert "Not JSON" not in response.text


def test_interview_feedback_turn(client, scripted_llm, job_description):
    scripted_llm.responses.append("Good answer.\nNEXT: Next question?")

    response = client.post("/api/interview", json={
        "transcript": [
            {"role": "assistant", "content": "Question 1 of 2: Why us?"},
            {"role": "user", "content": "Because of the mission."},
        ],
        "jobDescription": job_description,
        "currentQuestion": "Why us?",
        "isComplete": False,
    })

    assert response.status_code == 200
    assert response.json() == {"response": "Good answer.\nNEXT: Next question?"}
    assert "Because of the mission." in scripted_llm.prompts[0]


def test_interview_summary_turn_is_not_parsed(client, scripted_llm, summary_json, job_description):
    scripted_llm.responses.append(summary_json)

    response = client.post("/api/interview", json={
        "messages": [
            {"role": "assistant", "content": "Q1"},
            {"role": "user", "content": "A1"},
        ],
        "jobDescription": job_description,
        "currentQuestion": "Q1",
        "isComplete": True,
    })

    assert response.status_code == 200
    assert json.loads(response.json()["response"]) == json.loads(summary_json)
    assert "Candidate: A1" in scripted_llm.prompts[0]


def test_interview_turn_requires_candidate_answer(client, scripted_llm, job_description):
    response = client.post("/api/interview", json={
        "transcript": [{"role": "assistant", "content": "Q1"}],
        "jobDescription": job_description,
        "currentQuestion": "Q1",
        "isComplete": False,
    })

    assert response.status_code == 400
    assert scripted_llm.prompts == []


def test_interview_turn_backend_error(client, scripted_llm, job_description):
    scripted_llm.responses.append(RuntimeError("503"))

    response = client.post("/api/interview", json={
        "transcript": [{"role": "user", "content": "A1"}],
        "jobDescription": job_description,
        "currentQuestion": "Q1",
        "isComplete": False,
    })

    assert response.status_code == 500
    assert response.json() == {"error": USER_FACING_ERROR}


def test_malformed_body_is_client_error(client):
    response = client.post("/api/interview", json={"transcript": "nope"})

    assert response.status_code == 400
    assert "error" in response.json()
