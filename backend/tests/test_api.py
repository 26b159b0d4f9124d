import sys
import os
import json
from datetime import date
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.main import app
from app.core.config import Settings
from app.services.activity_store import InMemoryActivityStore, get_activity_store
from app.services.ai import AIService
from app.services.flow_runner import FlowRunner, get_flow_runner

client = TestClient(app)

QUIZ_INPUT = {"topic": "Thermodynamics", "difficulty": "intermediate", "examType": "jee", "numQuestions": 3}


def _llm(content):
    llm = MagicMock()
    if not isinstance(content, str):
        content = json.dumps(content)
    llm.chat.completions.create.return_value = MagicMock(
        choices=[MagicMock(message=MagicMock(content=content))]
    )
    return llm


@pytest.fixture
def llm_returns():
    """Install a FlowRunner whose model returns the given content."""
    def install(content):
        llm = _llm(content)
        runner = FlowRunner(AIService(client=llm, settings=Settings(_env_file=None)))
        app.dependency_overrides[get_flow_runner] = lambda: runner
        return llm
    yield install
    app.dependency_overrides.pop(get_flow_runner, None)


@pytest.fixture
def store():
    s = InMemoryActivityStore()
    app.dependency_overrides[get_activity_store] = lambda: s
    yield s
    app.dependency_overrides.pop(get_activity_store, None)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_flows():
    response = client.get("/api/flows")
    assert response.status_code == 200
    names = {f["name"] for f in response.json()["flows"]}
    assert "generate_quiz" in names


def test_unknown_flow_404(llm_returns):
    llm_returns("{}")
    response = client.post("/api/flows/does_not_exist", json={})
    assert response.status_code == 404


def test_invalid_input_422_with_field_errors(llm_returns):
    llm = llm_returns("{}")
    response = client.post("/api/flows/generate_quiz", json={**QUIZ_INPUT, "numQuestions": 20})
    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert errors[0]["field"] == "numQuestions"
    llm.chat.completions.create.assert_not_called()


def test_empty_generation_503(llm_returns):
    llm_returns("")
    response = client.post("/api/flows/generate_quiz", json=QUIZ_INPUT)
    assert response.status_code == 503
    assert "try again" in response.json()["detail"]


def test_irreparable_generation_502(llm_returns):
    llm_returns({"quizTitle": "Heat", "questions": []})
    response = client.post("/api/flows/generate_quiz", json=QUIZ_INPUT)
    assert response.status_code == 502


def test_flow_success_returns_result_and_repairs(llm_returns):
    llm_returns({"quizTitle": "Heat", "questions": [{
        "questionText": "First law of thermodynamics is about?",
        "options": ["Energy", "Entropy", "Momentum"],
        "correctAnswerIndex": 0,
        "explanation": "Conservation of energy.",
    }]})
    response = client.post("/api/flows/generate_quiz", json=QUIZ_INPUT)
    assert response.status_code == 200
    body = response.json()
    assert body["flow"] == "generate_quiz"
    assert body["result"]["questions"][0]["options"][-1] == "Option 4"
    assert body["repairs"]
    assert body["usedFallback"] is False


def test_record_interaction_and_unlock_status(store):
    response = client.post("/api/activity/u1/interactions")
    assert response.status_code == 200
    body = response.json()
    assert body["recorded"] is True
    assert body["lastInteractionDates"] == [date.today().isoformat()]

    response = client.get("/api/activity/u1/unlock-status")
    assert response.status_code == 200
    status = response.json()
    assert status["unlocked"] is False
    assert status["displayProgress"] == 1
    assert status["interactionStreakCount"] == 1


def test_bank_session():
    response = client.get("/api/wordquest/bank-session", params={"gameMode": "basic", "numChallenges": 2})
    assert response.status_code == 200
    challenges = response.json()["challenges"]
    assert len(challenges) == 2
    assert all(c["word"] in c["options"] for c in challenges)


def test_bank_session_rejects_unknown_mode():
    response = client.get("/api/wordquest/bank-session", params={"gameMode": "expert"})
    assert response.status_code == 422
