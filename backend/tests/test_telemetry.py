"""
Tests for the telemetry records emitted by route handlers and flow runs.

All tests run fully offline: records are read back from the log via caplog.
"""
import sys
import os
import asyncio
import json
import logging
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.core.config import Settings
from app.core.exceptions import GenerationEmpty
from app.services.ai import AIService
from app.services.flow_runner import FlowRunner
from app.services.telemetry import emit_event, instrument, record_flow_run


def _run(coro):
    return asyncio.run(coro)


def _events(caplog):
    out = []
    for rec in caplog.records:
        msg = rec.getMessage()
        if rec.name == "studytrack.telemetry" and msg.startswith("telemetry="):
            out.append(json.loads(msg[len("telemetry="):]))
    return out


def _runner(content):
    client = MagicMock()
    client.chat.completions.create.return_value = MagicMock(
        choices=[MagicMock(message=MagicMock(content=content))]
    )
    settings = Settings(llm_provider="gemini", _env_file=None)
    return FlowRunner(AIService(client=client, settings=settings))


QUIZ_INPUT = {"topic": "Cell Biology", "difficulty": "basic", "examType": "neet", "numQuestions": 3}


@pytest.fixture(autouse=True)
def _capture_info(caplog):
    caplog.set_level(logging.INFO, logger="studytrack.telemetry")


# ---------------------------------------------------------------------------
# emit_event / record_flow_run
# ---------------------------------------------------------------------------

class TestEmitEvent:
    def test_single_line_json_without_none_fields(self, caplog):
        emit_event("api_call", route="/health", user_id=None, ok=True)
        [event] = _events(caplog)
        assert event["event"] == "api_call"
        assert event["route"] == "/health"
        assert "user_id" not in event
        assert "ts" in event

    def test_flow_run_record(self, caplog):
        record_flow_run("generate_quiz", version="v1", latency_ms=12, ok=True, repairs=2)
        [event] = _events(caplog)
        assert event["flow"] == "generate_quiz"
        assert event["repairs"] == 2
        assert "fallback" not in event

    def test_fallback_flagged(self, caplog):
        record_flow_run("generate_personalized_recommendations", version="v1", latency_ms=5,
                        ok=False, used_fallback=True, error_type="GenerationEmpty")
        [event] = _events(caplog)
        assert event["fallback"] is True
        assert event["error_type"] == "GenerationEmpty"


# ---------------------------------------------------------------------------
# instrument
# ---------------------------------------------------------------------------

class TestInstrument:
    def test_sync_success_copies_path_params(self, caplog):
        @instrument(route="/api/activity/unlock-status", version="v1")
        def handler(user_id):
            return {"user": user_id}

        assert handler(user_id="u1") == {"user": "u1"}
        [event] = _events(caplog)
        assert event["user_id"] == "u1"
        assert event["ok"] is True
        assert event["status"] == 200

    def test_sync_http_error_keeps_status(self, caplog):
        @instrument(route="/api/wordquest/bank-session", version="v1")
        def handler():
            raise HTTPException(status_code=404, detail="no words left")

        with pytest.raises(HTTPException):
            handler()
        [event] = _events(caplog)
        assert event["ok"] is False
        assert event["status"] == 404
        assert event["error_type"] == "HTTPException"

    def test_async_unexpected_error_is_500(self, caplog):
        @instrument(route="/api/flows/{flow_name}", version="v1")
        async def handler(flow_name):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            _run(handler(flow_name="generate_quiz"))
        [event] = _events(caplog)
        assert event["flow"] == "generate_quiz"
        assert event["status"] == 500

    def test_wrapped_name_preserved(self):
        @instrument(route="/x", version="v1")
        async def run_generation_flow():
            return None

        assert run_generation_flow.__name__ == "run_generation_flow"


# ---------------------------------------------------------------------------
# Flow runs
# ---------------------------------------------------------------------------

class TestFlowRunEvents:
    def test_one_record_per_successful_run(self, caplog):
        questions = [{"questionText": f"Question {i}?", "options": ["A", "B", "C", "D"],
                      "correctAnswerIndex": 0, "explanation": "Because."} for i in range(3)]
        runner = _runner(json.dumps({"quizTitle": "Cells", "questions": questions}))
        _run(runner.run("generate_quiz", QUIZ_INPUT))
        events = [e for e in _events(caplog) if e["event"] == "flow_run"]
        assert len(events) == 1
        assert events[0]["ok"] is True
        assert events[0]["flow"] == "generate_quiz"
        assert events[0]["repairs"] == 0

    def test_failed_run_records_error_type(self, caplog):
        runner = _runner("")
        with pytest.raises(GenerationEmpty):
            _run(runner.run("generate_quiz", QUIZ_INPUT))
        [event] = [e for e in _events(caplog) if e["event"] == "flow_run"]
        assert event["ok"] is False
        assert event["error_type"] == "GenerationEmpty"

    def test_fallback_run_recorded_once(self, caplog):
        runner = _runner("")
        _run(runner.run("generate_personalized_recommendations", {"name": "Asha"}))
        [event] = [e for e in _events(caplog) if e["event"] == "flow_run"]
        assert event["fallback"] is True
