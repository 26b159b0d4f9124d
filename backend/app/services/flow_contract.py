"""
Flow contract: the declared shape of one generation flow.

A flow bundles:
  - an input model    (validated before anything leaves the process)
  - an output model   (enforced on whatever the model sends back)
  - a prompt template (rendered from the validated input)
  - a repair routine  (deterministic fixes applied to the decoded output)
  - an optional fallback result for flows that prefer a canned answer
    over an error when the model returns nothing usable

The runner in flow_runner.py drives these pieces; this module only holds the
declarations and the parsing helpers so they can be tested without an LLM.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError

from app.core.exceptions import FlowInputError, GenerationEmpty
from app.utils.output_repair import RepairResult

logger = logging.getLogger("studytrack.flows")

_SCHEMA_INSTRUCTION = (
    "\n\nRespond with a single JSON object and nothing else. "
    "It must conform to this JSON schema:\n{schema}"
)


@dataclass(frozen=True)
class FlowDefinition:
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    system_prompt: str
    render: Callable[[Any], str]
    repair: Callable[[Any, Any], RepairResult]
    fallback: Optional[Callable[[Any], dict]] = None
    temperature: Optional[float] = None

    def validate_input(self, payload: Any) -> BaseModel:
        """Validate caller input; raises FlowInputError with field-level messages."""
        if isinstance(payload, self.input_model):
            return payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(by_alias=True)
        if not isinstance(payload, dict):
            raise FlowInputError(
                self.name, [{"field": "input", "message": "Input must be a JSON object"}]
            )
        try:
            return self.input_model.model_validate(payload)
        except ValidationError as exc:
            raise FlowInputError(self.name, validation_errors(exc)) from exc

    def build_prompt(self, flow_input: BaseModel) -> str:
        schema = json.dumps(
            self.output_model.model_json_schema(by_alias=True), separators=(",", ":")
        )
        return self.render(flow_input) + _SCHEMA_INSTRUCTION.format(schema=schema)

    def describe(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
            "outputSchema": self.output_model.model_json_schema(by_alias=True),
            "hasFallback": self.fallback is not None,
        }


@dataclass
class FlowRun:
    """A validated flow result together with the repairs that produced it."""
    flow: str
    result: BaseModel
    corrections: list = field(default_factory=list)
    used_fallback: bool = False

    def to_dict(self) -> dict:
        return {
            "flow": self.flow,
            "result": self.result.model_dump(by_alias=True, mode="json"),
            "repairs": list(self.corrections),
            "usedFallback": self.used_fallback,
        }


def validation_errors(exc: ValidationError) -> list[dict]:
    """Flatten a pydantic ValidationError into [{field, message}] for the UI."""
    out = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "input"
        out.append({"field": loc, "message": err.get("msg", "Invalid value")})
    return out


def clean_json_response(content: str) -> str:
    """Strip markdown fences and any preamble around the JSON payload."""
    content = (content or "").strip()
    if content.startswith("```json"):
        content = content[7:]
    elif content.startswith("```"):
        content = content[3:]
    if content.endswith("```"):
        content = content[:-3]
    content = content.strip()

    if content and content[0] not in "{[":
        start = min((i for i in (content.find("{"), content.find("[")) if i != -1), default=-1)
        if start != -1:
            content = content[start:]
    if content and content[-1] not in "}]":
        end = max(content.rfind("}"), content.rfind("]"))
        if end != -1:
            content = content[:end + 1]
    return content


def parse_model_json(flow_name: str, content: str) -> Any:
    """Decode raw model text; raises GenerationEmpty when nothing usable came back."""
    cleaned = clean_json_response(content)
    if not cleaned:
        raise GenerationEmpty(flow_name, "empty response")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise GenerationEmpty(flow_name, f"unparseable JSON ({exc.msg})") from exc
    if not isinstance(data, (dict, list)):
        raise GenerationEmpty(flow_name, f"expected a JSON object or array, got {type(data).__name__}")
    if not data:
        raise GenerationEmpty(flow_name, "empty JSON payload")
    return data
