"""
Flow runner: drives one generation flow end to end.

    validate input -> render prompt -> one model call -> parse JSON
        -> deterministic repair -> output validation

Nothing here retries. An empty or unparseable response raises GenerationEmpty
so the caller can offer "try again"; output that is still invalid after
repair raises GenerationIrreparable. Flows that declare a fallback return it
instead of either error.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Optional

from pydantic import ValidationError

from app.core.exceptions import GenerationEmpty, GenerationIrreparable
from app.services.ai import AIService, get_ai_service
from app.services.flow_contract import FlowDefinition, FlowRun, parse_model_json, validation_errors
from app.services.flows import get_flow
from app.services.telemetry import record_flow_run
from app.utils.output_repair import log_corrections

logger = logging.getLogger("studytrack.flow_runner")

FLOW_VERSION = "v1"


class FlowRunner:
    def __init__(self, ai_service: Optional[AIService] = None):
        self._ai = ai_service

    @property
    def ai(self) -> AIService:
        if self._ai is None:
            self._ai = get_ai_service()
        return self._ai

    async def run(self, flow_name: str, payload: Any) -> FlowRun:
        flow = get_flow(flow_name)
        # Input errors surface before the model is ever touched.
        flow_input = flow.validate_input(payload)

        t0 = time.time()
        try:
            run = await self._generate(flow, flow_input)
        except (GenerationEmpty, GenerationIrreparable) as exc:
            error_type = exc.__class__.__name__
            if flow.fallback is None:
                self._emit(flow, t0, ok=False, error_type=error_type)
                raise
            logger.warning("[%s] using fallback result: %s", flow.name, exc)
            result = flow.output_model.model_validate(flow.fallback(flow_input))
            self._emit(flow, t0, ok=False, used_fallback=True, error_type=error_type)
            return FlowRun(flow=flow.name, result=result, used_fallback=True)

        self._emit(flow, t0, ok=True, repairs=len(run.corrections))
        logger.info("[%s] completed with %d repair(s)", flow.name, len(run.corrections))
        return run

    async def _generate(self, flow: FlowDefinition, flow_input) -> FlowRun:
        prompt = flow.build_prompt(flow_input)
        try:
            content = await self.ai.generate_completion(
                prompt,
                system_prompt=flow.system_prompt,
                temperature=flow.temperature,
            )
        except Exception as exc:
            logger.error("[%s] model call failed: %s", flow.name, exc, exc_info=True)
            raise GenerationEmpty(flow.name, f"model call failed ({exc.__class__.__name__})") from exc

        raw = parse_model_json(flow.name, content)
        repaired = flow.repair(raw, flow_input)
        log_corrections(flow.name, repaired.corrections)

        try:
            result = flow.output_model.model_validate(repaired.data)
        except ValidationError as exc:
            fields = ", ".join(e["field"] for e in validation_errors(exc))
            raise GenerationIrreparable(flow.name, f"invalid after repair: {fields}") from exc
        return FlowRun(flow=flow.name, result=result, corrections=repaired.corrections)

    @staticmethod
    def _emit(flow: FlowDefinition, t0: float, **fields) -> None:
        record_flow_run(
            flow.name,
            version=FLOW_VERSION,
            latency_ms=int((time.time() - t0) * 1000),
            **fields,
        )


_runner: Optional[FlowRunner] = None


def get_flow_runner() -> FlowRunner:
    global _runner
    if _runner is None:
        _runner = FlowRunner()
    return _runner


async def run_flow(flow_name: str, payload: Any, runner: Optional[FlowRunner] = None):
    """Run a flow and return just the validated output model."""
    run = await (runner or get_flow_runner()).run(flow_name, payload)
    return run.result
