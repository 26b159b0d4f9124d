"""Error taxonomy shared by the generation flows and the activity services.

Services raise these; only the API layer turns them into HTTP responses.
"""
from __future__ import annotations


class StudyTrackError(Exception):
    """Base class for all StudyTrack domain errors."""


class UnknownFlowError(StudyTrackError, KeyError):
    def __init__(self, flow_name: str):
        self.flow_name = flow_name
        super().__init__(flow_name)

    def __str__(self) -> str:
        return f"Unknown flow '{self.flow_name}'"


class FlowInputError(StudyTrackError, ValueError):
    """Caller input failed the flow's input schema. The model was not called."""

    def __init__(self, flow_name: str, errors: list[dict]):
        self.flow_name = flow_name
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors) or "input"
        super().__init__(f"Invalid input for flow '{flow_name}': {fields}")


class GenerationEmpty(StudyTrackError):
    """The model returned no parseable output. Safe to retry."""

    user_message = "The AI model did not return a usable response. Please try again."

    def __init__(self, flow_name: str, detail: str = ""):
        self.flow_name = flow_name
        self.detail = detail
        super().__init__(f"Flow '{flow_name}' produced no usable output: {detail or 'empty response'}")


class GenerationIrreparable(StudyTrackError):
    """Model output violated the output contract and repair could not fix it."""

    def __init__(self, flow_name: str, detail: str):
        self.flow_name = flow_name
        self.detail = detail
        super().__init__(f"Flow '{flow_name}' output could not be repaired: {detail}")
