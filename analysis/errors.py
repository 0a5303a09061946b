from typing import List

from schemas import FieldViolation


class InterviewIQError(Exception):
    """Base class for failures raised by the prompt functions."""


class InputValidationError(InterviewIQError):
    """Caller-supplied data violates the request schema. No model call was made."""

    def __init__(self, violations: List[FieldViolation]):
        self.violations = violations
        fields = ", ".join(v.field for v in violations) or "input"
        super().__init__(f"Invalid {fields}")

    def to_detail(self) -> list[dict]:
        return [v.model_dump() for v in self.violations]


class ModelInvocationError(InterviewIQError):
    """The model backend could not complete the request."""


class ModelOutputError(ModelInvocationError):
    """The model answered, but not in the shape it was asked for."""

    def __init__(self, message: str, violations: List[FieldViolation] | None = None):
        self.violations = violations or []
        super().__init__(message)
