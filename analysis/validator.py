from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from analysis.errors import InputValidationError, ModelOutputError
from schemas import FieldViolation

M = TypeVar("M", bound=BaseModel)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def to_violations(exc: ValidationError) -> List[FieldViolation]:
    """Flatten a pydantic error into (dotted field path, message) pairs."""
    return [
        FieldViolation(field=_field_path(err["loc"]), message=err["msg"])
        for err in exc.errors()
    ]


def _validate(model: Type[M], data: Any) -> M:
    if isinstance(data, model):
        # Re-run validators; instances built with model_construct skip them
        data = data.model_dump(by_alias=True)
    return model.model_validate(data)


def validate_input(model: Type[M], data: Any) -> M:
    try:
        return _validate(model, data)
    except ValidationError as e:
        raise InputValidationError(to_violations(e)) from e


def validate_output(model: Type[M], data: Any) -> M:
    try:
        return _validate(model, data)
    except ValidationError as e:
        violations = to_violations(e)
        raise ModelOutputError(
            f"Model output does not match {model.__name__}: "
            + "; ".join(f"{v.field}: {v.message}" for v in violations),
            violations,
        ) from e
