from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel

from analysis.prompts import nested_model
from analysis.validator import validate_output

M = TypeVar("M", bound=BaseModel)


def fill_defaults(model: Type[BaseModel], raw: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop absent, null and blank values so the schema defaults apply, recursing into record lists.

    Keys are rewritten to the field alias; unknown keys are discarded.
    """
    raw = raw or {}
    filled: Dict[str, Any] = {}
    for name, field in model.model_fields.items():
        key = field.alias or name
        value = raw.get(key, raw.get(name))
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        nested = nested_model(field.annotation)
        if nested is not None and isinstance(value, list):
            value = [
                fill_defaults(nested, item) if isinstance(item, dict) or item is None else item
                for item in value
            ]
        filled[key] = value
    return filled


def normalize_output(model: Type[M], raw: Optional[Dict[str, Any]]) -> M:
    """Turn the wrapper's raw output into a fully populated result.

    Missing fields are not an error; values of the wrong shape raise
    ModelOutputError.
    """
    return validate_output(model, fill_defaults(model, raw))
