"""Helpers for multipart admin forms (JSON-encoded fields, checkboxes)."""
import json
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import InvalidInputError

M = TypeVar("M", bound=BaseModel)


def parse_json_field(value: Optional[str], field: str, default: Any = None) -> Any:
    """Decode a JSON-encoded form field; empty means default."""
    if value is None or value == "":
        return [] if default is None else default
    try:
        return json.loads(value)
    except ValueError:
        raise InvalidInputError(f"Field '{field}' must be valid JSON")


def parse_json_list(value: Optional[str], field: str) -> list:
    parsed = parse_json_field(value, field, [])
    if not isinstance(parsed, list):
        raise InvalidInputError(f"Field '{field}' must be a JSON array")
    return parsed


def parse_checkbox(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("on", "true", "1", "yes")


def build_form_model(schema: Type[M], **fields: Any) -> M:
    """Validate collected form fields, reporting the first problem as a 400."""
    try:
        return schema(**fields)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise InvalidInputError(f"Field '{location}': {error['msg']}")
