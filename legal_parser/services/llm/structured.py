"""Decoding of JSON objects returned by LLM providers."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..parser.errors import StructuredOutputError

ModelT = TypeVar("ModelT", bound=BaseModel)

_FENCE_RE = re.compile(r'^```(?:json)?\s*|\s*```$', re.IGNORECASE)


def parse_json_object(raw: str) -> Dict[str, Any]:
    """Parse a JSON object from model output, tolerating ```json fences."""
    clean_response = _FENCE_RE.sub('', (raw or "").strip())
    try:
        parsed = json.loads(clean_response)
    except json.JSONDecodeError as exc:
        raise StructuredOutputError(f"LLM response is not valid JSON: {exc}") from exc

    if not isinstance(parsed, dict):
        raise StructuredOutputError(
            f"LLM response is {type(parsed).__name__}, expected a JSON object"
        )
    return parsed


def validate_model(raw: str, model: Type[ModelT]) -> ModelT:
    """Parse and validate model output against ``model``."""
    data = parse_json_object(raw)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
        raise StructuredOutputError("Invalid LLM output: " + "; ".join(errors)) from exc
