"""
Response Parser — decode JSON embedded in model completions into typed results.

The model is instructed to answer with JSON only. Parsing trims surrounding
whitespace, unwraps a fully fenced ```json block, and deserializes directly.
Field names match case-insensitively (camelCase and snake_case both accepted),
and a JSON null leaves the field at its default.

The failure policy is declared per feature in PROMPT_CONFIG["<prompt>"]["on_failure"].
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, TypeVar, get_args

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from jobmatch.config import PROMPT_CONFIG, OnParseFailure
from jobmatch.errors import GatewayError, ParseError
from jobmatch.services.llm_service import LLMGateway

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_structured(raw: str, result_model: type[T]) -> T:
    """
    Deserialize a completion into `result_model`.

    Raises:
        ParseError: empty text, invalid JSON, or JSON of the wrong shape.
    """
    text = _strip_fence((raw or "").strip())
    if not text:
        raise ParseError("Empty response from model", raw_text=raw or "")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Error parsing model response: {e}. Text: {text[:200]}", raw_text=raw) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(data).__name__}. Text: {text[:200]}",
            raw_text=raw,
        )

    try:
        return result_model.model_validate(_fold_keys(data, result_model))
    except PydanticValidationError as e:
        raise ParseError(f"Model response has the wrong shape: {e}", raw_text=raw) from e


async def complete_structured(
    gateway: LLMGateway,
    *,
    prompt_name: str,
    messages: list[dict[str, str]],
    result_model: type[T],
    default: Callable[[], T] | None = None,
) -> T:
    """
    Call the gateway and parse the completion, applying the feature's failure policy.

    RAISE propagates GatewayError / ParseError. DEFAULT logs the failure and
    returns `default()`.
    """
    policy = PROMPT_CONFIG.get(prompt_name, {}).get("on_failure", OnParseFailure.RAISE)
    request = gateway.build_request(prompt_name, messages)

    try:
        raw = await gateway.complete(request)
        return parse_structured(raw, result_model)
    except (GatewayError, ParseError) as e:
        if policy is OnParseFailure.DEFAULT and default is not None:
            logger.warning(f"{prompt_name} failed, returning default: {e}")
            return default()
        raise


# ── Helpers ──────────────────────────────────────────────────────────────────


def _strip_fence(text: str) -> str:
    """Unwrap ```json ... ``` when the whole completion is a single fenced block."""
    if not (text.startswith("```") and text.endswith("```") and len(text) >= 6):
        return text
    inner = text[3:-3]
    if inner.lower().startswith("json"):
        inner = inner[4:]
    return inner.strip()


def _norm(key: str) -> str:
    return str(key).replace("_", "").lower()


def _model_in(annotation: Any) -> type[BaseModel] | None:
    """Find the BaseModel inside an annotation such as list[Model] or Union[Model, str]."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _model_in(arg)
        if found is not None:
            return found
    return None


def _fold_keys(data: Any, model: type[BaseModel]) -> Any:
    """Rename keys case-insensitively to the model's field names, recursing into nested models."""
    if isinstance(data, list):
        return [_fold_keys(item, model) for item in data]
    if not isinstance(data, dict):
        return data

    lookup: dict[str, str] = {}
    for name, field in model.model_fields.items():
        lookup[_norm(name)] = name
        if field.alias:
            lookup[_norm(field.alias)] = name

    folded: dict[str, Any] = {}
    for key, value in data.items():
        name = lookup.get(_norm(key))
        # null means "not provided": the field keeps its default
        if name is None or value is None:
            continue
        nested = _model_in(model.model_fields[name].annotation)
        folded[name] = _fold_keys(value, nested) if nested else value
    return folded
