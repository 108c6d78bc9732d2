"""
Turns free-form model output into a fully populated result schema.

Models often wrap JSON in markdown fences or surround it with prose, so the
JSON is located with an ordered list of extraction strategies, parsed, and
merged field by field over a fallback object. `normalize` never raises.
"""

import json
import logging
import re
from typing import Any, Callable, Dict, List, Optional, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

FENCED_JSON_RE = re.compile(r"```json\n([\s\S]*?)\n```")
FENCED_PLAIN_RE = re.compile(r"```\n([\s\S]*?)\n```")
# Greedy: first "{" to last "}". Prose holding several objects over-captures.
BRACE_SPAN_RE = re.compile(r"(\{[\s\S]*\})")


def _regex_strategy(pattern: re.Pattern) -> Callable[[str], Optional[str]]:
    def strategy(text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(1) if match else None

    strategy.__name__ = f"match_{pattern.pattern}"
    return strategy


fenced_json = _regex_strategy(FENCED_JSON_RE)
fenced_plain = _regex_strategy(FENCED_PLAIN_RE)
brace_span = _regex_strategy(BRACE_SPAN_RE)

EXTRACTION_STRATEGIES: List[Callable[[str], Optional[str]]] = [fenced_json, fenced_plain, brace_span]


def extract_json_span(text: str) -> Optional[str]:
    """
    Returns the span picked by the first strategy that matches.

    An empty capture counts as no span, and the caller falls back to the
    whole text; later strategies are not consulted.
    """
    for strategy in EXTRACTION_STRATEGIES:
        span = strategy(text)
        if span is not None:
            return span or None
    return None


def parse_json_object(raw: str) -> Optional[Dict[str, Any]]:
    """Locates and parses a JSON object; None when there is no usable object."""
    text = raw if isinstance(raw, str) else ""
    candidate = extract_json_span(text) or text
    try:
        value = json.loads(candidate)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Failed to parse JSON from model response: {e}")
        return None
    if not isinstance(value, dict):
        logger.warning(f"Model response parsed to {type(value).__name__}, expected an object")
        return None
    return value


def merge_with_fallback(parsed: Dict[str, Any], fallback: T) -> T:
    """
    Builds a result taking each field from `parsed` when present and valid
    for the field's type, and from `fallback` otherwise.

    Keys are matched by their wire alias (camelCase) first, then by the
    attribute name.
    """
    model_cls = type(fallback)
    merged = fallback.model_dump(by_alias=True)
    for name, field in model_cls.model_fields.items():
        key = field.alias or name
        if key in parsed:
            value = parsed[key]
        elif name in parsed:
            value = parsed[name]
        else:
            continue
        try:
            model_cls.model_validate({**merged, key: value})
        except ValidationError:
            logger.warning(f"Discarding implausible '{key}' from model response")
            continue
        merged[key] = value
    return model_cls.model_validate(merged)


def normalize(raw: str, fallback: T) -> T:
    """
    Returns a complete result for any input string.

    Unparseable output yields a copy of `fallback`; parseable output is
    merged over it per field.
    """
    try:
        parsed = parse_json_object(raw)
        if parsed is None:
            return fallback.model_copy(deep=True)
        return merge_with_fallback(parsed, fallback)
    except Exception as e:
        logger.warning(f"Falling back to default analysis due to normalization error: {e}")
        return fallback.model_copy(deep=True)
