# -*- coding: utf-8 -*-
"""Encoded-text boundary for reflection analytics
--------------------------------------------------

Four operations, each taking JSON text and returning JSON text:

- calculate_time_patterns(text) -> {"dayOfWeek": [...], "timeOfDay": [...], "month": [...]}
- calculate_co_occurrence(text) -> [...]
- calculate_trends(text)        -> {"daily": [...], "weekly": [...], "monthly": [...]}
- calculate_statistics(text)    -> {"mean", "median", "min", "max", "percentiles"}

Policy (availability over precision):
- Decoding yields Ok(value) or Fallback(reason). A Fallback, whether from bad
  JSON, a wrongly typed element or an empty array, resolves to the same hollow
  default result. These functions never raise.
- Non-finite numbers are not valid input. Non-finite results (overflowing sums)
  are encoded as null.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, TypeVar, Union

from pydantic import ValidationError

from .co_occurrence import compute_co_occurrence
from .observability import elapsed_ms, log_event, monotonic_ms
from .schemas import NUMBER_LIST, REFLECTION_LIST
from .stats import compute_statistics
from .time_patterns import compute_time_patterns
from .trends import compute_trends

logger = logging.getLogger("reflection_analytics")

T = TypeVar("T")

EMPTY_TIME_PATTERNS = {"dayOfWeek": [], "timeOfDay": [], "month": []}
EMPTY_CO_OCCURRENCE: List[Any] = []
EMPTY_TRENDS = {"daily": [], "weekly": [], "monthly": []}
EMPTY_STATISTICS = {"mean": 0, "median": 0, "min": 0, "max": 0, "percentiles": {}}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Fallback:
    reason: str


Outcome = Union[Ok, Fallback]


# -------------------------
# Decoding
# -------------------------

def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite literal: {name}")


def _finite_float(s: str) -> float:
    v = float(s)
    if not math.isfinite(v):
        raise ValueError(f"number out of range: {s[:32]}")
    return v


def _load_json_array(text: Union[str, bytes]) -> Outcome:
    try:
        data = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, TypeError, RecursionError) as exc:
        return Fallback(f"invalid_json:{type(exc).__name__}")
    if not isinstance(data, list):
        return Fallback("not_a_list")
    if not data:
        return Fallback("empty")
    return Ok(data)


def decode_reflections(text: Union[str, bytes]) -> Outcome:
    """Ok(list of Reflection) or Fallback."""
    loaded = _load_json_array(text)
    if isinstance(loaded, Fallback):
        return loaded
    try:
        payloads = REFLECTION_LIST.validate_python(loaded.value)
    except ValidationError as exc:
        return Fallback(f"invalid_reflection:{exc.error_count()}")
    return Ok([p.to_model() for p in payloads])


def decode_numbers(text: Union[str, bytes]) -> Outcome:
    """Ok(list of float) or Fallback."""
    loaded = _load_json_array(text)
    if isinstance(loaded, Fallback):
        return loaded
    try:
        values = NUMBER_LIST.validate_python(loaded.value)
    except ValidationError as exc:
        return Fallback(f"invalid_number:{exc.error_count()}")
    return Ok([float(v) for v in values])


# -------------------------
# Encoding
# -------------------------

def _scrub(obj: Any) -> Any:
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, dict):
        return {k: _scrub(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_scrub(v) for v in obj]
    return obj


def encode(obj: Any) -> str:
    return json.dumps(_scrub(obj), ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def _run(
    operation: str,
    outcome: Outcome,
    compute: Callable[[Any], Any],
    default: Any,
) -> str:
    started = monotonic_ms()
    if isinstance(outcome, Fallback):
        log_event(logger, "analytics_fallback", operation=operation, reason=outcome.reason)
        return encode(default)

    result = compute(outcome.value)
    body = result.to_dict() if hasattr(result, "to_dict") else [r.to_dict() for r in result]
    log_event(
        logger,
        "analytics_computed",
        operation=operation,
        n_input=len(outcome.value),
        n_output=_output_size(body),
        elapsed_ms=elapsed_ms(started),
    )
    return encode(body)


def _output_size(body: Any) -> int:
    if isinstance(body, list):
        return len(body)
    if isinstance(body, dict):
        return sum(len(v) for v in body.values() if isinstance(v, (list, dict)))
    return 0


# -------------------------
# Public operations
# -------------------------

def calculate_time_patterns(text: Union[str, bytes]) -> str:
    return _run("time_patterns", decode_reflections(text), compute_time_patterns, EMPTY_TIME_PATTERNS)


def calculate_co_occurrence(text: Union[str, bytes]) -> str:
    return _run("co_occurrence", decode_reflections(text), compute_co_occurrence, EMPTY_CO_OCCURRENCE)


def calculate_trends(text: Union[str, bytes]) -> str:
    return _run("trends", decode_reflections(text), compute_trends, EMPTY_TRENDS)


def calculate_statistics(text: Union[str, bytes]) -> str:
    return _run("statistics", decode_numbers(text), compute_statistics, EMPTY_STATISTICS)

