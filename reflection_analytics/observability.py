# -*- coding: utf-8 -*-
"""observability.py

Structured event logging for the analytics surface
--------------------------------------------------

Purpose
- Every boundary call leaves one line saying which operation ran, on how many
  records, what it produced and how long it took.
- Fallbacks (bad JSON, empty input) are logged with their reason so that a
  host sending malformed payloads is visible without failing the host.

Policy
- logging receives a JSON string so log platforms can filter on fields.
- Record contents (emotion ids, names, notes) are never logged; counts only.
- Logging failures never propagate to the caller.

Environment
- OBS_LOG_JSON=true/false (default true)
"""

from __future__ import annotations

import json
import logging
import os
import time
from datetime import datetime, timezone
from typing import Any, Dict


OBS_LOG_JSON = (os.getenv("OBS_LOG_JSON", "true").strip().lower() != "false")


def _utc_stamp() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _render(event: str, fields: Dict[str, Any]) -> str:
    payload: Dict[str, Any] = {"ts": _utc_stamp(), "event": event}
    payload.update(fields)
    if not OBS_LOG_JSON:
        return f"{event} {payload}"
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=repr)


def log_event(logger: logging.Logger, event: str, *, level: str = "info", **fields: Any) -> None:
    """One line per analytics event: operation name, sizes and timings only.

    level is a logging method name (debug|info|warning|error); unknown names log at info.
    """
    emit = getattr(logger, level, None)
    if not callable(emit):
        emit = logger.info
    try:
        emit(_render(event, fields))
    except Exception:
        # a broken handler must not take down the calculation
        pass


# ----------------------------
# Timing
# ----------------------------

def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def elapsed_ms(start_ms: Any) -> int:
    """Whole milliseconds since start_ms; 0 when start_ms is unusable."""
    try:
        return max(0, int(monotonic_ms() - float(start_ms)))
    except (TypeError, ValueError):
        return 0
