# -*- coding: utf-8 -*-
"""Reflection Analytics API
---------------------------
- POST /analytics/time-patterns : dayOfWeek / timeOfDay / month patterns
- POST /analytics/co-occurrence : top emotion pairs
- POST /analytics/trends        : daily / weekly / monthly series
- POST /analytics/statistics    : mean / median / min / max / percentiles

Design:
- The request body is handed to the boundary as raw text. Malformed or empty
  bodies answer 200 with the hollow default result, never 4xx/5xx.
- Stateless: nothing is stored between requests.
"""

from __future__ import annotations

from typing import Callable, Dict

from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

from ..boundary import (
    calculate_co_occurrence,
    calculate_statistics,
    calculate_time_patterns,
    calculate_trends,
)


ROUTES: Dict[str, Callable[[bytes], str]] = {
    "/analytics/time-patterns": calculate_time_patterns,
    "/analytics/co-occurrence": calculate_co_occurrence,
    "/analytics/trends": calculate_trends,
    "/analytics/statistics": calculate_statistics,
}


def _make_handler(path: str, operation: Callable[[bytes], str]):
    async def handler(request: Request) -> Response:
        body = await request.body()
        # aggregation is CPU-bound; keep it off the event loop
        content = await run_in_threadpool(operation, body)
        return Response(content=content, media_type="application/json")

    handler.__name__ = "analytics_" + path.rsplit("/", 1)[-1].replace("-", "_")
    return handler


def register_analytics_routes(app: FastAPI) -> None:
    """Attach /analytics/* to the FastAPI app."""
    for path, operation in ROUTES.items():
        app.add_api_route(path, _make_handler(path, operation), methods=["POST"])
