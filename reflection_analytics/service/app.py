# -*- coding: utf-8 -*-
"""
Reflection Analytics API
------------------------
- POST /analytics/*  : time patterns, co-occurrence, trends, statistics
- GET  /healthz      : health check
Notes:
- Stateless: every call recomputes from the full request body
- Does NOT persist user content
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api_analytics import register_analytics_routes

APP_NAME = os.getenv("ANALYTICS_APP_NAME", "Reflection Analytics")
HOST = os.getenv("ANALYTICS_HOST", "0.0.0.0")
try:
    PORT = int(os.getenv("ANALYTICS_PORT", "8780") or "8780")
except Exception:
    PORT = 8780
LOG_LEVEL = (os.getenv("ANALYTICS_LOG_LEVEL", "INFO") or "INFO").strip().upper()
# For release, set ANALYTICS_CORS_ORIGINS to a comma-separated list of allowed origins.
ALLOWED_ORIGINS_RAW = os.getenv("ANALYTICS_CORS_ORIGINS", "*")
ALLOWED_ORIGINS = [o.strip() for o in ALLOWED_ORIGINS_RAW.split(",") if o.strip()] if ALLOWED_ORIGINS_RAW else ["*"]

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("analytics")

# ---------- App ----------
app = FastAPI(title=APP_NAME, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_analytics_routes(app)


@app.get("/healthz")
def healthz() -> Dict[str, Any]:
    return {"status": "ok", "app": APP_NAME}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("reflection_analytics.service.app:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
