# -*- coding: utf-8 -*-
"""
Fitplan API

Workout and diet plans, per-user meal customization, shopping lists,
progress tracking and subscriptions.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request
from .config import settings
from .foods.api import router as foods_router
from .payments.api import router as payments_router
from .plans.api import router as plans_router
from .profile.api import router as profile_router
from .progress.api import router as progress_router
from .seed import seed_catalogs
from .workouts.api import router as workouts_router

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Fitplan",
    description="Workout and diet plans, meal customization, shopping lists and progress tracking",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _prepare_db() -> None:
    init_app_db(settings.app_db_path)
    if settings.seed_on_startup:
        seed_catalogs()


@app.on_event("startup")
def _startup_init_db() -> None:
    _prepare_db()


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
_prepare_db()


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
    "/api/payments/webhook",
)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            user = get_current_user_from_request(request)
            request.state.user = user
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(plans_router)
app.include_router(progress_router)
app.include_router(foods_router)
app.include_router(workouts_router)
app.include_router(payments_router)


@app.get("/api/health")
def health_check():
    return {
        "status": "ok",
        "version": app.version,
        "timestamp": datetime.now().isoformat(),
    }


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("FITPLAN_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("FITPLAN_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    logger.info("Starting fitplan on %s:%s", host, port)
    uvicorn.run("fitplan.api:app", host=host, port=port, reload=False)
