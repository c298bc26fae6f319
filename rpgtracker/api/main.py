"""
rpgtracker.api.main — FastAPI application entry point
======================================================

Run with::

    uvicorn rpgtracker.api.main:app --reload --port 8000

or ``python -m rpgtracker``.  OpenAPI docs are served at ``/docs``.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from rpgtracker import __version__  # noqa: E402
from rpgtracker.api.deps import get_config, get_engine  # noqa: E402
from rpgtracker.api.routes.rpg import router as rpg_router  # noqa: E402
from rpgtracker.database.engine import init_db  # noqa: E402

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    """Resolve allowed CORS origins from env with safe defaults.

    Priority:
      1) CORS_ALLOW_ORIGINS (comma-separated)
      2) FRONTEND_URL (single origin)
    """
    raw = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
    if raw:
        return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]

    frontend_url = os.getenv("FRONTEND_URL", "").strip()
    if frontend_url:
        return [frontend_url.rstrip("/")]

    return []


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle — make sure the schema exists."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    init_db(engine, seed_demo_user=get_config().seed_demo_user)
    logger.info("RPG API started — engine ready (%s)", engine.url.database)
    yield
    logger.info("RPG API shutting down")


app = FastAPI(
    title=get_config().app_title,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(rpg_router)


@app.get("/health")
def health():
    return {"status": "ok"}
