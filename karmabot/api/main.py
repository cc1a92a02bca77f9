"""
karmabot.api.main — FastAPI application entry point
====================================================

Run with::

    uvicorn karmabot.api.main:app --port 8000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

load_dotenv()

from karmabot.api.deps import get_engine  # noqa: E402
from karmabot.api.routes.karma import router as karma_router  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle — warm the DB engine."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    logger.info("Karmabot API started — engine ready (%s)", engine.url.database)
    yield
    logger.info("Karmabot API shutting down")


app = FastAPI(
    title="Karmabot API",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(karma_router, prefix="/api")


@app.get("/api/health")
def health():
    return {"status": "ok"}
