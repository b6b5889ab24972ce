"""FastAPI application entry point.

Usage:
    python -m rescisao.main

Serves the calculator API and a health check.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rescisao.api.routes import router as calculator_router
from rescisao.config import settings

# ── Logging setup ────────────────────────────────────────────────────

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = logging.getLogger(__name__)

# ── FastAPI lifespan ─────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle."""
    logger.info("Starting Rescisão API (env=%s)", settings.environment)
    if not settings.security.api_keys:
        logger.warning("CALCULATOR_API_KEYS not set, calculator routes will answer 503")
    else:
        logger.info("Calculator API keys loaded for %d platform(s)", len(settings.security.api_keys))
    yield
    logger.info("Rescisão API shutdown complete")


# ── FastAPI app ──────────────────────────────────────────────────────

app = FastAPI(
    title="Rescisão API",
    description="CLT termination settlement calculator",
    version="0.1.0",
    lifespan=lifespan,
)

if settings.api.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_methods=["POST"],
        allow_headers=["*"],
    )

app.include_router(calculator_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "environment": settings.environment,
    }


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    uvicorn.run(
        "rescisao.main:app",
        host=settings.api.api_host,
        port=settings.api.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
