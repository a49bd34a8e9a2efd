"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from arena_ai.api.dependencies import set_registry
from arena_ai.api.routes import api_router
from arena_ai.config import ServiceConfig
from arena_ai.engine.registry import PolicyRegistry
from arena_ai.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: ServiceConfig | None = None, configure_logging: bool = True) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = ServiceConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if configure_logging:
            setup_logging(_config.log_level, access_log=_config.access_log)
        registry = PolicyRegistry()
        set_registry(registry, _config)
        logger.info("Decision service started (seed=%d).", _config.seed)
        yield
        registry.clear()
        set_registry(None)
        logger.info("Decision service shutting down.")

    app = FastAPI(
        title="Arena AI Decision Service",
        description=(
            "Per-tick combat policy for a top-down projectile arena.\n\n"
            "## API Groups\n\n"
            "- **Bots** — Register policy instances and request one action per tick\n"
            "- **Config** — Read-only default policy configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Bots", "description": "Policy registration, per-tick decisions, memory reset, and decision traces."},
            {"name": "Config", "description": "Default thresholds applied to newly registered policies."},
        ],
    )

    # CORS: the arena host runs in a browser on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
