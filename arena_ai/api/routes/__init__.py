"""Versioned API route modules."""

from fastapi import APIRouter

from arena_ai.api.routes.bots import router as bots_router
from arena_ai.api.routes.config import router as config_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(bots_router, tags=["Bots"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
