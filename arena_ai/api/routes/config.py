"""GET /api/v1/config — expose the default policy configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from arena_ai.api.dependencies import get_service_config
from arena_ai.api.schemas import PolicyConfigSchema, ServiceConfigResponse
from arena_ai.config import ServiceConfig

router = APIRouter()


@router.get("/config", response_model=ServiceConfigResponse)
def get_config(service: ServiceConfig = Depends(get_service_config)) -> ServiceConfigResponse:
    return ServiceConfigResponse(
        seed=service.seed,
        trace_capacity=service.trace_capacity,
        policy=PolicyConfigSchema.from_config(service.policy),
    )
