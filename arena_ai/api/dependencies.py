"""FastAPI dependency injection — provides the PolicyRegistry and service config."""

from __future__ import annotations

from arena_ai.config import ServiceConfig
from arena_ai.engine.registry import PolicyRegistry

_registry: PolicyRegistry | None = None
_service_config: ServiceConfig | None = None


def set_registry(registry: PolicyRegistry | None, config: ServiceConfig | None = None) -> None:
    global _registry, _service_config
    _registry = registry
    _service_config = config


def get_registry() -> PolicyRegistry:
    if _registry is None:
        raise RuntimeError("PolicyRegistry not initialized — server not started correctly.")
    return _registry


def get_service_config() -> ServiceConfig:
    return _service_config or ServiceConfig()
