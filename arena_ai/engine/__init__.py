"""Host-facing layer: policy registration."""

from arena_ai.engine.registry import PolicyRegistry, RegisteredPolicy

__all__ = ["PolicyRegistry", "RegisteredPolicy"]
