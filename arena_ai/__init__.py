"""Arena AI — per-tick combat decision policy for a top-down projectile arena."""

from arena_ai.actions.base import ActionDraft
from arena_ai.ai.brain import ArenaPolicy
from arena_ai.config import PolicyConfig, ServiceConfig
from arena_ai.core.snapshot import WorldSnapshot

__all__ = ["ActionDraft", "ArenaPolicy", "PolicyConfig", "ServiceConfig", "WorldSnapshot"]

__version__ = "0.1.0"
