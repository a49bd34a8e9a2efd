"""AI layer: perception, threat assessment, stage pipeline, and the policy."""

from arena_ai.ai.brain import ArenaPolicy
from arena_ai.ai.context import AgentMemory, DecisionContext
from arena_ai.ai.perception import Perception

__all__ = ["AgentMemory", "ArenaPolicy", "DecisionContext", "Perception"]
