"""Decision pipeline stages.

The policy runs ``STAGE_ORDER`` once per tick over a shared ``DecisionContext``.
"""

from arena_ai.ai.stages.base import PolicyStage
from arena_ai.ai.stages.engagement import EngagementStage
from arena_ai.ai.stages.evasion import EvasionStage
from arena_ai.ai.stages.positioning import PositioningStage
from arena_ai.ai.stages.registry import STAGE_ORDER, STAGE_REGISTRY, build_pipeline, register_stage
from arena_ai.ai.stages.targeting import TargetingStage

__all__ = [
    "EngagementStage",
    "EvasionStage",
    "PolicyStage",
    "PositioningStage",
    "STAGE_ORDER",
    "STAGE_REGISTRY",
    "TargetingStage",
    "build_pipeline",
    "register_stage",
]
