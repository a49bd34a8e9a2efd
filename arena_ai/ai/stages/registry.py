"""Stage registration and pipeline assembly.

``STAGE_ORDER`` is the canonical order; ``build_pipeline()`` instantiates it.
To add a custom stage, call ``register_stage()`` and pass an explicit order.
"""

from __future__ import annotations

from typing import Iterable

from arena_ai.ai.stages.base import PolicyStage
from arena_ai.ai.stages.engagement import EngagementStage
from arena_ai.ai.stages.evasion import EvasionStage
from arena_ai.ai.stages.positioning import PositioningStage
from arena_ai.ai.stages.targeting import TargetingStage

STAGE_ORDER: tuple[str, ...] = ("evasion", "targeting", "positioning", "engagement")

STAGE_REGISTRY: dict[str, type[PolicyStage]] = {
    "evasion": EvasionStage,
    "targeting": TargetingStage,
    "positioning": PositioningStage,
    "engagement": EngagementStage,
}


def register_stage(name: str, stage_cls: type[PolicyStage]) -> type[PolicyStage]:
    """Register *stage_cls* under *name* (names are unique)."""
    if name in STAGE_REGISTRY and STAGE_REGISTRY[name] is not stage_cls:
        raise ValueError(f"Stage {name!r} already registered as {STAGE_REGISTRY[name].__name__}")
    STAGE_REGISTRY[name] = stage_cls
    return stage_cls


def build_pipeline(order: Iterable[str] = STAGE_ORDER) -> tuple[PolicyStage, ...]:
    """Instantiate the stages named in *order*.

    Raises:
        KeyError: if a name is not registered.
    """
    return tuple(STAGE_REGISTRY[name]() for name in order)
