"""Target acquisition — nearest enemy, first-encountered on ties."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arena_ai.ai.perception import Perception
from arena_ai.ai.stages.base import PolicyStage
from arena_ai.core.enums import TraceCategory

if TYPE_CHECKING:
    from arena_ai.ai.context import DecisionContext


class TargetingStage(PolicyStage):

    __slots__ = ()

    @property
    def name(self) -> str:
        return "targeting"

    def run(self, ctx: DecisionContext) -> None:
        snap = ctx.snapshot
        target, dist = Perception.nearest_enemy(snap.me.pos, snap.enemies)
        ctx.target = target
        ctx.target_distance = dist
        if target is not None:
            ctx.note(TraceCategory.TARGET, f"target at {target.pos} ({dist:.0f}px)")
