"""Engagement gate — fire when legal, then apply the animation lock."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from arena_ai.ai.perception import Perception
from arena_ai.ai.stages.base import PolicyStage
from arena_ai.core.enums import TraceCategory

if TYPE_CHECKING:
    from arena_ai.ai.context import DecisionContext


class EngagementStage(PolicyStage):
    """Aim at the target if in range and inside the forward arc.

    The animation lock runs last and unconditionally: while the weapon is
    preparing, shooting or recovering the robot cannot move.
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return "engagement"

    def run(self, ctx: DecisionContext) -> None:
        snap = ctx.snapshot
        me = snap.me
        target = ctx.target

        if target is not None and me.can_shoot and ctx.target_distance <= me.range:
            aim = snap.shoot_at(target.pos.x, target.pos.y)
            if Perception.within_arc(aim, ctx.memory.last_facing_heading, ctx.config.firing_half_arc):
                ctx.draft.aim_heading = aim
                ctx.note(TraceCategory.FIRE, f"fire {math.degrees(aim):.0f}deg")

        if me.busy and ctx.draft.move_heading is not None:
            ctx.draft.move_heading = None
            ctx.note(TraceCategory.LOCK, f"movement locked ({me.shooting_state.value})")
