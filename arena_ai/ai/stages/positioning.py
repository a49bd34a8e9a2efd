"""Positional arbitration — keep the target inside the kiting band.

Too close or too far: walk straight at the target.  Inside the band, hold
still if the target is already inside the forward firing arc, otherwise
sidestep perpendicular to it to swing the arc around.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from arena_ai.ai.perception import Perception
from arena_ai.ai.stages.base import PolicyStage
from arena_ai.core.enums import Domain, TraceCategory

if TYPE_CHECKING:
    from arena_ai.ai.context import DecisionContext


class PositioningStage(PolicyStage):

    __slots__ = ()

    @property
    def name(self) -> str:
        return "positioning"

    def run(self, ctx: DecisionContext) -> None:
        target = ctx.target
        if target is None or ctx.draft.move_heading is not None:
            return

        snap = ctx.snapshot
        cfg = ctx.config
        dist = ctx.target_distance
        effective_range = snap.me.range
        move_bearing = snap.direction_to(target.pos.x, target.pos.y)

        if dist < effective_range * cfg.close_range_ratio:
            ctx.draft.move_heading = move_bearing
            ctx.note(TraceCategory.ADVANCE, f"closing in at {dist:.0f}px")
            return
        if dist > effective_range * cfg.far_range_ratio:
            ctx.draft.move_heading = move_bearing
            ctx.note(TraceCategory.ADVANCE, f"re-entering range from {dist:.0f}px")
            return

        aim_bearing = snap.shoot_at(target.pos.x, target.pos.y)
        if Perception.within_arc(aim_bearing, ctx.memory.last_facing_heading, cfg.firing_half_arc):
            ctx.note(TraceCategory.HOLD, f"holding at {dist:.0f}px")
            return

        left = ctx.rng.next_bool(Domain.REPOSITION, ctx.agent_id, ctx.tick)
        side = math.pi / 2 if left else -math.pi / 2
        ctx.draft.move_heading = Perception.normalize_angle(move_bearing + side)
        ctx.note(TraceCategory.REPOSITION, "sidestep to bring target into arc")
