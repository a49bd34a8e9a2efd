"""Threat assessment & evasion — dodge the most dangerous incoming bullet."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from arena_ai.ai.escape import best_escape
from arena_ai.ai.stages.base import PolicyStage
from arena_ai.ai.threats import assess_threats, primary_threat
from arena_ai.core.enums import TraceCategory

if TYPE_CHECKING:
    from arena_ai.ai.context import DecisionContext

logger = logging.getLogger(__name__)


class EvasionStage(PolicyStage):
    """Set an escape heading, and the shield when impact is imminent.

    Leaves the draft untouched when nothing needs dodging or every escape
    heading runs into a wall.
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return "evasion"

    def run(self, ctx: DecisionContext) -> None:
        snap = ctx.snapshot
        if not snap.bullets:
            return

        me = snap.me
        cfg = ctx.config
        threats = assess_threats(snap.bullets, me.pos, cfg)
        primary = primary_threat(threats, me, cfg)
        if primary is None:
            return

        escape = best_escape(primary, threats, me.pos, me.stats.speed, snap.arena, cfg)
        if escape is None:
            logger.debug("Tick %d: agent %d boxed in, no wall-safe escape", ctx.tick, ctx.agent_id)
            return

        ctx.draft.move_heading = escape.heading
        ctx.note(
            TraceCategory.EVADE,
            f"dodge {math.degrees(escape.heading):.0f}deg "
            f"(perp={primary.perp_dist:.1f}, tti={primary.tti:.1f}, threats={len(threats)})",
        )

        if me.can_shield and primary.tti < cfg.emergency_tti:
            ctx.draft.shield_active = True
            ctx.note(TraceCategory.SHIELD, f"shield up, impact in {primary.tti:.1f}")
