"""Per-tick decision context and the policy's carried memory."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from arena_ai.actions.base import ActionDraft
from arena_ai.core.enums import TraceCategory
from arena_ai.utils.event_log import DecisionEvent

if TYPE_CHECKING:
    from arena_ai.config import PolicyConfig
    from arena_ai.core.models import EnemyInfo
    from arena_ai.core.snapshot import WorldSnapshot
    from arena_ai.systems.rng import RandomSource


@dataclass(slots=True)
class AgentMemory:
    """State a policy instance carries from one tick to the next.

    Lives for one match; only the owning policy writes it, at the end of a tick.
    """

    last_facing_heading: float | None = None

    def reset(self) -> None:
        self.last_facing_heading = None


@dataclass(slots=True)
class DecisionContext:
    """All data a pipeline stage might need for one tick.

    Stages communicate only through ``draft`` and the target fields filled in
    by target acquisition; nothing here outlives the tick except ``memory``.
    """

    snapshot: WorldSnapshot
    config: PolicyConfig
    memory: AgentMemory
    rng: RandomSource
    agent_id: int = 0
    draft: ActionDraft = field(default_factory=ActionDraft)

    target: EnemyInfo | None = None
    target_distance: float = math.inf
    events: list[DecisionEvent] = field(default_factory=list)

    @property
    def tick(self) -> int:
        return self.snapshot.tick

    def note(self, category: TraceCategory, message: str) -> None:
        self.events.append(DecisionEvent(self.snapshot.tick, category, message))
