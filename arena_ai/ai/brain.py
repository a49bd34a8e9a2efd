"""ArenaPolicy — per-tick decision engine for one robot.

Runs the stage pipeline (evasion → targeting → positioning → engagement)
over a fresh ``DecisionContext`` and returns one ``ActionDraft``.  The only
state that survives between ticks is ``AgentMemory.last_facing_heading``,
written after the pipeline finishes.

The call is total: a failure anywhere in the pipeline is logged and turned
into the safe default action (hold, hold fire, no shield).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from arena_ai.actions.base import ActionDraft
from arena_ai.ai.context import AgentMemory, DecisionContext
from arena_ai.ai.stages import build_pipeline
from arena_ai.config import PolicyConfig
from arena_ai.core.enums import TraceCategory
from arena_ai.systems.rng import DeterministicRNG
from arena_ai.utils.event_log import DecisionEvent

if TYPE_CHECKING:
    from arena_ai.ai.stages import PolicyStage
    from arena_ai.core.snapshot import WorldSnapshot
    from arena_ai.systems.rng import RandomSource
    from arena_ai.utils.event_log import DecisionLog

logger = logging.getLogger(__name__)


class ArenaPolicy:
    """One robot's decision policy.

    Usage::

        policy = ArenaPolicy(rng=DeterministicRNG(7), agent_id=1)
        action = policy(snapshot)          # same as policy.decide(snapshot)
    """

    __slots__ = ("_config", "_rng", "_agent_id", "_stages", "_memory", "_trace")

    def __init__(
        self,
        config: PolicyConfig | None = None,
        rng: RandomSource | None = None,
        agent_id: int = 0,
        stages: Sequence[PolicyStage] | None = None,
        trace: DecisionLog | None = None,
    ) -> None:
        self._config = config or PolicyConfig()
        self._rng = rng if rng is not None else DeterministicRNG(0)
        self._agent_id = agent_id
        self._stages = tuple(stages) if stages is not None else build_pipeline()
        self._memory = AgentMemory()
        self._trace = trace

    # -- public properties --

    @property
    def config(self) -> PolicyConfig:
        return self._config

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def agent_id(self) -> int:
        return self._agent_id

    @property
    def memory(self) -> AgentMemory:
        return self._memory

    @property
    def stages(self) -> tuple[PolicyStage, ...]:
        return self._stages

    @property
    def trace(self) -> DecisionLog | None:
        return self._trace

    # -- lifecycle --

    def reset(self) -> None:
        """Forget carried state before a new match."""
        self._memory.reset()
        if self._trace is not None:
            self._trace.clear()

    # -- decision --

    def decide(self, snapshot: WorldSnapshot) -> ActionDraft:
        """Run the pipeline for one tick and return the action."""
        ctx = DecisionContext(
            snapshot=snapshot,
            config=self._config,
            memory=self._memory,
            rng=self._rng,
            agent_id=self._agent_id,
        )
        try:
            for stage in self._stages:
                stage.run(ctx)
            action = ctx.draft.sanitized()
        except Exception:
            logger.exception("Policy failed for agent %d at tick %d, holding", self._agent_id, snapshot.tick)
            self._record([DecisionEvent(snapshot.tick, TraceCategory.FAULT, "pipeline error, safe default")])
            return ActionDraft()

        if action.move_heading is not None:
            self._memory.last_facing_heading = action.move_heading

        self._record(ctx.events)
        logger.debug("Tick %d: agent %d -> %r", snapshot.tick, self._agent_id, action)
        return action

    __call__ = decide

    def _record(self, events: list[DecisionEvent]) -> None:
        if self._trace is not None and events:
            self._trace.append_many(events)
