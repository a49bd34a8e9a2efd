"""PolicyRegistry — the host-side roster of policy instances for a match.

The host registers zero or more policies before a match starts, then asks
each one for an action every tick.  Each entry carries its own lock so one
policy never runs two ticks at once when the registry is shared between
request threads.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arena_ai.actions.base import ActionDraft
    from arena_ai.ai.brain import ArenaPolicy
    from arena_ai.core.snapshot import WorldSnapshot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RegisteredPolicy:
    """A policy plus the bookkeeping the host keeps about it."""

    bot_id: int
    name: str
    policy: ArenaPolicy
    ticks_decided: int = 0
    last_tick: int | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def act(self, snapshot: WorldSnapshot) -> ActionDraft:
        with self.lock:
            action = self.policy.decide(snapshot)
            self.ticks_decided += 1
            self.last_tick = snapshot.tick
        return action

    def reset(self) -> None:
        with self.lock:
            self.policy.reset()
            self.ticks_decided = 0
            self.last_tick = None


class PolicyRegistry:
    """Thread-safe id → policy map.

    Lookups of unknown ids raise ``KeyError``; callers map that to their own
    error surface.
    """

    __slots__ = ("_entries", "_ids", "_lock")

    def __init__(self) -> None:
        self._entries: dict[int, RegisteredPolicy] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, bot_id: object) -> bool:
        with self._lock:
            return bot_id in self._entries

    def next_id(self) -> int:
        """Reserve an id, e.g. to seed a policy before registering it."""
        with self._lock:
            return next(self._ids)

    def register(self, policy: ArenaPolicy, name: str = "", bot_id: int | None = None) -> RegisteredPolicy:
        with self._lock:
            if bot_id is None:
                bot_id = next(self._ids)
            elif bot_id in self._entries:
                raise ValueError(f"Bot id {bot_id} already registered")
            entry = RegisteredPolicy(bot_id=bot_id, name=name or f"bot-{bot_id}", policy=policy)
            self._entries[bot_id] = entry
        logger.info("Registered policy %r as bot %d", entry.name, bot_id)
        return entry

    def get(self, bot_id: int) -> RegisteredPolicy:
        with self._lock:
            return self._entries[bot_id]

    def remove(self, bot_id: int) -> RegisteredPolicy:
        with self._lock:
            entry = self._entries.pop(bot_id)
        logger.info("Removed bot %d (%r)", bot_id, entry.name)
        return entry

    def entries(self) -> list[RegisteredPolicy]:
        """Registered policies in registration order."""
        with self._lock:
            return list(self._entries.values())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
