"""Thread-safe ring buffer of per-tick policy decisions exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from arena_ai.core.enums import TraceCategory


@dataclass(frozen=True, slots=True)
class DecisionEvent:
    """One thing a pipeline stage did on one tick."""

    tick: int
    category: TraceCategory
    message: str


class DecisionLog:
    """Bounded decision trace. The policy appends; readers snapshot a slice.

    Oldest events fall off once *capacity* is reached.
    Thread-safe via a simple lock; writes happen once per tick and reads
    are non-blocking copies.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, capacity: int = 256) -> None:
        self._buffer: deque[DecisionEvent] = deque(maxlen=max(1, capacity))
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def append_many(self, events: list[DecisionEvent]) -> None:
        with self._lock:
            self._buffer.extend(events)

    def since_tick(self, tick: int) -> list[DecisionEvent]:
        """Return all events with tick >= *tick*."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def latest(self, count: int = 50) -> list[DecisionEvent]:
        """Return the *count* most recent events."""
        if count <= 0:
            return []
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
