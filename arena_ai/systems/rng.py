"""Domain-separated deterministic RNG using xxhash.

A policy's only random choice (which side to sidestep when repositioning)
must be reproducible in tests and replays, so randomness is a pure function
of the inputs instead of an ambient generator:

Formula: RNG_Value = Hash(Seed, Domain, EntityID, Tick)
"""

from __future__ import annotations

import struct
from typing import Protocol, runtime_checkable

import xxhash

from arena_ai.core.enums import Domain


@runtime_checkable
class RandomSource(Protocol):
    """Anything the policy can draw a coin flip from."""

    def next_bool(self, domain: Domain, entity_id: int, tick: int, probability: float = 0.5) -> bool:
        ...


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, entity_id, tick) with
    no internal mutable state, therefore fully thread-safe.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, entity_id: int, tick: int) -> int:
        # Two's-complement wrap to 64 bits; same bytes as "<q" for in-range values
        m = self._MAX_UINT64
        payload = struct.pack("<QiQQ", self._seed & m, domain.value, entity_id & m, tick & m)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, entity_id: int, tick: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, entity_id, tick) / (self._MAX_UINT64 + 1)

    def next_range(self, domain: Domain, entity_id: int, tick: int, low: float, high: float) -> float:
        """Return a deterministic float in [low, high)."""
        return low + self.next_float(domain, entity_id, tick) * (high - low)

    def next_bool(self, domain: Domain, entity_id: int, tick: int, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, entity_id, tick) < probability
