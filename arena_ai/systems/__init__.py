"""Policy support systems: deterministic randomness."""

from arena_ai.systems.rng import DeterministicRNG, RandomSource

__all__ = ["DeterministicRNG", "RandomSource"]
