"""Enumerations used throughout the policy."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class ShootingState(str, Enum):
    """Weapon animation phase reported by the host."""

    IDLE = "idle"
    PREPARING = "preparing"
    SHOOTING = "shooting"
    RECOVERING = "recovering"

    @property
    def busy(self) -> bool:
        """Movement is locked for every phase except IDLE."""
        return self is not ShootingState.IDLE


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    REPOSITION = 0
    SCENARIO = 1


@unique
class TraceCategory(str, Enum):
    """Kinds of entries written to a policy's decision trace."""

    EVADE = "evade"
    SHIELD = "shield"
    TARGET = "target"
    ADVANCE = "advance"
    REPOSITION = "reposition"
    HOLD = "hold"
    FIRE = "fire"
    LOCK = "lock"
    FAULT = "fault"
