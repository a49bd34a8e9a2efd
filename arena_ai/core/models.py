"""Core data models: Vector2, StatBlock, and the per-tick world summaries."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from arena_ai.core.enums import ShootingState


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D float coordinate in arena pixels (+y points down)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> Vector2:
        return Vector2(self.x * k, self.y * k)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Heading of this vector in radians (``atan2(y, x)``)."""
        return math.atan2(self.y, self.x)

    def distance(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def bearing_to(self, other: Vector2) -> float:
        return math.atan2(other.y - self.y, other.x - self.x)

    def advance(self, heading: float, distance: float) -> Vector2:
        """Point reached by travelling *distance* along *heading*."""
        return Vector2(
            self.x + math.cos(heading) * distance,
            self.y + math.sin(heading) * distance,
        )

    @classmethod
    def from_angle(cls, heading: float, length: float = 1.0) -> Vector2:
        return cls(math.cos(heading) * length, math.sin(heading) * length)

    def __repr__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"


@dataclass(frozen=True, slots=True)
class StatBlock:
    """Stat tiers (1-10) chosen on the host's configuration page."""

    speed: int = 5
    strength: int = 5
    health: int = 5
    range: int = 5


@dataclass(frozen=True, slots=True)
class SelfState:
    """Our own robot as reported by the host."""

    pos: Vector2
    hp: float = 100.0
    stats: StatBlock = field(default_factory=StatBlock)
    range: float = 300.0                    # effective shooting range in pixels
    can_shoot: bool = True
    can_shield: bool = True
    shooting_state: ShootingState = ShootingState.IDLE

    @property
    def busy(self) -> bool:
        return self.shooting_state.busy


@dataclass(frozen=True, slots=True)
class EnemyInfo:
    """Summary of one opponent robot."""

    pos: Vector2
    hp: float = 100.0
    stats: StatBlock = field(default_factory=StatBlock)


@dataclass(frozen=True, slots=True)
class BulletInfo:
    """Summary of one projectile in flight."""

    pos: Vector2
    velocity: Vector2
    speed: float = 0.0
    damage: float = 0.0
    max_range: float = 0.0
    traveled_distance: float = 0.0
    life: float = 0.0

    @property
    def heading(self) -> float:
        return self.velocity.angle

    def effective_speed(self, epsilon: float) -> float:
        """Reported speed when positive, else |velocity|, floored to *epsilon*."""
        if self.speed > 0:
            return self.speed
        return max(self.velocity.length, epsilon)


@dataclass(frozen=True, slots=True)
class ArenaBounds:
    """Axis-aligned arena rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 800.0
    height: float = 600.0

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Vector2, margin: float = 0.0) -> bool:
        """True if *point* lies strictly inside the rectangle inset by *margin*."""
        return (
            self.x + margin < point.x < self.x + self.width - margin
            and self.y + margin < point.y < self.y + self.height - margin
        )
