"""Immutable snapshot of the world handed to the policy once per tick."""

from __future__ import annotations

from dataclasses import dataclass

from arena_ai.core.models import ArenaBounds, BulletInfo, EnemyInfo, SelfState, Vector2


@dataclass(frozen=True, slots=True)
class WorldSnapshot:
    """Read-only view of one tick.

    Sequences are tuples and every model is frozen, so the policy can read
    freely and any attempt to mutate raises instead of leaking into the host.

    The ``distance_to`` / ``direction_to`` / ``shoot_at`` /
    ``direction_away_from`` helpers mirror the ones the arena host injects
    into its world object, using the same ``atan2(dy, dx)`` convention.
    """

    tick: int
    me: SelfState
    enemies: tuple[EnemyInfo, ...] = ()
    bullets: tuple[BulletInfo, ...] = ()
    arena: ArenaBounds = ArenaBounds()

    def distance_to(self, x: float, y: float) -> float:
        return self.me.pos.distance(Vector2(x, y))

    def direction_to(self, x: float, y: float) -> float:
        """Movement heading toward ``(x, y)``."""
        return self.me.pos.bearing_to(Vector2(x, y))

    def shoot_at(self, x: float, y: float) -> float:
        """Aim heading toward ``(x, y)``.  No projectile lead is applied."""
        return self.me.pos.bearing_to(Vector2(x, y))

    def direction_away_from(self, x: float, y: float) -> float:
        return Vector2(x, y).bearing_to(self.me.pos)
