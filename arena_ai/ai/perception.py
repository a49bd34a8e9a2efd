"""Perception helpers — angle math, firing-arc checks, target selection.

All methods are stateless and operate on immutable snapshots.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from arena_ai.core.models import EnemyInfo, Vector2

TWO_PI = 2.0 * math.pi


class Perception:
    """Stateless perception utilities."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Angles
    # ------------------------------------------------------------------

    @staticmethod
    def normalize_angle(a: float) -> float:
        """Wrap *a* into [-pi, pi]."""
        if not math.isfinite(a):
            return 0.0
        a = math.fmod(a, TWO_PI)
        if a > math.pi:
            a -= TWO_PI
        elif a < -math.pi:
            a += TWO_PI
        return a

    @staticmethod
    def angle_between(a: float, b: float) -> float:
        """Absolute angular difference between two headings, in [0, pi]."""
        return abs(Perception.normalize_angle(a - b))

    @staticmethod
    def within_arc(bearing: float, facing: float | None, half_arc: float) -> bool:
        """True if *bearing* lies within *half_arc* of *facing*.

        With no recorded facing every bearing is permitted.
        """
        if facing is None:
            return True
        return Perception.angle_between(bearing, facing) <= half_arc

    # ------------------------------------------------------------------
    # Target selection
    # ------------------------------------------------------------------

    @staticmethod
    def nearest_enemy(origin: Vector2, enemies: Sequence[EnemyInfo]) -> tuple[EnemyInfo | None, float]:
        """Return the closest enemy and its distance.

        Ties keep the first-encountered enemy, so the choice is stable for an
        unchanged list.  Returns ``(None, inf)`` when there are no enemies.
        """
        best: EnemyInfo | None = None
        best_dist = math.inf
        for enemy in enemies:
            d = origin.distance(enemy.pos)
            if d < best_dist:
                best, best_dist = enemy, d
        return best, best_dist
