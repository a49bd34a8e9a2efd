"""Threat assessment — project each bullet's straight-line flight onto us.

For every bullet the vector from the bullet to our robot is split into a
component along the bullet's direction of travel (``along``) and a
perpendicular remainder (``perp_dist``, the miss distance if nobody moves).
Bullets with ``along <= 0`` have already passed or are flying away.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from arena_ai.core.models import Vector2

if TYPE_CHECKING:
    from arena_ai.config import PolicyConfig
    from arena_ai.core.models import BulletInfo, SelfState


@dataclass(frozen=True, slots=True)
class ThreatAssessment:
    """How dangerous one bullet is this tick (lower score = worse)."""

    bullet: BulletInfo
    along: float
    perp_dist: float
    tti: float
    heading: float
    score: float


def assess_bullet(bullet: BulletInfo, origin: Vector2, config: PolicyConfig) -> ThreatAssessment | None:
    """Assess a single bullet against *origin*; ``None`` if it is not incoming."""
    eps = config.epsilon
    norm = max(bullet.velocity.length, eps)
    direction = bullet.velocity.scale(1.0 / norm)
    rel = origin - bullet.pos
    along = rel.dot(direction)
    if along <= 0:
        return None

    perp = rel - direction.scale(along)
    perp_dist = perp.length
    tti = along / bullet.effective_speed(eps)
    return ThreatAssessment(
        bullet=bullet,
        along=along,
        perp_dist=perp_dist,
        tti=tti,
        heading=bullet.heading,
        score=perp_dist + config.tti_weight * tti,
    )


def assess_threats(
    bullets: Iterable[BulletInfo],
    origin: Vector2,
    config: PolicyConfig,
) -> list[ThreatAssessment]:
    """Assess all bullets and return incoming ones, most dangerous first.

    The sort is stable, so equal scores keep the host's bullet order.
    """
    threats = []
    for bullet in bullets:
        t = assess_bullet(bullet, origin, config)
        if t is not None:
            threats.append(t)
    threats.sort(key=lambda t: t.score)
    return threats


def primary_threat(
    threats: Iterable[ThreatAssessment],
    me: SelfState,
    config: PolicyConfig,
) -> ThreatAssessment | None:
    """First ranked threat that is both close enough and soon enough to dodge."""
    radius = config.dodge_radius(me.stats.speed)
    budget = config.time_budget(me.stats.speed)
    for t in threats:
        if t.perp_dist < radius and t.tti < budget:
            return t
    return None
