"""Escape-vector sampling and scoring.

Candidates fan out across the arc centred on the primary bullet's heading,
so the two perpendiculars (the fastest way off its line) are always sampled.
A candidate is kept only if a short probe along it stays clear of the walls,
then scored on how far it carries us from the most dangerous bullets, with a
small bonus for heading back toward the middle of the arena.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from arena_ai.ai.perception import Perception

if TYPE_CHECKING:
    from arena_ai.ai.threats import ThreatAssessment
    from arena_ai.config import PolicyConfig
    from arena_ai.core.models import ArenaBounds, Vector2


@dataclass(frozen=True, slots=True)
class EscapeCandidate:
    heading: float
    score: float


def sweep_headings(base: float, config: PolicyConfig) -> list[float]:
    """Evenly spaced headings spanning ``base ± escape_arc / 2`` inclusive."""
    n = config.escape_candidates
    if n <= 0:
        return []
    half = config.escape_arc / 2
    if n == 1:
        return [Perception.normalize_angle(base)]
    step = config.escape_arc / (n - 1)
    return [Perception.normalize_angle(base - half + i * step) for i in range(n)]


def clears_walls(origin: Vector2, heading: float, arena: ArenaBounds, config: PolicyConfig) -> bool:
    """True if the probe point along *heading* stays inside the wall buffer."""
    probe = origin.advance(heading, config.escape_probe_distance)
    return arena.contains(probe, margin=config.wall_buffer)


def score_heading(
    heading: float,
    origin: Vector2,
    threats: Sequence[ThreatAssessment],
    speed_stat: float,
    center_bearing: float,
    config: PolicyConfig,
) -> float:
    clearance = 0.0
    for t in threats:
        future = origin.advance(heading, t.tti * speed_stat * config.projection_scale)
        clearance += future.distance(t.bullet.pos)
    deviation = Perception.angle_between(heading, center_bearing)
    return clearance + config.center_bonus / (1.0 + deviation)


def best_escape(
    primary: ThreatAssessment,
    threats: Sequence[ThreatAssessment],
    origin: Vector2,
    speed_stat: float,
    arena: ArenaBounds,
    config: PolicyConfig,
) -> EscapeCandidate | None:
    """Pick the highest-scoring wall-safe heading, or ``None`` if all are blocked.

    *threats* must be ranked most dangerous first; only the leading
    ``clearance_threats`` of them contribute to the score.
    """
    considered = threats[: config.clearance_threats]
    center_bearing = origin.bearing_to(arena.center)

    best: EscapeCandidate | None = None
    for heading in sweep_headings(primary.heading, config):
        if not clears_walls(origin, heading, arena, config):
            continue
        score = score_heading(heading, origin, considered, speed_stat, center_bearing, config)
        if best is None or score > best.score:
            best = EscapeCandidate(heading, score)
    return best
