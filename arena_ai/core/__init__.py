"""Core data models and the per-tick world snapshot."""

from arena_ai.core.enums import Domain, ShootingState, TraceCategory
from arena_ai.core.models import ArenaBounds, BulletInfo, EnemyInfo, SelfState, StatBlock, Vector2
from arena_ai.core.snapshot import WorldSnapshot

__all__ = [
    "ArenaBounds",
    "BulletInfo",
    "Domain",
    "EnemyInfo",
    "SelfState",
    "ShootingState",
    "StatBlock",
    "TraceCategory",
    "Vector2",
    "WorldSnapshot",
]
