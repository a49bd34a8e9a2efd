"""Policy and service configuration with sensible defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class PolicyConfig:
    """Immutable tuning parameters for the decision pipeline.

    Every threshold the policy uses lives here so balance changes never
    touch stage code.  Override with ``dataclasses.replace``.
    """

    # Threat assessment
    dodge_radius_base: float = 60.0
    dodge_radius_per_speed: float = 5.0
    time_budget_base: float = 25.0
    time_budget_per_missing_speed: float = 3.0
    time_budget_speed_pivot: float = 8.0
    tti_weight: float = 2.0                 # danger = perp_dist + tti_weight * tti
    emergency_tti: float = 15.0             # shield below this time-to-impact

    # Escape sweep
    escape_arc: float = math.pi             # full width, centred on bullet heading
    escape_candidates: int = 6
    escape_probe_distance: float = 100.0
    wall_buffer: float = 30.0
    clearance_threats: int = 3
    projection_scale: float = 10.0          # future pos = tti * speed * scale
    center_bonus: float = 50.0

    # Kiting band (fractions of effective range)
    close_range_ratio: float = 0.6
    far_range_ratio: float = 0.9

    # Forward shooting arc
    firing_half_arc: float = math.pi / 2

    # Numerics
    epsilon: float = 1e-4

    def dodge_radius(self, speed: float) -> float:
        """Perpendicular miss distance below which a bullet must be dodged."""
        return self.dodge_radius_base + self.dodge_radius_per_speed * speed

    def time_budget(self, speed: float) -> float:
        """Warning time a robot of *speed* needs; faster robots need less."""
        missing = max(0.0, self.time_budget_speed_pivot - speed)
        return self.time_budget_base + self.time_budget_per_missing_speed * missing

    def as_dict(self) -> dict[str, float | int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ServiceConfig:
    """Runtime settings for the HTTP decision service and CLI."""

    host: str = "127.0.0.1"
    port: int = 8000
    seed: int = 42
    trace_capacity: int = 256               # decision events kept per bot
    log_level: str = "INFO"
    access_log: bool = False               # one uvicorn line per request when True
    policy: PolicyConfig = field(default_factory=PolicyConfig)
