"""Pydantic request/response models for the REST API.

World and action models mirror the arena host's JSON objects field for field
(camelCase on the wire, snake_case in Python).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from arena_ai.actions.base import ActionDraft
from arena_ai.config import PolicyConfig
from arena_ai.core.enums import ShootingState
from arena_ai.core.models import ArenaBounds, BulletInfo, EnemyInfo, SelfState, StatBlock, Vector2
from arena_ai.core.snapshot import WorldSnapshot


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


# --- World (request body of /action) ---

class StatsSchema(WireModel):
    speed: int = Field(5, ge=0)
    strength: int = Field(5, ge=0)
    health: int = Field(5, ge=0)
    range_: int = Field(5, ge=0, alias="range")

    def to_model(self) -> StatBlock:
        return StatBlock(speed=self.speed, strength=self.strength, health=self.health, range=self.range_)


class SelfSchema(WireModel):
    x: float
    y: float
    hp: float = 100.0
    can_shoot: bool = True
    can_shield: bool = True
    shooting_state: ShootingState = ShootingState.IDLE
    stats: StatsSchema = Field(default_factory=StatsSchema)
    range_: float = Field(300.0, ge=0, alias="range", description="Effective shooting range in pixels")


class EnemySchema(WireModel):
    x: float
    y: float
    hp: float = 100.0
    stats: StatsSchema = Field(default_factory=StatsSchema)


class BulletSchema(WireModel):
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    speed: float = Field(0.0, ge=0)
    damage: float = 0.0
    max_range: float = 0.0
    traveled_distance: float = 0.0
    life: float = 0.0


class ArenaSchema(WireModel):
    x: float = 0.0
    y: float = 0.0
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class WorldSchema(WireModel):
    self_: SelfSchema = Field(alias="self")
    enemies: list[EnemySchema] = Field(default_factory=list)
    bullets: list[BulletSchema] = Field(default_factory=list)
    arena: ArenaSchema = Field(alias="map")
    tick: int = 0

    def to_snapshot(self) -> WorldSnapshot:
        s = self.self_
        return WorldSnapshot(
            tick=self.tick,
            me=SelfState(
                pos=Vector2(s.x, s.y),
                hp=s.hp,
                stats=s.stats.to_model(),
                range=s.range_,
                can_shoot=s.can_shoot,
                can_shield=s.can_shield,
                shooting_state=s.shooting_state,
            ),
            enemies=tuple(
                EnemyInfo(pos=Vector2(e.x, e.y), hp=e.hp, stats=e.stats.to_model())
                for e in self.enemies
            ),
            bullets=tuple(
                BulletInfo(
                    pos=Vector2(b.x, b.y),
                    velocity=Vector2(b.vx, b.vy),
                    speed=b.speed,
                    damage=b.damage,
                    max_range=b.max_range,
                    traveled_distance=b.traveled_distance,
                    life=b.life,
                )
                for b in self.bullets
            ),
            arena=ArenaBounds(
                x=self.arena.x, y=self.arena.y,
                width=self.arena.width, height=self.arena.height,
            ),
        )


# --- Action ---

class ActionSchema(WireModel):
    move_direction: float | None = Field(None, description="Radians, or null to stay still")
    shoot: float | None = Field(None, description="Radians, or null to hold fire")
    shield: bool = False

    @classmethod
    def from_draft(cls, draft: ActionDraft) -> ActionSchema:
        return cls(move_direction=draft.move_heading, shoot=draft.aim_heading, shield=draft.shield_active)


# --- Policy config ---

class PolicyConfigSchema(BaseModel):
    dodge_radius_base: float
    dodge_radius_per_speed: float
    time_budget_base: float
    time_budget_per_missing_speed: float
    time_budget_speed_pivot: float
    tti_weight: float
    emergency_tti: float
    escape_arc: float
    escape_candidates: int
    escape_probe_distance: float
    wall_buffer: float
    clearance_threats: int
    projection_scale: float
    center_bonus: float
    close_range_ratio: float
    far_range_ratio: float
    firing_half_arc: float
    epsilon: float

    @classmethod
    def from_config(cls, config: PolicyConfig) -> PolicyConfigSchema:
        return cls(**config.as_dict())


class PolicyOverrides(BaseModel):
    """Partial PolicyConfig; omitted fields keep the service default."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    dodge_radius_base: float | None = Field(None, ge=0)
    dodge_radius_per_speed: float | None = Field(None, ge=0)
    time_budget_base: float | None = Field(None, ge=0)
    time_budget_per_missing_speed: float | None = Field(None, ge=0)
    time_budget_speed_pivot: float | None = None
    tti_weight: float | None = Field(None, ge=0)
    emergency_tti: float | None = Field(None, ge=0)
    escape_arc: float | None = Field(None, ge=0, le=6.2832)
    escape_candidates: int | None = Field(None, ge=1, le=64)
    escape_probe_distance: float | None = Field(None, ge=0)
    wall_buffer: float | None = Field(None, ge=0)
    clearance_threats: int | None = Field(None, ge=1, le=16)
    projection_scale: float | None = Field(None, ge=0)
    center_bonus: float | None = Field(None, ge=0)
    close_range_ratio: float | None = Field(None, ge=0)
    far_range_ratio: float | None = Field(None, ge=0)
    firing_half_arc: float | None = Field(None, ge=0, le=3.1416)
    epsilon: float | None = Field(None, gt=0)

    def changes(self) -> dict[str, float | int]:
        return self.model_dump(exclude_none=True)


# --- Bots ---

class BotCreateRequest(WireModel):
    name: str = Field("", max_length=64)
    seed: int | None = Field(None, description="Seed for the reposition coin flip; derived from the service seed if omitted")
    policy: PolicyOverrides | None = None


class BotSchema(WireModel):
    bot_id: int
    name: str
    seed: int | None = None
    ticks_decided: int = 0
    last_tick: int | None = None
    last_facing_heading: float | None = None


class BotDetailSchema(BotSchema):
    policy: PolicyConfigSchema


class EventSchema(BaseModel):
    tick: int
    category: str
    message: str


class ControlResponse(BaseModel):
    status: str
    message: str


# --- Config ---

class ServiceConfigResponse(BaseModel):
    seed: int
    trace_capacity: int
    policy: PolicyConfigSchema
