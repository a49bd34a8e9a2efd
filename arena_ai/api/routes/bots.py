"""/api/v1/bots — register policies and request one action per tick."""

from __future__ import annotations

import logging
from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from arena_ai.ai.brain import ArenaPolicy
from arena_ai.api.dependencies import get_registry, get_service_config
from arena_ai.api.schemas import (
    ActionSchema,
    BotCreateRequest,
    BotDetailSchema,
    BotSchema,
    ControlResponse,
    EventSchema,
    PolicyConfigSchema,
    WorldSchema,
)
from arena_ai.config import ServiceConfig
from arena_ai.engine.registry import PolicyRegistry, RegisteredPolicy
from arena_ai.systems.rng import DeterministicRNG
from arena_ai.utils.event_log import DecisionLog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bots")


def _lookup(registry: PolicyRegistry, bot_id: int) -> RegisteredPolicy:
    try:
        return registry.get(bot_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Bot {bot_id} not found.") from None


def _serialize(entry: RegisteredPolicy) -> BotSchema:
    return BotSchema(
        bot_id=entry.bot_id,
        name=entry.name,
        seed=getattr(entry.policy.rng, "seed", None),
        ticks_decided=entry.ticks_decided,
        last_tick=entry.last_tick,
        last_facing_heading=entry.policy.memory.last_facing_heading,
    )


@router.post("", response_model=BotSchema, status_code=status.HTTP_201_CREATED)
def register_bot(
    body: BotCreateRequest,
    registry: PolicyRegistry = Depends(get_registry),
    service: ServiceConfig = Depends(get_service_config),
) -> BotSchema:
    bot_id = registry.next_id()
    config = service.policy
    if body.policy is not None:
        config = replace(config, **body.policy.changes())
    seed = body.seed if body.seed is not None else service.seed + bot_id
    policy = ArenaPolicy(
        config=config,
        rng=DeterministicRNG(seed),
        agent_id=bot_id,
        trace=DecisionLog(service.trace_capacity),
    )
    entry = registry.register(policy, name=body.name, bot_id=bot_id)
    return _serialize(entry)


@router.get("", response_model=list[BotSchema])
def list_bots(registry: PolicyRegistry = Depends(get_registry)) -> list[BotSchema]:
    return [_serialize(e) for e in registry.entries()]


@router.get("/{bot_id}", response_model=BotDetailSchema)
def get_bot(bot_id: int, registry: PolicyRegistry = Depends(get_registry)) -> BotDetailSchema:
    entry = _lookup(registry, bot_id)
    return BotDetailSchema(
        **_serialize(entry).model_dump(),
        policy=PolicyConfigSchema.from_config(entry.policy.config),
    )


@router.delete("/{bot_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_bot(bot_id: int, registry: PolicyRegistry = Depends(get_registry)) -> Response:
    try:
        registry.remove(bot_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Bot {bot_id} not found.") from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{bot_id}/reset", response_model=ControlResponse)
def reset_bot(bot_id: int, registry: PolicyRegistry = Depends(get_registry)) -> ControlResponse:
    entry = _lookup(registry, bot_id)
    entry.reset()
    logger.info("Bot %d reset for a new match", bot_id)
    return ControlResponse(status="ok", message=f"Bot {bot_id} memory cleared.")


@router.post("/{bot_id}/action", response_model=ActionSchema)
def decide(
    bot_id: int,
    world: WorldSchema,
    registry: PolicyRegistry = Depends(get_registry),
) -> ActionSchema:
    entry = _lookup(registry, bot_id)
    action = entry.act(world.to_snapshot())
    return ActionSchema.from_draft(action)


@router.get("/{bot_id}/events", response_model=list[EventSchema])
def get_events(
    bot_id: int,
    limit: int = Query(50, ge=1, le=1000),
    since: int | None = Query(None, ge=0, description="Only events at or after this tick"),
    registry: PolicyRegistry = Depends(get_registry),
) -> list[EventSchema]:
    entry = _lookup(registry, bot_id)
    trace = entry.policy.trace
    if trace is None:
        return []
    events = trace.since_tick(since)[-limit:] if since is not None else trace.latest(limit)
    return [EventSchema(tick=e.tick, category=e.category.value, message=e.message) for e in events]
