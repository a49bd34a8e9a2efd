"""Tests for value types, snapshot helpers, actions, config, and the RNG."""

import math
import sys
import os
from dataclasses import FrozenInstanceError, replace
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from arena_ai.actions.base import ActionDraft
from arena_ai.api.schemas import PolicyConfigSchema
from arena_ai.config import PolicyConfig, ServiceConfig
from arena_ai.core.enums import Domain, ShootingState
from arena_ai.core.models import ArenaBounds, BulletInfo, Vector2
from arena_ai.systems.rng import DeterministicRNG, RandomSource
from tests.helpers.worlds import make_snapshot


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

class TestVector2:

    def test_arithmetic(self):
        a = Vector2(3, 4)
        assert a + Vector2(1, 1) == Vector2(4, 5)
        assert a - Vector2(1, 1) == Vector2(2, 3)
        assert a.scale(2) == Vector2(6, 8)
        assert a.dot(Vector2(1, 0)) == 3
        assert a.length == 5

    def test_bearing_uses_screen_axes(self):
        # +y points down, so (0, 1) is a quarter turn clockwise on screen
        assert Vector2(0, 0).bearing_to(Vector2(0, 10)) == pytest.approx(math.pi / 2)
        assert Vector2(0, 0).bearing_to(Vector2(-10, 0)) == pytest.approx(math.pi)

    def test_advance(self):
        p = Vector2(10, 10).advance(math.pi / 2, 5)
        assert p.x == pytest.approx(10)
        assert p.y == pytest.approx(15)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            Vector2(1, 2).x = 5


class TestArenaBounds:

    def test_center(self):
        assert ArenaBounds(100, 50, 200, 100).center == Vector2(200, 100)

    def test_contains_is_strict(self):
        arena = ArenaBounds(0, 0, 800, 600)
        assert arena.contains(Vector2(31, 31), margin=30)
        assert not arena.contains(Vector2(30, 300), margin=30)
        assert not arena.contains(Vector2(400, 570), margin=30)

    def test_offset_arena(self):
        arena = ArenaBounds(-100, -100, 200, 200)
        assert arena.contains(Vector2(0, 0), margin=30)
        assert not arena.contains(Vector2(80, 0), margin=30)


class TestBulletInfo:

    def test_reported_speed(self):
        assert BulletInfo(Vector2(), Vector2(3, 4), speed=12).effective_speed(1e-4) == 12

    def test_velocity_magnitude_fallback(self):
        assert BulletInfo(Vector2(), Vector2(3, 4)).effective_speed(1e-4) == 5

    def test_epsilon_floor(self):
        assert BulletInfo(Vector2(), Vector2(0, 0)).effective_speed(1e-4) == 1e-4

    def test_heading(self):
        assert BulletInfo(Vector2(), Vector2(0, -2)).heading == pytest.approx(-math.pi / 2)


class TestShootingState:

    @pytest.mark.parametrize("state", [ShootingState.PREPARING, ShootingState.SHOOTING, ShootingState.RECOVERING])
    def test_busy_states(self, state):
        assert state.busy

    def test_idle_not_busy(self):
        assert not ShootingState.IDLE.busy


# ---------------------------------------------------------------------------
# Snapshot helpers
# ---------------------------------------------------------------------------

class TestSnapshotHelpers:

    def test_distance_and_direction(self):
        snap = make_snapshot(me=(100, 100))
        assert snap.distance_to(103, 104) == pytest.approx(5)
        assert snap.direction_to(100, 200) == pytest.approx(math.pi / 2)

    def test_shoot_at_matches_direction(self):
        snap = make_snapshot(me=(100, 100))
        assert snap.shoot_at(250, 20) == snap.direction_to(250, 20)

    def test_direction_away(self):
        snap = make_snapshot(me=(100, 100))
        assert snap.direction_away_from(200, 100) == pytest.approx(math.pi)

    def test_collections_are_tuples(self):
        snap = make_snapshot(enemies=[], bullets=[])
        assert isinstance(snap.enemies, tuple)
        assert isinstance(snap.bullets, tuple)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class TestActionDraft:

    def test_default_is_idle(self):
        assert ActionDraft().is_idle

    def test_to_wire(self):
        wire = ActionDraft(move_heading=1.0, aim_heading=None, shield_active=True).to_wire()
        assert wire == {"moveDirection": 1.0, "shoot": None, "shield": True}

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_sanitized_drops_non_finite(self, bad):
        clean = ActionDraft(move_heading=bad, aim_heading=bad).sanitized()
        assert clean.move_heading is None
        assert clean.aim_heading is None

    def test_sanitized_is_a_copy(self):
        draft = ActionDraft(move_heading=0.5)
        clean = draft.sanitized()
        clean.move_heading = 2.0
        assert draft.move_heading == 0.5

    def test_repr_in_degrees(self):
        assert repr(ActionDraft(move_heading=math.pi)) == "Action(move=180deg, aim=hold, shield=False)"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestPolicyConfig:

    def test_defaults(self):
        cfg = PolicyConfig()
        assert cfg.escape_candidates == 6
        assert cfg.escape_arc == pytest.approx(math.pi)
        assert cfg.wall_buffer == 30
        assert cfg.firing_half_arc == pytest.approx(math.pi / 2)

    def test_time_budget_never_below_base(self):
        cfg = PolicyConfig()
        assert cfg.time_budget(8) == cfg.time_budget_base
        assert cfg.time_budget(10) == cfg.time_budget_base

    def test_replace_override(self):
        cfg = replace(PolicyConfig(), wall_buffer=10)
        assert cfg.wall_buffer == 10
        assert PolicyConfig().wall_buffer == 30

    def test_as_dict_matches_api_schema(self):
        assert set(PolicyConfig().as_dict()) == set(PolicyConfigSchema.model_fields)

    def test_service_defaults(self):
        svc = ServiceConfig()
        assert svc.seed == 42
        assert svc.policy == PolicyConfig()


# ---------------------------------------------------------------------------
# RNG
# ---------------------------------------------------------------------------

class TestDeterministicRNG:

    def test_same_inputs_same_output(self):
        a = DeterministicRNG(7)
        b = DeterministicRNG(7)
        for tick in range(20):
            assert a.next_float(Domain.REPOSITION, 1, tick) == b.next_float(Domain.REPOSITION, 1, tick)

    def test_range(self):
        rng = DeterministicRNG(1)
        values = [rng.next_float(Domain.SCENARIO, 0, t) for t in range(200)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_domains_are_separated(self):
        rng = DeterministicRNG(3)
        a = [rng.next_float(Domain.REPOSITION, 1, t) for t in range(10)]
        b = [rng.next_float(Domain.SCENARIO, 1, t) for t in range(10)]
        assert a != b

    def test_seeds_differ(self):
        a = [DeterministicRNG(1).next_float(Domain.REPOSITION, 1, t) for t in range(10)]
        b = [DeterministicRNG(2).next_float(Domain.REPOSITION, 1, t) for t in range(10)]
        assert a != b

    def test_bool_extremes(self):
        rng = DeterministicRNG(9)
        assert not any(rng.next_bool(Domain.REPOSITION, 1, t, probability=0.0) for t in range(50))
        assert all(rng.next_bool(Domain.REPOSITION, 1, t, probability=1.0) for t in range(50))

    def test_next_range(self):
        rng = DeterministicRNG(4)
        v = rng.next_range(Domain.SCENARIO, 2, 3, 10.0, 20.0)
        assert 10.0 <= v < 20.0

    def test_satisfies_protocol(self):
        assert isinstance(DeterministicRNG(0), RandomSource)

    @pytest.mark.parametrize("seed", [2**64, 2**70 + 3, -(2**63) - 1])
    def test_seeds_beyond_64_bits(self, seed):
        rng = DeterministicRNG(seed)
        v = rng.next_float(Domain.REPOSITION, 1, 5)
        assert 0.0 <= v < 1.0
        assert rng.next_bool(Domain.REPOSITION, 1, 5) == rng.next_bool(Domain.REPOSITION, 1, 5)

    def test_large_tick_and_entity(self):
        rng = DeterministicRNG(42)
        assert 0.0 <= rng.next_float(Domain.REPOSITION, 2**64 + 1, 2**63) < 1.0

    def test_wraps_modulo_two_to_the_64(self):
        assert DeterministicRNG(2**64).next_float(Domain.SCENARIO, 1, 1) == \
            DeterministicRNG(0).next_float(Domain.SCENARIO, 1, 1)
        assert DeterministicRNG(-1).next_float(Domain.SCENARIO, 1, 1) == \
            DeterministicRNG(2**64 - 1).next_float(Domain.SCENARIO, 1, 1)
