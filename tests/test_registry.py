"""Tests for the policy registry and the bounded decision trace."""

import sys
import os
import threading
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from arena_ai.ai.brain import ArenaPolicy
from arena_ai.core.enums import TraceCategory
from arena_ai.engine.registry import PolicyRegistry
from arena_ai.utils.event_log import DecisionEvent, DecisionLog
from tests.helpers.worlds import CENTER, enemy_at, make_snapshot


def _ev(tick: int, category: TraceCategory = TraceCategory.HOLD) -> DecisionEvent:
    return DecisionEvent(tick, category, f"event at {tick}")


# ---------------------------------------------------------------------------
# Decision log
# ---------------------------------------------------------------------------

class TestDecisionLog:

    def test_capacity_drops_oldest(self):
        log = DecisionLog(capacity=3)
        log.append_many([_ev(t) for t in range(5)])
        assert len(log) == 3
        assert [e.tick for e in log.latest(10)] == [2, 3, 4]

    def test_latest(self):
        log = DecisionLog()
        log.append_many([_ev(t) for t in range(5)])
        assert [e.tick for e in log.latest(2)] == [3, 4]
        assert log.latest(0) == []

    def test_since_tick(self):
        log = DecisionLog()
        log.append_many([_ev(t) for t in range(5)])
        assert [e.tick for e in log.since_tick(3)] == [3, 4]

    def test_clear(self):
        log = DecisionLog()
        log.append_many([_ev(1)])
        log.clear()
        assert len(log) == 0

    def test_zero_capacity_keeps_one(self):
        log = DecisionLog(capacity=0)
        log.append_many([_ev(1), _ev(2)])
        assert [e.tick for e in log.latest()] == [2]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestPolicyRegistry:

    def test_register_assigns_ids_and_names(self):
        reg = PolicyRegistry()
        a = reg.register(ArenaPolicy())
        b = reg.register(ArenaPolicy(), name="kiter")
        assert (a.bot_id, a.name) == (1, "bot-1")
        assert (b.bot_id, b.name) == (2, "kiter")
        assert len(reg) == 2
        assert 1 in reg

    def test_reserved_id(self):
        reg = PolicyRegistry()
        bot_id = reg.next_id()
        entry = reg.register(ArenaPolicy(), bot_id=bot_id)
        assert reg.get(bot_id) is entry
        assert reg.register(ArenaPolicy()).bot_id == bot_id + 1

    def test_duplicate_id_rejected(self):
        reg = PolicyRegistry()
        reg.register(ArenaPolicy(), bot_id=5)
        with pytest.raises(ValueError):
            reg.register(ArenaPolicy(), bot_id=5)

    def test_unknown_id(self):
        reg = PolicyRegistry()
        with pytest.raises(KeyError):
            reg.get(99)
        with pytest.raises(KeyError):
            reg.remove(99)

    def test_remove(self):
        reg = PolicyRegistry()
        entry = reg.register(ArenaPolicy())
        assert reg.remove(entry.bot_id) is entry
        assert entry.bot_id not in reg

    def test_entries_in_registration_order(self):
        reg = PolicyRegistry()
        ids = [reg.register(ArenaPolicy()).bot_id for _ in range(4)]
        assert [e.bot_id for e in reg.entries()] == ids

    def test_act_updates_bookkeeping(self):
        reg = PolicyRegistry()
        entry = reg.register(ArenaPolicy())
        entry.act(make_snapshot(enemies=[enemy_at(CENTER, 0.0, 100)], tick=7))
        assert entry.ticks_decided == 1
        assert entry.last_tick == 7
        assert entry.policy.memory.last_facing_heading is not None

    def test_reset_clears_state(self):
        reg = PolicyRegistry()
        entry = reg.register(ArenaPolicy(trace=DecisionLog()))
        entry.act(make_snapshot(enemies=[enemy_at(CENTER, 0.0, 100)], tick=3))
        entry.reset()
        assert entry.ticks_decided == 0
        assert entry.last_tick is None
        assert entry.policy.memory.last_facing_heading is None
        assert len(entry.policy.trace) == 0

    def test_policies_are_independent(self):
        reg = PolicyRegistry()
        a = reg.register(ArenaPolicy())
        b = reg.register(ArenaPolicy())
        a.act(make_snapshot(enemies=[enemy_at(CENTER, 1.0, 100)]))
        assert b.policy.memory.last_facing_heading is None

    def test_concurrent_act_counts_every_tick(self):
        reg = PolicyRegistry()
        entry = reg.register(ArenaPolicy())
        snap = make_snapshot(enemies=[enemy_at(CENTER, 0.0, 100)])

        def worker():
            for _ in range(50):
                entry.act(snap)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert entry.ticks_decided == 200
