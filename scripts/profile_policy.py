#!/usr/bin/env python3
"""Automated policy profiler.

Usage:
    python scripts/profile_policy.py --ticks 5000 --seed 42
    python scripts/profile_policy.py --ticks 20000 --bullets 40 --cprofile policy.prof

Reports:
    - Per-decision timing statistics (min, max, mean, p50, p95, p99)
    - Throughput (decisions/sec)
    - How often each trace category fired
    - Optional: cProfile dump for flame graph generation
"""

from __future__ import annotations

import argparse
import cProfile
import io
import math
import os
import pstats
import statistics
import sys
import time
from collections import Counter

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from arena_ai.ai.brain import ArenaPolicy
from arena_ai.core.enums import Domain, ShootingState
from arena_ai.core.models import ArenaBounds, BulletInfo, EnemyInfo, SelfState, StatBlock, Vector2
from arena_ai.core.snapshot import WorldSnapshot
from arena_ai.systems.rng import DeterministicRNG
from arena_ai.utils.event_log import DecisionLog

_STATES = list(ShootingState)


def _synthetic_world(rng: DeterministicRNG, tick: int, enemies: int, bullets: int) -> WorldSnapshot:
    """Random but reproducible world for one tick."""
    arena = ArenaBounds(0.0, 0.0, 800.0, 600.0)

    def point(entity_id: int) -> Vector2:
        return Vector2(
            rng.next_range(Domain.SCENARIO, entity_id, tick, 20.0, arena.width - 20.0),
            rng.next_range(Domain.SCENARIO, entity_id + 10_000, tick, 20.0, arena.height - 20.0),
        )

    state_roll = rng.next_float(Domain.SCENARIO, 0, tick)
    me = SelfState(
        pos=point(1),
        stats=StatBlock(speed=1 + int(rng.next_range(Domain.SCENARIO, 2, tick, 0, 10))),
        range=300.0,
        can_shoot=rng.next_bool(Domain.SCENARIO, 3, tick, 0.7),
        can_shield=rng.next_bool(Domain.SCENARIO, 4, tick, 0.3),
        shooting_state=_STATES[int(state_roll * len(_STATES))],
    )
    foes = tuple(EnemyInfo(pos=point(100 + i)) for i in range(enemies))
    shots = []
    for i in range(bullets):
        heading = rng.next_range(Domain.SCENARIO, 500 + i, tick, -math.pi, math.pi)
        speed = rng.next_range(Domain.SCENARIO, 900 + i, tick, 4.0, 14.0)
        shots.append(BulletInfo(pos=point(200 + i), velocity=Vector2.from_angle(heading, speed), speed=speed))
    return WorldSnapshot(tick=tick, me=me, enemies=foes, bullets=tuple(shots), arena=arena)


def _run_policy(seed: int, num_ticks: int, enemies: int, bullets: int) -> dict:
    """Decide on *num_ticks* synthetic worlds and collect per-tick timings."""
    scenario_rng = DeterministicRNG(seed)
    worlds = [_synthetic_world(scenario_rng, t, enemies, bullets) for t in range(num_ticks)]

    trace = DecisionLog(capacity=num_ticks * 8)
    policy = ArenaPolicy(rng=DeterministicRNG(seed), agent_id=1, trace=trace)

    tick_times: list[float] = []
    for world in worlds:
        t_start = time.perf_counter()
        policy.decide(world)
        tick_times.append(time.perf_counter() - t_start)

    categories = Counter(e.category.value for e in trace.latest(len(trace)))
    return {"tick_times": tick_times, "categories": categories}


def _cut_points(data: list[float]) -> list[float]:
    """Percentile cut points 1..99; index with ``p - 1``."""
    if len(data) < 2:
        return data * 99
    return statistics.quantiles(data, n=100, method="inclusive")


def _print_report(data: dict, wall_time: float) -> None:
    tick_times = data["tick_times"]
    num_ticks = len(tick_times)

    if num_ticks == 0:
        print("No decisions executed.")
        return
    pct = _cut_points(tick_times)

    print("\n" + "=" * 70)
    print("  POLICY PERFORMANCE REPORT")
    print("=" * 70)

    print(f"\n  Decisions:         {num_ticks}")
    print(f"  Wall clock time:   {wall_time:.3f}s")
    print(f"  Throughput:        {num_ticks / wall_time:.1f} decisions/sec")
    print(f"  Avg decision time: {statistics.mean(tick_times) * 1e6:.1f}us")

    print(f"\n  {'Metric':<16} {'Time (us)':>10}")
    print(f"  {'-' * 16} {'-' * 10}")
    print(f"  {'Min':<16} {min(tick_times) * 1e6:>10.1f}")
    print(f"  {'P50 (median)':<16} {pct[49] * 1e6:>10.1f}")
    print(f"  {'P95':<16} {pct[94] * 1e6:>10.1f}")
    print(f"  {'P99':<16} {pct[98] * 1e6:>10.1f}")
    print(f"  {'Max':<16} {max(tick_times) * 1e6:>10.1f}")

    print(f"\n  {'Trace category':<16} {'Count':>10}")
    print(f"  {'-' * 16} {'-' * 10}")
    for name, count in data["categories"].most_common():
        print(f"  {name:<16} {count:>10}")

    print("\n" + "=" * 70)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the arena decision policy")
    parser.add_argument("--ticks", type=int, default=5000, help="Number of decisions to time")
    parser.add_argument("--seed", type=int, default=42, help="Scenario and policy seed")
    parser.add_argument("--enemies", type=int, default=3, help="Enemies per world")
    parser.add_argument("--bullets", type=int, default=12, help="Bullets per world")
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    print(f"Profiling: {args.ticks} decisions, seed={args.seed}, "
          f"enemies={args.enemies}, bullets={args.bullets}")

    profiler = None
    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    wall_start = time.perf_counter()
    data = _run_policy(args.seed, args.ticks, args.enemies, args.bullets)
    wall_time = time.perf_counter() - wall_start

    if profiler:
        profiler.disable()

    _print_report(data, wall_time)

    if profiler and args.cprofile:
        profiler.dump_stats(args.cprofile)
        print(f"\n  cProfile data saved to: {args.cprofile}")
        print(f"  View with: python -m pstats {args.cprofile}")

        print(f"\n  Top 20 functions by cumulative time:")
        stream = io.StringIO()
        ps = pstats.Stats(profiler, stream=stream)
        ps.sort_stats("cumulative")
        ps.print_stats(20)
        print(stream.getvalue())


if __name__ == "__main__":
    main()
