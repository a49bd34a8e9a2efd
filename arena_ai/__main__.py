"""Entry point: ``python -m arena_ai``.

Supports two modes:
  - ``python -m arena_ai``                 → Launch the FastAPI decision service
  - ``python -m arena_ai decide world.json`` → Headless: print the action(s) for
    one world object, or for a JSON array of consecutive ticks (memory carries
    across the array)
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Sequence

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arena combat decision policy")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI decision service (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--trace-capacity", type=int, default=256)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    srv.add_argument("--access-log", action="store_true", help="Log every HTTP request")

    # --- Headless mode ---
    dec = sub.add_parser("decide", help="Decide actions for world JSON read from a file or stdin")
    dec.add_argument("world", nargs="?", default="-", help="Path to world JSON, or '-' for stdin")
    dec.add_argument("--seed", type=int, default=42)
    dec.add_argument("--facing", type=float, default=None, help="Initial facing heading in degrees")
    dec.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from arena_ai.api.app import create_app
    from arena_ai.config import ServiceConfig

    config = ServiceConfig(
        host=args.host,
        port=args.port,
        seed=args.seed,
        trace_capacity=args.trace_capacity,
        log_level=args.log_level,
        access_log=args.access_log,
    )
    app = create_app(config)
    # log_config=None keeps uvicorn on the handler installed by setup_logging
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower(), log_config=None)


def _run_decide(args: argparse.Namespace) -> int:
    from pydantic import TypeAdapter, ValidationError

    from arena_ai.ai.brain import ArenaPolicy
    from arena_ai.api.schemas import ActionSchema, WorldSchema
    from arena_ai.systems.rng import DeterministicRNG
    from arena_ai.utils.logging import setup_logging

    setup_logging(args.log_level)

    try:
        if args.world == "-":
            raw = json.load(sys.stdin)
        else:
            with open(args.world, encoding="utf-8") as f:
                raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read world JSON: %s", exc)
        return 2

    is_sequence = isinstance(raw, list)
    try:
        if is_sequence:
            worlds = TypeAdapter(list[WorldSchema]).validate_python(raw)
        else:
            worlds = [WorldSchema.model_validate(raw)]
    except ValidationError as exc:
        logger.error("Invalid world JSON:\n%s", exc)
        return 2

    policy = ArenaPolicy(rng=DeterministicRNG(args.seed), agent_id=1)
    if args.facing is not None:
        policy.memory.last_facing_heading = math.radians(args.facing)

    actions = [
        ActionSchema.from_draft(policy.decide(w.to_snapshot())).model_dump(by_alias=True)
        for w in worlds
    ]
    json.dump(actions if is_sequence else actions[0], sys.stdout)
    sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    if args.command == "serve":
        _run_server(args)
        return 0
    return _run_decide(args)


if __name__ == "__main__":
    sys.exit(main())
