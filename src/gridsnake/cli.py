"""Command-line launcher for Grid Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np

logger = logging.getLogger(__name__)

_MOVES = ("UP", "DOWN", "LEFT", "RIGHT")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Play Grid Snake or run it headless.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open a window and play.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags override its values.",
    )
    play_p.add_argument("--width", type=int, default=None, help="Window width in pixels.")
    play_p.add_argument("--height", type=int, default=None, help="Window height in pixels.")
    play_p.add_argument("--cell-size", type=int, default=None)
    play_p.add_argument(
        "--move-interval", type=float, default=None,
        help="Seconds between snake moves.",
    )
    play_p.add_argument("--fps", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path before playing.",
    )

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a headless game with random headings.",
    )
    sim_p.add_argument("--grid-width", type=int, default=40)
    sim_p.add_argument("--grid-height", type=int, default=30)
    sim_p.add_argument("--steps", type=int, default=500)
    sim_p.add_argument("--seed", type=int, default=0)

    return parser


def _run_play(args: argparse.Namespace) -> int:
    from gridsnake.app import run
    from gridsnake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()
    config = config.with_overrides(
        window_width=args.width,
        window_height=args.height,
        cell_size=args.cell_size,
        move_interval=args.move_interval,
        fps=args.fps,
        seed=args.seed,
    )
    if args.save_config:
        config.save(args.save_config)

    score = run(config)
    print(f"Final score: {score}")  # noqa: T201
    return 0


def _run_simulate(args: argparse.Namespace) -> int:
    from gridsnake.engine import GameState
    from gridsnake.snake import Direction

    rng = np.random.default_rng(args.seed)
    state = GameState(args.grid_width, args.grid_height, rng=rng)

    for _ in range(args.steps):
        state.set_heading(Direction[_MOVES[int(rng.integers(len(_MOVES)))]])
        state.advance(state.move_interval)
        if state.is_over():
            break

    logger.info(
        "Simulation finished after %d steps with score %d.",
        state.ticks, state.score,
    )
    print(json.dumps(state.get_state()))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``gridsnake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "simulate": _run_simulate,
    }
    try:
        return handlers[args.command](args)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
