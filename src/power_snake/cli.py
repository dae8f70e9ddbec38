"""Command-line tools for Power Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

DEFAULT_BEST_FILE = "power_snake_best.json"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="power-snake",
        description="Power Snake headless simulation and settings tools.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play autopilot games and report scores.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (other flags override it).",
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-ticks", type=int, default=500)
    sim_p.add_argument(
        "--difficulty", type=str, default=None,
        choices=["easy", "normal", "hard"],
    )
    sim_p.add_argument(
        "--walls", type=str, default=None, choices=["solid", "wrap"],
    )
    sim_p.add_argument("--grid-width", type=int, default=None)
    sim_p.add_argument("--grid-height", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--best-file", type=str, default=None,
        help="JSON file to read and update the best score in.",
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default settings to a JSON file.",
    )
    init_p.add_argument("output", help="Path for the config file.")

    # --- best ---
    best_p = sub.add_parser("best", help="Print the stored best score.")
    best_p.add_argument("--file", type=str, default=DEFAULT_BEST_FILE)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from power_snake.config import GameConfig
    from power_snake.simulate import simulate_games
    from power_snake.storage import JsonScoreStore

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if args.difficulty is not None:
        overrides["difficulty"] = args.difficulty
    if args.walls is not None:
        overrides["walls"] = args.walls
    if args.grid_width is not None:
        overrides["grid_width"] = args.grid_width
    if args.grid_height is not None:
        overrides["grid_height"] = args.grid_height
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)

    store = JsonScoreStore(args.best_file) if args.best_file else None
    report = simulate_games(
        num_games=args.games,
        max_ticks=args.max_ticks,
        config=config,
        seed=args.seed,
        store=store,
    )
    print(report.summary())  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from power_snake.config import GameConfig

    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def _run_best(args: argparse.Namespace) -> int:
    from power_snake.storage import BEST_SCORE_KEY, JsonScoreStore

    print(JsonScoreStore(args.file).read(BEST_SCORE_KEY, 0))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``power-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "init-config": _run_init_config,
        "best": _run_best,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
