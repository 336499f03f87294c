"""Headless command line for running and inspecting games."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import numpy as np

from grid_snake.board import Board
from grid_snake.cell import Direction
from grid_snake.config import BoardConfig

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Run headless snake games and inspect boards.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play games with a random-turn policy.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON board config (flags override its values).",
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--columns", type=int, default=None)
    sim_p.add_argument("--rows", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--max-ticks", type=int, default=1_000)
    sim_p.add_argument(
        "--turn-probability", type=float, default=0.2,
        help="Chance of requesting a random turn before each tick.",
    )

    # --- show ---
    show_p = sub.add_parser("show", help="Print the initial board.")
    show_p.add_argument("--columns", type=int, default=None)
    show_p.add_argument("--rows", type=int, default=None)
    show_p.add_argument("--seed", type=int, default=None)

    return parser


def _config_from_args(args: argparse.Namespace) -> BoardConfig:
    path = getattr(args, "config", None)
    config = BoardConfig.load(path) if path else BoardConfig()

    overrides = {
        name: getattr(args, name)
        for name in ("columns", "rows", "seed")
        if getattr(args, name, None) is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def play_random_game(
    config: BoardConfig,
    rng: np.random.Generator,
    *,
    max_ticks: int = 1_000,
    turn_probability: float = 0.2,
) -> Board:
    """Play one game, turning at random, until it ends or *max_ticks* pass."""
    board = Board(config, rng=rng)
    while not board.game_over and board.tick < max_ticks:
        if rng.random() < turn_probability:
            board.request_direction(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
        board.update()
    return board


def _run_simulate(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    rng = np.random.default_rng(config.seed)

    scores = []
    for game in range(args.games):
        board = play_random_game(
            config, rng,
            max_ticks=args.max_ticks,
            turn_probability=args.turn_probability,
        )
        reason = board.reason.value if board.reason is not None else "timeout"
        scores.append(board.score)
        print(  # noqa: T201
            f"game {game + 1}: score {board.score} after "
            f"{board.tick} ticks ({reason})"
        )

    if scores:
        print(f"mean score: {np.mean(scores):.1f}")  # noqa: T201
    return 0


def _run_show(args: argparse.Namespace) -> int:
    board = Board(_config_from_args(args))
    print(board, end="")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
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
        "simulate": _run_simulate,
        "show": _run_show,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
