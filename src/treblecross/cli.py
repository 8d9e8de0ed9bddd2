"""
Command-line interface for playing Treblecross against the solver.
"""

import argparse
import logging
from typing import Callable, List, Optional

from treblecross.api import start_game
from treblecross.utils.config import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_SOLVER,
    NUM_PLAYERS,
    SOLVERS,
    Config,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Treblecross with optimal move scores"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=None,
        help=f"Board length (prompted if omitted, default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--solver",
        choices=list(SOLVERS.keys()),
        default=DEFAULT_SOLVER,
        help=f"Search variant (default: {DEFAULT_SOLVER})",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Computer plays for both players (no human players)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated list of human player numbers (e.g., '1,2'). Overrides --self-play.",
    )
    parser.add_argument(
        "--no-scores",
        action="store_true",
        help="Hide the score row under the board",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain output without ANSI colors",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: Optional[str], self_play: bool) -> List[int]:
    """Parse and validate the human players argument."""
    if self_play and players_str is None:
        return []

    if players_str is None:
        return [1]  # Default: player 1 is human

    # Parse comma-separated values
    try:
        human_players = [int(p.strip()) for p in players_str.split(",") if p.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected comma-separated integers (e.g., '1,2')."
        ) from e

    # Validate player numbers
    invalid = [p for p in human_players if p < 1 or p > NUM_PLAYERS]
    if invalid:
        raise ValueError(
            f"Invalid player number(s): {invalid}. Treblecross only supports players 1-{NUM_PLAYERS}."
        )

    return sorted(set(human_players))


def prompt_board_size(input_fn: Callable[[str], str] = input) -> int:
    """Ask for the board length until a non-negative integer is given."""
    while True:
        raw = input_fn(f"Board Length [{DEFAULT_BOARD_SIZE}]: ").strip()
        if not raw:
            return DEFAULT_BOARD_SIZE
        try:
            size = int(raw)
        except ValueError:
            print(f"Not a number: {raw!r}")
            continue
        if size < 0:
            print("Board length must be zero or more")
            continue
        return size


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    human_players = parse_human_players(args.players, args.self_play)
    size = args.size if args.size is not None else prompt_board_size()

    config = Config(
        board_size=size,
        solver=args.solver,
        human_players=human_players,
        show_scores=not args.no_scores,
    )

    start_game(config, color=not args.no_color)


if __name__ == "__main__":
    main()
