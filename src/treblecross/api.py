"""
Public API for solving and playing Treblecross.

Usage:
    from treblecross import new_game, solve_and_collect, play_move

    game = new_game(5)
    scores = solve_and_collect(game)
    play_move(game, scores.index(max(scores)))
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from treblecross.debug.profiler import timed
from treblecross.debug.viz import move_table, render_board, render_game
from treblecross.games.game_rules import board_full, in_bounds
from treblecross.games.game_state import GameState
from treblecross.solver import best_moves
from treblecross.utils.config import DEFAULT_SOLVER, PRACTICAL_SIZE_LIMIT, SOLVERS, Config
from treblecross.utils.factory import Solver, create_game

logger = logging.getLogger(__name__)

StartHook = Callable[[GameState], None]
FinishHook = Callable[[GameState, List[int]], None]


def new_game(size: int) -> GameState:
    """Empty board of the given size."""
    if size > PRACTICAL_SIZE_LIMIT:
        logger.warning(
            "Board size %d is above %d; each solve may take very long",
            size, PRACTICAL_SIZE_LIMIT,
        )
    return create_game(size)


def solve_and_collect(
    state: GameState,
    solver: Optional[Solver] = None,
    on_start: Optional[StartHook] = None,
    on_finish: Optional[FinishHook] = None,
) -> List[int]:
    """
    Score every cell of `state` for the player about to move.

    on_start(state) runs before the search and on_finish(state, scores) after
    it, e.g. to show and clear a "Calculating..." indicator.
    """
    solver = solver or SOLVERS[DEFAULT_SOLVER]
    if on_start is not None:
        on_start(state)

    with timed("solve"):
        scores = solver(state)

    if on_finish is not None:
        on_finish(state, scores)
    return scores


def play_move(state: GameState, index: int) -> bool:
    """
    Fill `index` if it is empty. Returns whether the move was applied.

    A filled cell is left untouched. An index off the board still raises
    IndexError.
    """
    if not state.can_play(index):
        return False
    state.play(index, validated=True)
    return True


def select_move(
    state: GameState,
    solver: Optional[Solver] = None,
    scores: Optional[List[int]] = None,
) -> Optional[int]:
    """Lowest-index best move, or None if nothing can be played."""
    if scores is None:
        scores = solve_and_collect(state, solver)
    moves = best_moves(scores, state)
    return moves[0] if moves else None


def current_player(state: GameState) -> int:
    """Player 1 moves when an even number of cells are filled."""
    return 1 if state.amount_played() % 2 == 0 else 2


def winner(state: GameState) -> Optional[int]:
    """The player who made the last move on a finished board, else None."""
    if not state.is_game_over():
        return None
    return 1 if state.amount_played() % 2 == 1 else 2


# ---------------------------------------------------------------------------
# Interactive play
# ---------------------------------------------------------------------------

_MOVE_PROMPT = "Move (cell number, a/d to move cursor, enter to play cursor): "


def _human_turn(
    state: GameState,
    cursor: int,
    input_fn: Callable[[str], str],
    output_fn: Callable[[str], None],
    color: bool,
) -> Tuple[int, int]:
    """Prompt until a playable cell is chosen. Returns (move, new cursor)."""
    last = state.size() - 1
    output_fn(f"\nYour turn (Player {current_player(state)})")

    while True:
        raw = input_fn(_MOVE_PROMPT).strip().lower()

        if raw in ("a", "left"):
            cursor = max(0, cursor - 1)
            output_fn(render_board(state, cursor=cursor, color=color))
            continue
        if raw in ("d", "right"):
            cursor = min(last, cursor + 1)
            output_fn(render_board(state, cursor=cursor, color=color))
            continue

        if raw == "":
            index = cursor
        else:
            try:
                index = int(raw)
            except ValueError:
                output_fn(f"Invalid input: {raw!r}")
                continue

        if not in_bounds(state.cells, index):
            output_fn(f"Cell {index} is off the board (0-{last})")
            continue
        if not state.can_play(index):
            output_fn(f"Cell {index} is already filled")
            continue
        return index, index


def start_game(
    config: Optional[Config] = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    color: bool = True,
) -> Optional[int]:
    """
    Main entry point: play one game on the terminal.

    Returns the winning player, or None if the game was interrupted or the
    board filled up without a run (boards shorter than three cells).
    """
    config = config or Config()
    human_set = set(config.human_players)
    solver = config.solver

    def _announce(_state: GameState) -> None:
        output_fn("Calculating...")

    def _log_table(solved: GameState, cell_scores: List[int]) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            for line in move_table(solved, cell_scores):
                logger.debug(line)

    state = new_game(config.board_size)
    cursor = 0

    output_fn(
        f"Treblecross on {state.size()} cells. "
        f"Solver: {config.solver_name}. "
        f"Humans: {', '.join(map(str, sorted(human_set))) or 'none'}"
    )

    try:
        scores = solve_and_collect(state, solver, on_start=_announce, on_finish=_log_table)

        while not state.is_game_over():
            if board_full(state.cells):
                output_fn(render_game(state, color=color))
                output_fn("\nBoard full without three in a row - no winner")
                return None

            shown = scores if config.show_scores else None
            output_fn(render_game(state, shown, cursor=cursor, color=color))

            player = current_player(state)
            if player in human_set:
                move, cursor = _human_turn(state, cursor, input_fn, output_fn, color)
                output_fn(f"\nYou played: {move}")
            else:
                move = select_move(state, scores=scores)
                output_fn(f"\nComputer (Player {player}) played: {move}")

            play_move(state, move)
            logger.debug("Player %d played %d -> %r", player, move, state)

            if not state.is_game_over():
                scores = solve_and_collect(state, solver, on_start=_announce, on_finish=_log_table)

        output_fn(render_game(state, color=color))
        result = winner(state)
        output_fn(f"\nGame finished! Player {result} won!")
        return result

    except (KeyboardInterrupt, EOFError):
        output_fn("\nInterrupted - game abandoned")
        return None
    except Exception:
        logger.exception("Fatal error in game loop")
        raise


__all__ = [
    "new_game",
    "solve_and_collect",
    "play_move",
    "select_move",
    "current_player",
    "winner",
    "start_game",
]
