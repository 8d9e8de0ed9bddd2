"""
Factory functions for creating boards and solvers.
"""

from typing import Callable, List

from treblecross.games.game_state import GameState
from treblecross.utils.config import SOLVERS

Solver = Callable[..., List[int]]


def create_game(board_size: int) -> GameState:
    """
    Create an empty board.

    Args:
        board_size: Number of cells (0 is allowed and gives a board with no moves)

    Returns:
        Fresh GameState
    """
    return GameState(board_size)


def create_solver(solver_name: str) -> Solver:
    """
    Look up a solver by name.

    Args:
        solver_name: Key from SOLVERS registry (e.g., "alphabeta")

    Returns:
        Callable taking a GameState and returning one score per cell
    """
    if solver_name not in SOLVERS:
        available = ", ".join(SOLVERS.keys())
        raise ValueError(f"Unknown solver: {solver_name}. Available: {available}")

    return SOLVERS[solver_name]
