"""
Configuration and solver registry.
"""

from typing import List, Optional

from treblecross.solver import solve, solve_pruned


# ---------------------------------------------------------------------------
# Solver Registry
# ---------------------------------------------------------------------------

SOLVERS = {
    "negamax": solve,
    "alphabeta": solve_pruned,
}

DEFAULT_SOLVER = "alphabeta"


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_BOARD_SIZE = 5

# Exhaustive search stops being interactive somewhere past this size
PRACTICAL_SIZE_LIMIT = 20

NUM_PLAYERS = 2


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        solver: str = DEFAULT_SOLVER,
        human_players: Optional[List[int]] = None,
        show_scores: bool = True,
    ):
        if board_size < 0:
            raise ValueError(f"Board size must be non-negative, got {board_size}")

        self.board_size = board_size
        self.solver_name = solver
        self.solver = SOLVERS[solver]
        self.human_players = [1] if human_players is None else sorted(set(human_players))
        self.show_scores = show_scores

    @property
    def self_play(self) -> bool:
        return not self.human_players
