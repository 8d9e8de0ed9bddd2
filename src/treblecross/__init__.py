"""
Treblecross - exact optimal-play scores for Treblecross.

Treblecross is played on a single strip of cells. Both players fill empty
cells, and the game ends as soon as three consecutive cells are filled.

Quick Start:
    from treblecross import new_game, solve_and_collect, play_move

    game = new_game(7)
    play_move(game, 3)
    print(solve_and_collect(game))   # one score per cell for the next player

Modules:
    core     - Scoring conventions and the Outcome enum
    games    - GameState (the board) and run-detection rules
    solver   - Negamax search and its alpha-beta variant
    utils    - Configuration and factories
    debug    - Profiling and terminal rendering
"""

from treblecross.api import (
    new_game,
    solve_and_collect,
    play_move,
    select_move,
    winner,
    start_game,
)

from treblecross.games import GameState
from treblecross.solver import SearchStats, solve, solve_pruned

__version__ = "1.0.0"

__all__ = [
    # Main API
    "new_game",
    "solve_and_collect",
    "play_move",
    "select_move",
    "winner",
    "start_game",
    # Types
    "GameState",
    "SearchStats",
    # Solvers
    "solve",
    "solve_pruned",
]
