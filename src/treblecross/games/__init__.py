"""
Games module - the Treblecross board and its run-detection rules.
"""

from treblecross.games.game_state import GameState, CELL_STRINGS
from treblecross.games.game_rules import in_bounds, has_run, board_full

__all__ = [
    "GameState",
    "CELL_STRINGS",
    "in_bounds",
    "has_run",
    "board_full",
]
