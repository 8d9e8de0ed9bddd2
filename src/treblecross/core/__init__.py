"""
Core module - scoring conventions shared by the board and the solvers.
"""

from treblecross.core.types import (
    RUN_LENGTH,
    Outcome,
    loss_sentinel,
    win_score,
    max_reachable_score,
    score_outcome,
)

__all__ = [
    # Types
    "Outcome",
    # Constants
    "RUN_LENGTH",
    # Functions
    "loss_sentinel",
    "win_score",
    "max_reachable_score",
    "score_outcome",
]
