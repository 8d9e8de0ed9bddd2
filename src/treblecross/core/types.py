"""
Core types and scoring conventions.

Scores are plain Python ints, always from the point of view of the player
about to move:
- Loss sentinel: -size, used for cells that are already filled
- Win score: (size + 1 - played) // 2, larger the earlier the game ends
- Everything else is the negation of the opponent's best reply
"""

from __future__ import annotations

from enum import Enum, auto


# Consecutive filled cells that end the game
RUN_LENGTH = 3


class Outcome(Enum):
    WIN = auto()
    DRAW = auto()
    LOSS = auto()
    UNPLAYABLE = auto()


def loss_sentinel(size: int) -> int:
    """Score for a cell that cannot be played."""
    return -size


def win_score(size: int, played: int) -> int:
    """Score for a move that completes a run right now."""
    return (size + 1 - played) // 2


def max_reachable_score(size: int, played: int) -> int:
    """
    Best score a non-winning move can still reach.

    A move that does not end the game lets the opponent move next, so the
    earliest the mover can finish is one full round later.
    """
    return (size - 1 - played) // 2


def score_outcome(score: int, playable: bool) -> Outcome:
    """Classify a single cell score."""
    if not playable:
        return Outcome.UNPLAYABLE
    if score > 0:
        return Outcome.WIN
    if score < 0:
        return Outcome.LOSS
    return Outcome.DRAW
