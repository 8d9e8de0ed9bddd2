"""
Exact negamax solver for Treblecross.

Scores every cell of the board from the point of view of the player about to
move. No caching: every subtree is recomputed, so cost grows exponentially
with the number of empty cells. Boards past ~20 cells are impractical.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from treblecross.core.types import Outcome, loss_sentinel, score_outcome, win_score
from treblecross.games.game_state import GameState

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one solve call."""
    nodes: int = 0
    max_depth: int = 0
    cutoffs: int = 0

    def visit(self, depth: int) -> None:
        self.nodes += 1
        if depth > self.max_depth:
            self.max_depth = depth


def _negamax(state: GameState, depth: int, stats: SearchStats) -> List[int]:
    stats.visit(depth)

    size = state.size()
    played = state.amount_played()
    scores: List[int] = []

    for x in range(size):
        if not state.can_play(x):
            scores.append(loss_sentinel(size))
            continue

        if state.is_winning_move(x):
            scores.append(win_score(size, played))
            continue

        child = state.copy()
        child.play(x, validated=True)
        scores.append(-max(_negamax(child, depth + 1, stats)))

    return scores


def solve(state: GameState, stats: Optional[SearchStats] = None) -> List[int]:
    """
    Negamax value of every cell.

    Returns:
        List of length state.size():
        - filled cell: -size
        - immediate win: (size + 1 - played) // 2
        - otherwise: -max(solve(state after the move))
    """
    if stats is None:
        stats = SearchStats()
    scores = _negamax(state, 0, stats)
    logger.debug(
        "negamax size=%d played=%d nodes=%d depth=%d",
        state.size(), state.amount_played(), stats.nodes, stats.max_depth,
    )
    return scores


def best_moves(scores: List[int], state: GameState) -> List[int]:
    """Playable cells sharing the best score. Empty if nothing is playable."""
    playable = [x for x in range(state.size()) if state.can_play(x)]
    if not playable:
        return []
    best = max(scores[x] for x in playable)
    return [x for x in playable if scores[x] == best]


def classify(scores: List[int], state: GameState) -> List[Outcome]:
    """Outcome of playing each cell."""
    return [score_outcome(s, state.can_play(x)) for x, s in enumerate(scores)]
