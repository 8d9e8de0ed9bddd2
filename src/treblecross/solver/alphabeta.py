"""
Alpha-beta variant of the negamax solver.

Top-level cells are searched with a window wider than any reachable score,
so the returned list is identical to `negamax.solve`. Pruning happens one
level down, where only the best reply matters:

- an immediate winning move ends the position at once
- beta is capped at the best score a non-winning move can still reach; if
  alpha already meets the cap, the cap is returned without recursing
- a reply scoring >= beta cuts the position off
"""

from __future__ import annotations

import logging
from typing import List, Optional

from treblecross.core.types import loss_sentinel, max_reachable_score, win_score
from treblecross.games.game_state import GameState
from treblecross.solver.negamax import SearchStats

logger = logging.getLogger(__name__)


def _position_value(
    state: GameState,
    alpha: int,
    beta: int,
    depth: int,
    stats: SearchStats,
) -> int:
    """Fail-hard negamax value of the position for the side to move."""
    stats.visit(depth)

    size = state.size()
    played = state.amount_played()
    moves = state.empty_cells().tolist()

    if not moves:
        return loss_sentinel(size)

    for x in moves:
        if state.is_winning_move(x):
            return win_score(size, played)

    # The cap only holds while the opponent still has a cell to answer with
    if played + 1 < size:
        ceiling = max_reachable_score(size, played)
        if beta > ceiling and alpha >= ceiling:
            stats.cutoffs += 1
            return ceiling

    for x in moves:
        child = state.copy()
        child.play(x, validated=True)
        score = -_position_value(child, -beta, -alpha, depth + 1, stats)
        if score >= beta:
            stats.cutoffs += 1
            return score
        if score > alpha:
            alpha = score

    return alpha


def solve_pruned(state: GameState, stats: Optional[SearchStats] = None) -> List[int]:
    """Same scores as `negamax.solve`, computed with alpha-beta pruning."""
    if stats is None:
        stats = SearchStats()
    stats.visit(0)

    size = state.size()
    played = state.amount_played()
    window = size + 1
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
        scores.append(-_position_value(child, -window, window, 1, stats))

    logger.debug(
        "alphabeta size=%d played=%d nodes=%d depth=%d cutoffs=%d",
        size, played, stats.nodes, stats.max_depth, stats.cutoffs,
    )
    return scores
