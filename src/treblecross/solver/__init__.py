"""
Solver module - exhaustive negamax search over Treblecross boards.

Both variants return one integer score per cell and agree exactly:
    solve          plain negamax, recomputes every subtree
    solve_pruned   alpha-beta, skips replies that cannot change the result
"""

from treblecross.solver.negamax import SearchStats, solve, best_moves, classify
from treblecross.solver.alphabeta import solve_pruned

__all__ = [
    "SearchStats",
    "solve",
    "solve_pruned",
    "best_moves",
    "classify",
]
