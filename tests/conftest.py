"""
Shared test fixtures for treblecross tests.

Design principles:
- Boards built from literal bit strings so positions read at a glance
- Small boards only: exhaustive search is exponential
"""

from typing import Callable, List

import pytest

from treblecross.debug.profiler import clear_timing_stats
from treblecross.games.game_state import GameState
from treblecross.solver import solve, solve_pruned


def _from_bits(bits: str) -> GameState:
    return GameState.from_cells(ch == "1" for ch in bits)


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board() -> Callable[[str], GameState]:
    """Builder: GameState from a string like "11010" (1 = filled)."""
    return _from_bits


@pytest.fixture
def all_boards() -> Callable[[int], List[GameState]]:
    """Builder: every filling of a board of the given size."""
    def build(size: int) -> List[GameState]:
        if size == 0:
            return [GameState(0)]
        return [_from_bits(format(n, f"0{size}b")) for n in range(2 ** size)]
    return build


@pytest.fixture
def empty5() -> GameState:
    """Fresh 5-cell board."""
    return GameState(5)


@pytest.fixture
def two_adjacent() -> GameState:
    """5-cell board with cells 0 and 1 filled (a win is on offer at 2)."""
    state = GameState(5)
    state.play(0)
    state.play(1)
    return state


# =============================================================================
# Solver Fixtures
# =============================================================================

@pytest.fixture(params=["negamax", "alphabeta"])
def any_solver(request) -> Callable[[GameState], List[int]]:
    """Each solver variant in turn."""
    return {"negamax": solve, "alphabeta": solve_pruned}[request.param]


@pytest.fixture(autouse=True)
def _reset_timings():
    """Keep the global timing registry from leaking between tests."""
    clear_timing_stats()
    yield
    clear_timing_stats()
