"""
GameState - a Treblecross strip.

Uses a numpy bool_ board:
    False = empty
    True  = filled (by either player; Treblecross pieces have no owner)
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from treblecross.games.game_rules import has_run, in_bounds

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {False: ".", True: "X"}


class GameState:
    """
    Lightweight 1-D board.

    The size is fixed at construction. Filled cells are never emptied again;
    the search explores futures by copying, never by undoing.
    """
    __slots__ = ('cells',)

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"Board size must be an integer, got {type(size).__name__}")
        if size < 0:
            raise ValueError(f"Board size must be non-negative, got {size}")
        self.cells = np.zeros(int(size), dtype=np.bool_)

    @classmethod
    def from_cells(cls, cells: Iterable) -> "GameState":
        """Build a state from any sequence of truthy/falsy values (copied)."""
        arr = np.array(list(cells), dtype=np.bool_)
        state = cls.__new__(cls)
        state.cells = arr
        return state

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        return int(self.cells.shape[0])

    def amount_played(self) -> int:
        """Number of filled cells, aka the number of moves made so far."""
        return int(np.count_nonzero(self.cells))

    def _check_index(self, index: int) -> None:
        # A bool would index numpy as a mask over the whole strip
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Cell index must be an integer, got {type(index).__name__}")
        if not in_bounds(self.cells, index):
            raise IndexError(f"Cell {index} is outside a board of size {self.size()}")

    def can_play(self, index: int) -> bool:
        """True if the cell is empty."""
        self._check_index(index)
        return not self.cells[index]

    def is_game_over(self) -> bool:
        """The game is over once three or more consecutive cells are filled."""
        return has_run(self.cells)

    def is_winning_move(self, index: int) -> bool:
        """True if filling `index` leaves a run of three anywhere on the board."""
        self._check_index(index)
        trial = self.cells.copy()
        trial[index] = True
        return has_run(trial)

    def empty_cells(self) -> np.ndarray:
        """Indices of the cells that can still be played."""
        return np.flatnonzero(~self.cells)

    # ------------------------------------------------------------------
    # Mutation & copying
    # ------------------------------------------------------------------

    def play(self, index: int, *, validated: bool = False) -> None:
        """
        Fill a cell. Mutates the state.

        Args:
            index: Cell to fill.
            validated: If True, skip the occupied check (caller guarantees
                       can_play(index)). Bounds are always checked.
        """
        self._check_index(index)
        if not validated and self.cells[index]:
            raise ValueError(f"Cell {index} is already filled")
        self.cells[index] = True

    def copy(self) -> "GameState":
        """Independent copy - board.copy() never shares storage."""
        state = GameState.__new__(GameState)
        state.cells = self.cells.copy()
        return state

    def reversed(self) -> "GameState":
        """Mirror image of the strip."""
        state = GameState.__new__(GameState)
        state.cells = self.cells[::-1].copy()
        return state

    # ------------------------------------------------------------------
    # Display & dunder helpers
    # ------------------------------------------------------------------

    def state_string(self) -> str:
        return " ".join(CELL_STRINGS[bool(v)] for v in self.cells)

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        bits = "".join("1" if v else "0" for v in self.cells)
        return f"GameState({bits!r})"
