"""
NumPy utilities for a 1-D strip of boolean cells.

All helpers are read-only: they never write into the array they are given.
"""

from __future__ import annotations

import numpy as np

from treblecross.core.types import RUN_LENGTH


def in_bounds(cells: np.ndarray, index: int) -> bool:
    """Return True if index is inside the strip (negative indices are not)."""
    return 0 <= index < cells.shape[0]


def has_run(cells: np.ndarray, length: int = RUN_LENGTH) -> bool:
    """
    Return True if the strip holds `length` or more consecutive filled cells.

    ANDs `length` shifted slices together, so a True anywhere in the result
    marks the start of a run.
    """
    n = cells.shape[0]
    if length <= 0:
        return True
    if n < length:
        return False

    span = n - length + 1
    window = cells[:span].copy()
    for offset in range(1, length):
        window &= cells[offset:offset + span]
    return bool(window.any())


def board_full(cells: np.ndarray) -> bool:
    """Return True if every cell is filled."""
    return bool(np.all(cells))
