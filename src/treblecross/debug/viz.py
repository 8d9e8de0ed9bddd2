"""
Terminal rendering for a Treblecross board and its score row.

Each cell takes a fixed-width column so the score printed under a cell
lines up with it:

       .    X    .    .    .
      -2   -5    2   -2   -2
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from treblecross.core.types import Outcome
from treblecross.games.game_state import CELL_STRINGS, GameState
from treblecross.solver.negamax import classify

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
DIM = "\033[2m"

FG = {
    "green": "\033[38;5;28m",
    "red": "\033[38;5;124m",
    "yellow": "\033[38;5;142m",
    "gray": "\033[38;5;245m",
    "white": "\033[38;5;255m",
}

OUTCOME_COLORS = {
    Outcome.WIN: FG["green"],
    Outcome.DRAW: FG["yellow"],
    Outcome.LOSS: FG["red"],
    Outcome.UNPLAYABLE: FG["gray"],
}

CELL_WIDTH = 4

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "right") -> str:
    gap = max(0, width - visible_len(text))
    if align == "left":
        return text + " " * gap
    return " " * gap + text


def _paint(text: str, style: str, color: bool) -> str:
    return f"{style}{text}{RESET}" if color and style else text


# ═══════════════════════════════════════════════════════════════════════════════
# Rows
# ═══════════════════════════════════════════════════════════════════════════════


def render_board(state: GameState, cursor: Optional[int] = None, color: bool = True) -> str:
    """Cell row; the cursor cell is drawn red (or bracketed without color)."""
    parts: List[str] = []
    for i, filled in enumerate(state.cells.tolist()):
        glyph = CELL_STRINGS[filled]
        if i == cursor:
            glyph = _paint(glyph, FG["red"], color) if color else f"[{glyph}]"
        else:
            glyph = _paint(glyph, FG["white"], color)
        parts.append(pad(glyph, CELL_WIDTH) + " ")
    return "".join(parts).rstrip()


def render_scores(
    scores: Sequence[int],
    state: Optional[GameState] = None,
    color: bool = True,
) -> str:
    """Score row; colored by outcome when the state is given."""
    outcomes = classify(list(scores), state) if state is not None else None
    parts: List[str] = []
    for i, score in enumerate(scores):
        text = str(score)
        if outcomes is not None:
            text = _paint(text, OUTCOME_COLORS[outcomes[i]], color)
        parts.append(pad(text, CELL_WIDTH) + " ")
    return "".join(parts).rstrip()


def render_index(size: int) -> str:
    """Cell numbers, for typing a move."""
    return "".join(pad(str(i), CELL_WIDTH) + " " for i in range(size)).rstrip()


def render_game(
    state: GameState,
    scores: Optional[Sequence[int]] = None,
    cursor: Optional[int] = None,
    color: bool = True,
) -> str:
    """Index row, board row and (optionally) score row."""
    lines = [
        _paint(render_index(state.size()), DIM, color),
        render_board(state, cursor=cursor, color=color),
    ]
    if scores is not None:
        lines.append(render_scores(scores, state, color=color))
    return "\n".join(lines)


def move_table(state: GameState, scores: Sequence[int]) -> List[str]:
    """One plain-text line per cell: index, score and outcome."""
    outcomes = classify(list(scores), state)
    lines = [f"{'Cell':>4}  {'Score':>5}  Outcome", "-" * 24]
    for i, (score, outcome) in enumerate(zip(scores, outcomes)):
        lines.append(f"{i:>4}  {score:>5}  {outcome.name.lower()}")
    return lines
