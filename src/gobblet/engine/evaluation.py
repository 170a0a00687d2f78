"""Static position evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gobblet.core.enums import Color
from gobblet.core.rules import Rules
from gobblet.core.types import ALL_CELLS, Cell, is_diagonal
from gobblet.engine.score import Score

if TYPE_CHECKING:
    from gobblet.core.position import Position

_DIAGONAL_WEIGHT = 3
_CELL_WEIGHT = 2

_CELL_WEIGHTS: dict[Cell, int] = {
    cell: _DIAGONAL_WEIGHT if is_diagonal(cell) else _CELL_WEIGHT
    for cell in ALL_CELLS
}
_COLOR_SIGN: dict[Color, int] = {Color.EMPTY: 0, Color.WHITE: 1, Color.BLACK: -1}


def evaluate(position: Position) -> Score:
    """Score *position* without searching.

    A completed line for the side that just moved is a win marker.  Otherwise
    every visible piece counts for its owner, diagonal cells more than the
    rest.
    """
    winner = Rules.winner(position)
    if winner != Color.EMPTY:
        return Score.for_color(winner)

    top_colors = position.board.top_colors()
    total = 0
    for cell in ALL_CELLS:
        row, col = cell
        total += _COLOR_SIGN[top_colors[row][col]] * _CELL_WEIGHTS[cell]
    return Score.balanced(total)
