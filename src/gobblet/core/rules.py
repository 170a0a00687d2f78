"""Winning-line rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gobblet.core.enums import Color, GameResult
from gobblet.core.types import BOARD_DIM, Cell, make_cell

if TYPE_CHECKING:
    from gobblet.core.position import Position


def _build_lines() -> tuple[tuple[Cell, ...], ...]:
    cells = range(BOARD_DIM)
    rows = [tuple(make_cell(r, c) for c in cells) for r in cells]
    cols = [tuple(make_cell(r, c) for r in cells) for c in cells]
    diagonal = tuple(make_cell(i, i) for i in cells)
    anti_diagonal = tuple(make_cell(i, BOARD_DIM - i - 1) for i in cells)
    return (*rows, *cols, diagonal, anti_diagonal)


_LINES: tuple[tuple[Cell, ...], ...] = _build_lines()


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def winning_lines() -> tuple[tuple[Cell, ...], ...]:
        """Every row, column and both diagonals."""
        return _LINES

    @staticmethod
    def has_line(position: Position, color: Color) -> bool:
        """Whether *color* shows on top of every cell of some line."""
        top_colors = position.board.top_colors()
        return any(
            all(top_colors[row][col] == color for row, col in line) for line in _LINES
        )

    @staticmethod
    def winner(position: Position) -> Color:
        """Side that won with the last move, EMPTY if nobody has.

        Only the side that just moved is checked: a move can only be credited
        to its own mover.
        """
        last_mover = position.turn.opposite
        if Rules.has_line(position, last_mover):
            return last_mover
        return Color.EMPTY

    @staticmethod
    def game_result(position: Position) -> GameResult:
        winner = Rules.winner(position)
        if winner == Color.WHITE:
            return GameResult.WHITE_WINS
        if winner == Color.BLACK:
            return GameResult.BLACK_WINS
        return GameResult.IN_PROGRESS
