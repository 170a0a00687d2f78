"""Core enumerations for the stacking-game domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Colour of a piece, or of the visible top of a stack.

    ``EMPTY`` marks a slot with no piece in it and has no opposite.
    """

    EMPTY = 0
    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> Color:
        if self is Color.EMPTY:
            raise ValueError("Color.EMPTY has no opposite")
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
