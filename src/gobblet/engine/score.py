"""Score type and its total order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from gobblet.core.enums import Color


class ScoreKind(IntEnum):
    """Ordered so that comparing kinds first gives the score order."""

    BLACK_FAVORED = -1
    BALANCED = 0
    WHITE_FAVORED = 1


@dataclass(frozen=True, slots=True, order=True)
class Score:
    """Either a win marker for one side or a heuristic value.

    Ordering is from white's point of view: a white win beats everything, a
    black win loses to everything, and balanced scores compare by value.
    Win markers always carry ``value == 0`` so that two wins for the same
    side are equal.
    """

    kind: ScoreKind
    value: int = 0

    @classmethod
    def balanced(cls, value: int) -> Score:
        return cls(ScoreKind.BALANCED, value)

    @classmethod
    def for_color(cls, color: Color) -> Score:
        """Win marker for *color*."""
        if color == Color.WHITE:
            return WHITE_FAVORED
        if color == Color.BLACK:
            return BLACK_FAVORED
        raise ValueError("Color.EMPTY cannot win")

    @property
    def is_win(self) -> bool:
        return self.kind != ScoreKind.BALANCED

    @property
    def favored_color(self) -> Color:
        """Side holding the win marker, EMPTY for balanced scores."""
        if self.kind == ScoreKind.WHITE_FAVORED:
            return Color.WHITE
        if self.kind == ScoreKind.BLACK_FAVORED:
            return Color.BLACK
        return Color.EMPTY

    def __str__(self) -> str:
        if self.kind == ScoreKind.BALANCED:
            return f"{self.value:+d}"
        return f"{self.favored_color} wins"


WHITE_FAVORED = Score(ScoreKind.WHITE_FAVORED)
BLACK_FAVORED = Score(ScoreKind.BLACK_FAVORED)


def best_for(color: Color, scores: Iterable[Score]) -> Score:
    """Maximum of *scores* for white, minimum for black."""
    return max(scores) if color == Color.WHITE else min(scores)
