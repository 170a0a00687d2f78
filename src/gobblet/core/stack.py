"""Stack value object: the pieces stacked on one cell."""

from __future__ import annotations

from dataclasses import dataclass

from gobblet.core.enums import Color
from gobblet.core.types import NUM_SIZES

_EMPTY_PIECES: tuple[Color, ...] = (Color.EMPTY,) * NUM_SIZES


@dataclass(frozen=True, slots=True)
class Stack:
    """Immutable size-indexed stack of pieces.

    ``pieces[size]`` is the colour of the piece of that size in the stack, or
    :attr:`Color.EMPTY` when no such piece is present.  Size 0 is the smallest.
    """

    pieces: tuple[Color, ...] = _EMPTY_PIECES

    @classmethod
    def empty(cls) -> Stack:
        return cls()

    @property
    def top(self) -> int:
        """Next free size slot; equal to ``NUM_SIZES`` when the stack is full."""
        for size in range(NUM_SIZES - 1, -1, -1):
            if self.pieces[size] != Color.EMPTY:
                return size + 1
        return 0

    @property
    def top_color(self) -> Color:
        """Colour of the largest (visible) piece, EMPTY if there is none."""
        for color in reversed(self.pieces):
            if color != Color.EMPTY:
                return color
        return Color.EMPTY

    @property
    def is_full(self) -> bool:
        return self.top == NUM_SIZES

    @property
    def is_empty(self) -> bool:
        return self.top == 0

    def with_piece(self, size: int, color: Color) -> Stack:
        """Copy of this stack with *color*'s piece of *size* added."""
        pieces = list(self.pieces)
        pieces[size] = color
        return Stack(tuple(pieces))

    def without_piece(self, size: int) -> Stack:
        """Copy of this stack with the piece of *size* taken off."""
        return self.with_piece(size, Color.EMPTY)

    def __str__(self) -> str:
        return "".join(_STACK_CHARS[color] for color in self.pieces)


_STACK_CHARS: dict[Color, str] = {
    Color.EMPTY: ".",
    Color.WHITE: "W",
    Color.BLACK: "B",
}
