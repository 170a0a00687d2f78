"""Move value objects.

A game move is either a :class:`Place`, bringing a piece from the mover's
reserve onto the board, or a :class:`Move`, lifting the top piece of one
stack onto another.  Neither is tied to a position.

Text form: ``P<size>@<cell>`` for a placement (``P2@b3``) and
``<source>-<dest>`` for a relocation (``a1-b3``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from gobblet.core.types import NUM_SIZES, Cell, cell_name, parse_cell


@dataclass(frozen=True, slots=True)
class Place:
    """Put a reserved piece of *size* on *dest*."""

    size: int
    dest: Cell

    def __str__(self) -> str:
        return f"P{self.size}@{cell_name(self.dest)}"


@dataclass(frozen=True, slots=True)
class Move:
    """Lift the top piece of *source* onto *dest*, keeping its size slot."""

    source: Cell
    dest: Cell

    def __str__(self) -> str:
        return f"{cell_name(self.source)}-{cell_name(self.dest)}"


GameMove: TypeAlias = Place | Move


def parse_move(text: str) -> GameMove:
    """Parse the text form produced by ``str(move)``."""
    if text.startswith("P"):
        size_text, sep, dest = text[1:].partition("@")
        if not sep or not size_text.isdigit() or int(size_text) >= NUM_SIZES:
            raise ValueError(f"Invalid placement: {text!r}")
        return Place(int(size_text), parse_cell(dest))

    source, sep, dest = text.partition("-")
    if not sep:
        raise ValueError(f"Invalid move: {text!r}")
    return Move(parse_cell(source), parse_cell(dest))
