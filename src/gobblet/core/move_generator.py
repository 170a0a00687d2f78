"""Legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gobblet.core.move import GameMove, Move, Place
from gobblet.core.types import ALL_CELLS, NUM_SIZES

if TYPE_CHECKING:
    from gobblet.core.position import Position


class MoveGenerator:
    """Enumerates every legal move of the side to move in a :class:`Position`.

    Order is fixed: destinations in row-major order; for each destination the
    placements by ascending size, then the relocations by row-major source.
    """

    __slots__ = ("_position",)

    def __init__(self, position: Position) -> None:
        self._position = position

    def generate_children(self) -> list[tuple[GameMove, Position]]:
        """All legal moves paired with the positions they lead to."""
        pos = self._position
        reserve = pos.reserve(pos.turn)
        tops = pos.board.tops()
        children: list[tuple[GameMove, Position]] = []

        for dest in ALL_CELLS:
            dest_top = tops[dest[0]][dest[1]]
            if dest_top == NUM_SIZES:
                continue

            for size in range(dest_top, NUM_SIZES):
                if reserve[size] > 0:
                    children.append((Place(size, dest), pos.placed(size, dest)))

            for source in ALL_CELLS:
                source_top = tops[source[0]][source[1]]
                if source_top > dest_top and source != dest:
                    children.append(
                        (
                            Move(source, dest),
                            pos.relocated(source, dest, source_top - 1),
                        )
                    )

        return children

    def generate_moves(self) -> list[GameMove]:
        """Legal moves only, in generation order."""
        return [move for move, _ in self.generate_children()]
