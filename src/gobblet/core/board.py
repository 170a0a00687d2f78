"""Board - a BOARD_DIM x BOARD_DIM grid of stacks."""

from __future__ import annotations

from gobblet.core.enums import Color
from gobblet.core.stack import Stack
from gobblet.core.types import BOARD_DIM, NUM_SIZES, Cell, cell_name, make_cell


class Board:
    """Grid of :class:`Stack` values addressed by ``(row, col)``.

    Stacks are immutable, so replacing one through ``board[cell] = stack`` is
    the only way the grid changes and :meth:`copy` only has to copy the rows.
    """

    __slots__ = ("_stacks",)

    def __init__(self) -> None:
        self._stacks: list[list[Stack]] = [
            [Stack.empty() for _ in range(BOARD_DIM)] for _ in range(BOARD_DIM)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Stack:
        row, col = cell
        return self._stacks[row][col]

    def __setitem__(self, cell: Cell, stack: Stack) -> None:
        row, col = cell
        self._stacks[row][col] = stack

    # -- Query helpers ------------------------------------------------------

    def tops(self) -> list[list[int]]:
        """``tops()[row][col]`` is the top index of every stack."""
        return [[stack.top for stack in row] for row in self._stacks]

    def top_colors(self) -> list[list[Color]]:
        """``top_colors()[row][col]`` is the visible colour of every stack."""
        return [[stack.top_color for stack in row] for row in self._stacks]

    def placed_count(self, color: Color, size: int) -> int:
        """Number of *color*'s pieces of *size* currently on the board."""
        return sum(
            1 for row in self._stacks for stack in row if stack.pieces[size] == color
        )

    def is_empty(self) -> bool:
        return all(stack.is_empty for row in self._stacks for stack in row)

    # -- Copying --------------------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._stacks = [row.copy() for row in self._stacks]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._stacks == other._stacks

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_DIM - 1, -1, -1):
            cells = [str(self[make_cell(row, col)]) for col in range(BOARD_DIM)]
            rows.append(f"{row + 1} {' '.join(cells)}")
        files = [cell_name(make_cell(0, col))[0] for col in range(BOARD_DIM)]
        rows.append("  " + " ".join(f.ljust(NUM_SIZES) for f in files).rstrip())
        return "\n".join(rows)
