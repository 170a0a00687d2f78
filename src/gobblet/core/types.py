"""Board geometry constants and cell coordinate helpers.

Cells are ``(row, col)`` tuples with row 0 at the top.  Names use a file
letter for the column and a 1-based row number, so ``(0, 0)`` is ``a1`` and
``(3, 3)`` is ``d4``.
"""

from __future__ import annotations

from typing import Final, TypeAlias

BOARD_DIM: Final = 4
NUM_SIZES: Final = 4
NUM_EACH_SIZE: Final = 3

Cell: TypeAlias = tuple[int, int]

_FILES: Final = "abcdefgh"[:BOARD_DIM]


def make_cell(row: int, col: int) -> Cell:
    return (row, col)


def is_valid_cell(cell: Cell) -> bool:
    """Check whether *cell* lies on the board."""
    row, col = cell
    return 0 <= row < BOARD_DIM and 0 <= col < BOARD_DIM


def is_diagonal(cell: Cell) -> bool:
    """Whether *cell* is on the main diagonal or the anti-diagonal."""
    row, col = cell
    return row == col or row == BOARD_DIM - col - 1


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (2, 1) → 'b3'."""
    row, col = cell
    return f"{_FILES[col]}{row + 1}"


def parse_cell(name: str) -> Cell:
    """Parse a cell name, e.g. 'b3' → (2, 1)."""
    if len(name) != 2 or name[0] not in _FILES or not name[1].isdigit():
        raise ValueError(f"Invalid cell name: {name!r}")
    cell = make_cell(int(name[1]) - 1, _FILES.index(name[0]))
    if not is_valid_cell(cell):
        raise ValueError(f"Invalid cell name: {name!r}")
    return cell


# Row-major order; move generation and evaluation both rely on it.
ALL_CELLS: Final[tuple[Cell, ...]] = tuple(
    make_cell(row, col) for row in range(BOARD_DIM) for col in range(BOARD_DIM)
)
