"""Position - reserves, board and side to move."""

from __future__ import annotations

from gobblet.core.board import Board
from gobblet.core.enums import Color
from gobblet.core.move import GameMove, Move, Place
from gobblet.core.types import NUM_EACH_SIZE, NUM_SIZES, Cell

_FULL_RESERVE: tuple[int, ...] = (NUM_EACH_SIZE,) * NUM_SIZES


class Position:
    """Full game state: both reserves, the board and the side to move.

    Positions are treated as immutable: :meth:`placed`, :meth:`relocated` and
    :meth:`play` return new positions.  :meth:`apply_move` is the one
    in-place operation and is meant for a driver walking a single game line,
    never for positions already handed to the search tree.
    """

    __slots__ = ("board", "turn", "white_reserve", "black_reserve")

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        white_reserve: tuple[int, ...] = _FULL_RESERVE,
        black_reserve: tuple[int, ...] = _FULL_RESERVE,
    ) -> None:
        self.board = board if board is not None else Board()
        self.turn = turn
        # Pieces of each size not yet on the board, indexed by size.
        self.white_reserve = white_reserve
        self.black_reserve = black_reserve

    @classmethod
    def initial(cls) -> Position:
        """Empty board, full reserves, white to move."""
        return cls()

    def reserve(self, color: Color) -> tuple[int, ...]:
        return self.white_reserve if color == Color.WHITE else self.black_reserve

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: GameMove) -> None:
        """Play *move* in place and pass the turn.

        *move* must be legal here; nothing is checked.
        """
        match move:
            case Place(size=size, dest=dest):
                self._place(size, dest)
            case Move(source=source, dest=dest):
                self._relocate(source, dest, self.board[source].top - 1)
        self.turn = self.turn.opposite

    def play(self, move: GameMove) -> Position:
        """New position reached by playing *move*."""
        child = self.copy()
        child.apply_move(move)
        return child

    def placed(self, size: int, dest: Cell) -> Position:
        """New position after the side to move places a *size* piece on *dest*."""
        child = self.copy()
        child._place(size, dest)
        child.turn = child.turn.opposite
        return child

    def relocated(self, source: Cell, dest: Cell, size: int) -> Position:
        """New position after the *size* piece on *source* moves to *dest*."""
        child = self.copy()
        child._relocate(source, dest, size)
        child.turn = child.turn.opposite
        return child

    def _place(self, size: int, dest: Cell) -> None:
        self.board[dest] = self.board[dest].with_piece(size, self.turn)
        reserve = list(self.reserve(self.turn))
        reserve[size] -= 1
        if self.turn == Color.WHITE:
            self.white_reserve = tuple(reserve)
        else:
            self.black_reserve = tuple(reserve)

    def _relocate(self, source: Cell, dest: Cell, size: int) -> None:
        color = self.board[source].pieces[size]
        self.board[source] = self.board[source].without_piece(size)
        self.board[dest] = self.board[dest].with_piece(size, color)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            turn=self.turn,
            white_reserve=self.white_reserve,
            black_reserve=self.black_reserve,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.turn == other.turn
            and self.white_reserve == other.white_reserve
            and self.black_reserve == other.black_reserve
            and self.board == other.board
        )

    def __repr__(self) -> str:
        return (
            f"{self.board!r}\n"
            f"to move: {self.turn}  "
            f"white: {list(self.white_reserve)}  black: {list(self.black_reserve)}"
        )
