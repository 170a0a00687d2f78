"""Tests for Stack and Board."""

import pytest

from gobblet.core.board import Board
from gobblet.core.enums import Color
from gobblet.core.stack import Stack
from gobblet.core.types import ALL_CELLS, NUM_SIZES, make_cell


class TestStack:
    def test_empty_stack(self) -> None:
        stack = Stack.empty()
        assert stack.top == 0
        assert stack.top_color == Color.EMPTY
        assert stack.is_empty
        assert not stack.is_full

    def test_top_is_one_past_largest_piece(self) -> None:
        stack = Stack.empty().with_piece(1, Color.WHITE)
        assert stack.top == 2

    def test_top_color_is_largest_piece(self) -> None:
        stack = Stack.empty().with_piece(0, Color.WHITE).with_piece(2, Color.BLACK)
        assert stack.top_color == Color.BLACK
        assert stack.top == 3

    def test_gap_below_top_does_not_matter(self) -> None:
        stack = Stack.empty().with_piece(3, Color.WHITE)
        assert stack.top == NUM_SIZES
        assert stack.is_full

    def test_without_piece_uncovers(self) -> None:
        stack = Stack.empty().with_piece(0, Color.WHITE).with_piece(2, Color.BLACK)
        lifted = stack.without_piece(2)
        assert lifted.top == 1
        assert lifted.top_color == Color.WHITE

    def test_with_piece_leaves_original(self) -> None:
        stack = Stack.empty()
        _ = stack.with_piece(0, Color.WHITE)
        assert stack.is_empty

    def test_str(self) -> None:
        stack = Stack.empty().with_piece(0, Color.WHITE).with_piece(2, Color.BLACK)
        assert str(stack) == "W.B."


class TestBoard:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert board.is_empty()
        assert all(board[cell] == Stack.empty() for cell in ALL_CELLS)

    def test_set_and_get(self) -> None:
        board = Board()
        stack = Stack.empty().with_piece(2, Color.BLACK)
        board[make_cell(1, 3)] = stack
        assert board[make_cell(1, 3)] == stack
        assert not board.is_empty()

    def test_tops_and_top_colors(self) -> None:
        board = Board()
        board[make_cell(2, 1)] = Stack.empty().with_piece(0, Color.BLACK).with_piece(
            1, Color.WHITE
        )
        assert board.tops()[2][1] == 2
        assert board.top_colors()[2][1] == Color.WHITE
        assert board.tops()[0][0] == 0
        assert board.top_colors()[0][0] == Color.EMPTY

    def test_placed_count(self) -> None:
        board = Board()
        board[make_cell(0, 0)] = Stack.empty().with_piece(1, Color.WHITE)
        board[make_cell(3, 3)] = Stack.empty().with_piece(1, Color.WHITE)
        board[make_cell(2, 2)] = Stack.empty().with_piece(1, Color.BLACK)
        assert board.placed_count(Color.WHITE, 1) == 2
        assert board.placed_count(Color.BLACK, 1) == 1
        assert board.placed_count(Color.WHITE, 0) == 0

    def test_copy_is_independent(self) -> None:
        board = Board()
        clone = board.copy()
        clone[make_cell(0, 0)] = Stack.empty().with_piece(0, Color.WHITE)
        assert board.is_empty()
        assert clone != board

    def test_equality(self) -> None:
        a = Board()
        b = Board()
        assert a == b
        a[make_cell(1, 1)] = Stack.empty().with_piece(3, Color.BLACK)
        b[make_cell(1, 1)] = Stack.empty().with_piece(3, Color.BLACK)
        assert a == b

    @pytest.mark.parametrize("cell", [make_cell(0, 0), make_cell(3, 2)])
    def test_repr_shows_pieces(self, cell: tuple[int, int]) -> None:
        board = Board()
        board[cell] = Stack.empty().with_piece(0, Color.WHITE)
        assert "W..." in repr(board)
