"""Tests for the static evaluator."""

from gobblet.core.enums import Color
from gobblet.core.position import Position
from gobblet.engine.evaluation import evaluate
from gobblet.engine.score import BLACK_FAVORED, WHITE_FAVORED, Score


class TestHeuristic:
    def test_initial_position_is_level(self) -> None:
        assert evaluate(Position.initial()) == Score.balanced(0)

    def test_diagonal_cell_counts_three(self, make_position) -> None:
        pos = make_position({"a1": "W..."}, turn=Color.BLACK)
        assert evaluate(pos) == Score.balanced(3)

    def test_anti_diagonal_cell_counts_three(self, make_position) -> None:
        pos = make_position({"a4": "B..."}, turn=Color.WHITE)
        assert evaluate(pos) == Score.balanced(-3)

    def test_other_cell_counts_two(self, make_position) -> None:
        pos = make_position({"b1": "W...", "d3": "..B."}, turn=Color.WHITE)
        assert evaluate(pos) == Score.balanced(0)

    def test_only_top_piece_counts(self, make_position) -> None:
        pos = make_position({"b2": "W.B."}, turn=Color.WHITE)
        assert evaluate(pos) == Score.balanced(-3)

    def test_mixed_board(self, white_to_win: Position) -> None:
        # a1 +3, b1 +2, c1 +2, a4 -3, b4 -2, c3 -3
        assert evaluate(white_to_win) == Score.balanced(-1)


class TestWinDetection:
    def test_white_row(self, make_position) -> None:
        pos = make_position(
            {
                "a2": "W...",
                "b2": ".W..",
                "c2": "..W.",
                "d2": "B..W",
                "a1": "...B",
                "c4": "..B.",
            },
            turn=Color.BLACK,
        )
        assert evaluate(pos) == WHITE_FAVORED

    def test_black_diagonal(self, make_position) -> None:
        pos = make_position(
            {"a1": "B...", "b2": "W.B.", "c3": ".B..", "d4": "...B", "d1": "W..."},
            turn=Color.WHITE,
        )
        assert evaluate(pos) == BLACK_FAVORED

    def test_line_of_side_to_move_is_not_a_win(self, make_position) -> None:
        pos = make_position(
            {"a1": "W...", "a2": ".W..", "a3": "..W.", "a4": "...W"},
            turn=Color.WHITE,
        )
        # a1 +3, a2 +2, a3 +2, a4 +3
        assert evaluate(pos) == Score.balanced(10)
