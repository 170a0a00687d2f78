"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from gobblet.core.board import Board
from gobblet.core.enums import Color
from gobblet.core.position import Position
from gobblet.core.stack import Stack
from gobblet.core.types import NUM_EACH_SIZE, NUM_SIZES, parse_cell

_STACK_COLORS: dict[str, Color] = {".": Color.EMPTY, "W": Color.WHITE, "B": Color.BLACK}

PositionFactory = Callable[..., Position]


def build_position(stacks: dict[str, str], turn: Color = Color.WHITE) -> Position:
    """Position from ``{"a1": "W.B."}`` style stacks, smallest size first.

    Reserves are whatever the board leaves over, so the piece inventory
    always adds up.
    """
    board = Board()
    for name, text in stacks.items():
        board[parse_cell(name)] = Stack(tuple(_STACK_COLORS[ch] for ch in text))

    def reserve(color: Color) -> tuple[int, ...]:
        return tuple(
            NUM_EACH_SIZE - board.placed_count(color, size) for size in range(NUM_SIZES)
        )

    return Position(
        board=board,
        turn=turn,
        white_reserve=reserve(Color.WHITE),
        black_reserve=reserve(Color.BLACK),
    )


@pytest.fixture
def make_position() -> PositionFactory:
    """Factory for hand-built positions, see :func:`build_position`."""
    return build_position


@pytest.fixture
def initial_position() -> Position:
    return Position.initial()


@pytest.fixture
def white_to_win(make_position: PositionFactory) -> Position:
    """White owns a1, b1, c1; placing on d1 completes the first row."""
    return make_position(
        {
            "a1": "W...",
            "b1": ".W..",
            "c1": "..W.",
            "a4": "B...",
            "b4": ".B..",
            "c3": "..B.",
        },
        turn=Color.WHITE,
    )
