"""Core domain layer — pure game logic with zero external dependencies.

Quick start::

    from gobblet.core import MoveGenerator, Position

    pos = Position.initial()
    for move, child in MoveGenerator(pos).generate_children():
        print(move)
"""

from gobblet.core.board import Board
from gobblet.core.enums import Color, GameResult
from gobblet.core.move import GameMove, Move, Place, parse_move
from gobblet.core.move_generator import MoveGenerator
from gobblet.core.position import Position
from gobblet.core.rules import Rules
from gobblet.core.stack import Stack
from gobblet.core.types import (
    ALL_CELLS,
    BOARD_DIM,
    NUM_EACH_SIZE,
    NUM_SIZES,
    Cell,
    cell_name,
    is_diagonal,
    is_valid_cell,
    make_cell,
    parse_cell,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    # Types / helpers
    "ALL_CELLS",
    "BOARD_DIM",
    "NUM_EACH_SIZE",
    "NUM_SIZES",
    "Cell",
    "cell_name",
    "is_diagonal",
    "is_valid_cell",
    "make_cell",
    "parse_cell",
    # Domain objects
    "Board",
    "GameMove",
    "Move",
    "MoveGenerator",
    "Place",
    "Position",
    "Rules",
    "Stack",
    "parse_move",
]
