"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gobblet.core.move import GameMove
    from gobblet.core.position import Position
    from gobblet.engine.score import Score


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 2


@dataclass(slots=True, frozen=True)
class RankedMove:
    """A root move with the score its subtree backed up."""

    move: GameMove
    score: Score


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: GameMove | None
    score: Score
    depth: int
    nodes: int
    ranked_moves: tuple[RankedMove, ...] = ()
    resolved: bool = False


class IEngine(Protocol):
    """Protocol for engines used by the driver."""

    def search(self, position: Position, limits: SearchLimits) -> SearchResult: ...
