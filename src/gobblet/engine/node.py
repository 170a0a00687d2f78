"""Search tree nodes and minimax expansion.

Every :class:`Node` is in exactly one of three states:

* :class:`Leaf` - not searched yet, still holding its position;
* :class:`Branches` - expanded, owning one child node per legal move;
* :class:`Resolved` - its score is a forced win, so searching it deeper
  cannot change anything.

Nodes own their children outright; dropping a node drops its subtree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from gobblet.core.enums import Color
from gobblet.core.move import GameMove
from gobblet.core.move_generator import MoveGenerator
from gobblet.core.position import Position
from gobblet.engine.evaluation import evaluate
from gobblet.engine.score import Score, best_for

_LOGGER = logging.getLogger(__name__)

Branch: TypeAlias = "tuple[GameMove, Node]"


@dataclass(slots=True)
class Leaf:
    position: Position


@dataclass(slots=True)
class Branches:
    branches: list[Branch]


@dataclass(slots=True)
class Resolved:
    # Branches the win was backed up from; empty if the node was already won.
    branches: list[Branch]


NodeState: TypeAlias = Leaf | Branches | Resolved


class Node:
    """A position embedded in the search tree with its best-known score."""

    __slots__ = ("score", "turn", "state")

    def __init__(self, position: Position) -> None:
        self.score: Score = evaluate(position)
        self.turn: Color = position.turn
        self.state: NodeState = Leaf(position)

    # ── Expansion ────────────────────────────────────────────────────────

    def expand(self, depth: int) -> None:
        """Search this node *depth* plies deep and back the scores up.

        Calling again with a larger depth deepens the existing tree; calling
        with a depth already reached leaves it untouched.
        """
        if depth < 1:
            return

        match self.state:
            case Leaf(position=position):
                if self.score.is_win:
                    self.state = Resolved([])
                    return
                children: list[Branch] = [
                    (move, Node(child))
                    for move, child in MoveGenerator(position).generate_children()
                ]
                if depth > 1:
                    for _, child_node in children:
                        child_node.expand(depth - 1)
                self.state = Branches(children)
                self._back_up()
            case Branches(branches=branches):
                if depth == 1:
                    return
                for _, child_node in branches:
                    child_node.expand(depth - 1)
                self._back_up()
            case Resolved():
                pass

    def _back_up(self) -> None:
        """Take the best child score for the side to move."""
        match self.state:
            case Branches(branches=branches) if branches:
                self.score = best_for(self.turn, (node.score for _, node in branches))
                if self.score.is_win:
                    _LOGGER.debug("Node resolved: %s", self.score)
                    self.state = Resolved(branches)
            case _:
                # No legal moves: the static score stands.
                pass

    # ── Inspection ───────────────────────────────────────────────────────

    @property
    def branches(self) -> list[Branch]:
        """Children in generation order; empty for an unexpanded leaf."""
        match self.state:
            case Branches(branches=branches) | Resolved(branches=branches):
                return branches
            case Leaf():
                return []

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.state, Leaf)

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.state, Resolved)

    def best_branch(self) -> Branch | None:
        """Branch whose score is best for the side to move.

        Ties go to the first branch in generation order.
        """
        best: Branch | None = None
        for branch in self.branches:
            if best is None or self._prefers(branch[1].score, best[1].score):
                best = branch
        return best

    def ranked_branches(self) -> list[Branch]:
        """Branches sorted best-first for the side to move (stable)."""
        return sorted(
            self.branches,
            key=lambda branch: branch[1].score,
            reverse=self.turn == Color.WHITE,
        )

    def child(self, move: GameMove) -> Node | None:
        for branch_move, node in self.branches:
            if branch_move == move:
                return node
        return None

    def node_count(self) -> int:
        """Nodes in this subtree, this one included."""
        return 1 + sum(node.node_count() for _, node in self.branches)

    def _prefers(self, candidate: Score, current: Score) -> bool:
        if self.turn == Color.WHITE:
            return candidate > current
        return candidate < current

    def __repr__(self) -> str:
        return (
            f"Node(score={self.score}, turn={self.turn}, "
            f"state={type(self.state).__name__}, branches={len(self.branches)})"
        )
