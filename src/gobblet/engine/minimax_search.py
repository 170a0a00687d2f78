"""Full-width minimax search over a persistent tree of :class:`Node`."""

from __future__ import annotations

import logging
from time import perf_counter

from gobblet.core.move import GameMove
from gobblet.core.position import Position
from gobblet.engine.node import Node
from gobblet.engine.search import IEngine, RankedMove, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)


class MinimaxEngine(IEngine):
    """Minimax searcher without pruning.

    :meth:`search` answers a single query.  For a game in progress, keep the
    tree between moves instead: :meth:`start` on the initial position,
    :meth:`deepen` to search, :meth:`commit` to play a move, which keeps the
    chosen subtree and drops its siblings.
    """

    __slots__ = ("_root", "_depth")

    def __init__(self) -> None:
        self._root: Node | None = None
        self._depth = 0

    def search(self, position: Position, limits: SearchLimits) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self.start(position)
        return self.deepen(limits.max_depth)

    # ── Persistent tree ──────────────────────────────────────────────────

    @property
    def root(self) -> Node | None:
        return self._root

    def start(self, position: Position) -> Node:
        """Replace the tree with a fresh root for *position*."""
        self._root = Node(position.copy())
        self._depth = 0
        return self._root

    def deepen(self, depth: int) -> SearchResult:
        """Expand the current tree to *depth* plies below the root."""
        root = self._require_root()
        if depth <= 0:
            raise ValueError("Search depth must be >= 1")

        started = perf_counter()
        root.expand(depth)
        self._depth = max(self._depth, depth)
        result = self._result(root)
        _LOGGER.debug(
            "Searched depth %d: %d nodes, score %s, best %s (%.3fs)",
            depth,
            result.nodes,
            result.score,
            result.best_move,
            perf_counter() - started,
        )
        return result

    def commit(self, move: GameMove) -> Node:
        """Make the child reached by *move* the new root."""
        root = self._require_root()
        child = root.child(move)
        if child is None:
            raise ValueError(f"{move} is not a searched move of the current root")
        self._root = child
        self._depth = max(self._depth - 1, 0)
        return child

    def ranked_moves(self) -> tuple[RankedMove, ...]:
        """Root moves best-first for the side to move."""
        root = self._require_root()
        return tuple(
            RankedMove(move, node.score) for move, node in root.ranked_branches()
        )

    # ── Internals ────────────────────────────────────────────────────────

    def _require_root(self) -> Node:
        if self._root is None:
            raise ValueError("No search tree: call start() first")
        return self._root

    def _result(self, root: Node) -> SearchResult:
        best = root.best_branch()
        return SearchResult(
            best_move=best[0] if best is not None else None,
            score=root.score,
            depth=self._depth,
            nodes=root.node_count(),
            ranked_moves=self.ranked_moves(),
            resolved=root.is_resolved,
        )
