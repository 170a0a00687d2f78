"""Game-tree search: scores, static evaluation and the minimax engine."""

from gobblet.engine.evaluation import evaluate
from gobblet.engine.minimax_search import MinimaxEngine
from gobblet.engine.node import Branches, Leaf, Node, NodeState, Resolved
from gobblet.engine.score import BLACK_FAVORED, WHITE_FAVORED, Score, ScoreKind, best_for
from gobblet.engine.search import IEngine, RankedMove, SearchLimits, SearchResult

DefaultEngine: type[IEngine] = MinimaxEngine

__all__ = [
    "BLACK_FAVORED",
    "Branches",
    "DefaultEngine",
    "IEngine",
    "Leaf",
    "MinimaxEngine",
    "Node",
    "NodeState",
    "RankedMove",
    "Resolved",
    "SearchLimits",
    "SearchResult",
    "Score",
    "ScoreKind",
    "WHITE_FAVORED",
    "best_for",
    "evaluate",
]
