"""Application entry point: engine self-play from the starting position."""

from __future__ import annotations

import argparse
import logging
import sys

from gobblet.core.enums import GameResult
from gobblet.core.position import Position
from gobblet.core.rules import Rules
from gobblet.engine.minimax_search import MinimaxEngine

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gobblet",
        description="Let the minimax engine play itself.",
    )
    parser.add_argument("--depth", type=int, default=2, help="search depth in plies")
    parser.add_argument(
        "--plies", type=int, default=20, help="stop after this many moves"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    if args.depth < 1:
        parser.error("--depth must be >= 1")
    return args


def play(depth: int, max_plies: int) -> tuple[Position, GameResult]:
    """Play the engine against itself and return the final position."""
    position = Position.initial()
    engine = MinimaxEngine()
    engine.start(position)

    for ply in range(1, max_plies + 1):
        result = engine.deepen(depth)
        if result.best_move is None:
            _LOGGER.info("No legal moves for %s", position.turn)
            break

        _LOGGER.info(
            "%3d. %s plays %s (score %s, %d nodes)",
            ply,
            position.turn,
            result.best_move,
            result.score,
            result.nodes,
        )
        position.apply_move(result.best_move)
        engine.commit(result.best_move)

        outcome = Rules.game_result(position)
        if outcome != GameResult.IN_PROGRESS:
            return position, outcome

    return position, Rules.game_result(position)


def main(argv: list[str] | None = None) -> int:
    """Run a self-play game and print the final board."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    position, outcome = play(args.depth, args.plies)
    print(repr(position))
    print(outcome.name.lower().replace("_", " "))
    return 0


if __name__ == "__main__":
    sys.exit(main())
