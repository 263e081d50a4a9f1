"""Seeded board layout: king square, missing squares and start corner."""

from __future__ import annotations

import logging

from kingchain.config import (
    BOARD_SIZE,
    HARD_KING_CLEARANCE,
    MAX_PLACEMENT_ATTEMPTS,
    obstacle_range,
)
from kingchain.core.board_config import BoardConfig
from kingchain.core.enums import Difficulty
from kingchain.core.seeded import SeededRandom
from kingchain.core.types import Square, corner_squares, is_corner, manhattan_distance

_LOGGER = logging.getLogger(__name__)


def generate_board(
    difficulty: Difficulty = Difficulty.MEDIUM,
    seed: str | None = None,
) -> BoardConfig:
    """Build a board from *seed*; the same seed and difficulty repeat exactly.

    Without a seed a fresh one is drawn and recorded on the config so the
    round can be replayed later.
    """
    rng = SeededRandom(seed)
    low, high = obstacle_range(difficulty)
    obstacle_count = rng.randint(low, high)

    king = Square(rng.randint(1, BOARD_SIZE - 2), rng.randint(1, BOARD_SIZE - 2))
    if is_corner(king):
        king = Square(BOARD_SIZE // 2, BOARD_SIZE // 2)

    start = rng.choice(corner_squares())

    missing: set[Square] = set()
    for _ in range(obstacle_count):
        sq = _draw_obstacle(rng, difficulty, king, start, missing)
        if sq is None:
            _LOGGER.warning(
                "No room for obstacle %d/%d (seed=%s)",
                len(missing) + 1,
                obstacle_count,
                rng.seed,
            )
            continue
        missing.add(sq)

    _LOGGER.debug(
        "Generated %s board seed=%s king=%s start=%s missing=%d",
        difficulty,
        rng.seed,
        king,
        start,
        len(missing),
    )
    return BoardConfig(king=king, start=start, missing=frozenset(missing), seed=rng.seed)


def _draw_obstacle(
    rng: SeededRandom,
    difficulty: Difficulty,
    king: Square,
    start: Square,
    taken: set[Square],
) -> Square | None:
    """A free obstacle square, or ``None`` once the attempt budget is spent."""
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        sq = Square(rng.randint(0, BOARD_SIZE - 1), rng.randint(0, BOARD_SIZE - 1))
        if sq in (king, start) or sq in taken:
            continue
        if (
            difficulty == Difficulty.HARD
            and manhattan_distance(sq, king) < HARD_KING_CLEARANCE
        ):
            continue
        return sq
    return None
