"""Process-wide constants and environment-driven defaults."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from kingchain.core.enums import Difficulty

BOARD_SIZE: Final = 5
PIECES_PER_ROUND: Final = 4

# Retry caps for the seeded generators.
MAX_PLACEMENT_ATTEMPTS: Final = 100
MAX_SELECTION_DRAWS: Final = 64

# Length of the base-36 token used when no seed is supplied.
SEED_LENGTH: Final = 11

# Inclusive (low, high) obstacle counts, keyed by difficulty value.
DIFFICULTY_OBSTACLES: Final[dict[str, tuple[int, int]]] = {
    "easy": (3, 5),
    "medium": (5, 8),
    "hard": (8, 12),
}


def obstacle_range(difficulty: str) -> tuple[int, int]:
    """Inclusive obstacle count bounds for *difficulty*."""
    return DIFFICULTY_OBSTACLES[str(difficulty)]


# On hard boards obstacles keep at least this Manhattan distance from the king.
HARD_KING_CLEARANCE: Final = 2

ENV_DIFFICULTY: Final = "KINGCHAIN_DIFFICULTY"


def default_difficulty() -> Difficulty:
    """Difficulty from ``$KINGCHAIN_DIFFICULTY``, medium when unset or invalid."""
    from kingchain.core.enums import Difficulty

    raw = os.getenv(ENV_DIFFICULTY, "")
    try:
        return Difficulty.parse(raw)
    except ValueError:
        return Difficulty.MEDIUM
