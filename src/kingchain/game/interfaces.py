"""Enumerations shared by the round and session layers."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a session."""

    NOT_STARTED = auto()
    AWAITING_PLACEMENT = auto()
    ROUND_COMPLETE = auto()


class PlacementOutcome(IntEnum):
    """Result of trying to drop a piece on a square.

    Only ``PLACED`` changes the round; every other value explains a refusal
    and is left to the presentation layer to phrase.
    """

    PLACED = 0
    PIECE_UNAVAILABLE = auto()
    PIECE_USED = auto()
    OFF_BOARD = auto()
    SQUARE_MISSING = auto()
    KING_SQUARE = auto()
    SQUARE_OCCUPIED = auto()
    NOT_START_SQUARE = auto()
    NOT_CAPTURABLE = auto()
    ROUND_OVER = auto()

    @property
    def accepted(self) -> bool:
        return self is PlacementOutcome.PLACED
