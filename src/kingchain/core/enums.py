"""Core enumerations for the capture-chain domain."""

from __future__ import annotations

from enum import StrEnum


class PieceType(StrEnum):
    """Movement families. ``KING`` is reserved for the enemy target."""

    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    QUEEN = "queen"
    KING = "king"


class PieceColor(StrEnum):
    """Cosmetic palette."""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"
    BLACK = "black"


class Difficulty(StrEnum):
    """Board generation difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, name: str) -> Difficulty:
        """Case-insensitive lookup, e.g. ``'Hard'`` → ``Difficulty.HARD``."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid difficulty: {name!r}") from None


PLACEABLE_TYPES: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.QUEEN,
)
