"""Per-round board constants."""

from __future__ import annotations

from dataclasses import dataclass, field

from kingchain.core.types import Square, is_on_board


@dataclass(frozen=True, slots=True)
class BoardConfig:
    """King square, unusable squares and the mandatory first square."""

    king: Square
    start: Square
    missing: frozenset[Square] = field(default_factory=frozenset)
    seed: str | None = None

    def __post_init__(self) -> None:
        for sq in (self.king, self.start, *self.missing):
            if not is_on_board(sq):
                raise ValueError(f"Square off the board: {sq}")
        if self.king == self.start:
            raise ValueError(f"King and start share a square: {self.king}")
        if self.king in self.missing or self.start in self.missing:
            raise ValueError("King and start squares cannot be missing")

    def is_missing(self, sq: Square) -> bool:
        return sq in self.missing

    def is_playable(self, sq: Square) -> bool:
        """On the board, not missing and not the king's square."""
        return is_on_board(sq) and sq not in self.missing and sq != self.king
