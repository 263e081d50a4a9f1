"""GamePiece value object."""

from __future__ import annotations

from dataclasses import dataclass

from kingchain.core.enums import PieceColor, PieceType

_SYMBOLS: dict[PieceType, str] = {
    PieceType.ROOK: "♖",
    PieceType.BISHOP: "♗",
    PieceType.KNIGHT: "♘",
    PieceType.QUEEN: "♕",
    PieceType.KING: "♚",
}


@dataclass(frozen=True, slots=True)
class GamePiece:
    """Immutable catalog entry: movement type plus scoring values."""

    id: str
    piece_type: PieceType
    color: PieceColor
    points: float
    multiplier: float

    def __post_init__(self) -> None:
        if self.points < 0:
            raise ValueError(f"Piece points must be non-negative: {self.points!r}")
        if self.multiplier <= 0:
            raise ValueError(f"Piece multiplier must be positive: {self.multiplier!r}")

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♘."""
        return _SYMBOLS[self.piece_type]

    @property
    def is_enemy_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def __str__(self) -> str:
        return self.id


# The fixed capture target. Worth nothing and leaves the running multiplier alone.
ENEMY_KING = GamePiece(
    id="black-king",
    piece_type=PieceType.KING,
    color=PieceColor.BLACK,
    points=0,
    multiplier=1,
)
