"""Fixed, read-only table of player-placeable pieces."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from kingchain.core.enums import PieceColor, PieceType
from kingchain.core.piece import GamePiece


def _piece(ptype: PieceType, color: PieceColor, points: int, mult: float) -> GamePiece:
    return GamePiece(f"{ptype}-{color}", ptype, color, points, mult)


# Stronger movers carry more points; weaker ones pay back through multipliers.
AVAILABLE_PIECES: tuple[GamePiece, ...] = (
    _piece(PieceType.ROOK, PieceColor.BLUE, 50, 1.2),
    _piece(PieceType.ROOK, PieceColor.GREEN, 45, 1.3),
    _piece(PieceType.ROOK, PieceColor.PURPLE, 55, 1.1),
    _piece(PieceType.ROOK, PieceColor.RED, 60, 1.0),
    _piece(PieceType.BISHOP, PieceColor.BLUE, 35, 1.4),
    _piece(PieceType.BISHOP, PieceColor.GREEN, 30, 1.5),
    _piece(PieceType.BISHOP, PieceColor.PURPLE, 40, 1.3),
    _piece(PieceType.BISHOP, PieceColor.RED, 45, 1.2),
    _piece(PieceType.KNIGHT, PieceColor.BLUE, 40, 1.3),
    _piece(PieceType.KNIGHT, PieceColor.GREEN, 35, 1.4),
    _piece(PieceType.KNIGHT, PieceColor.PURPLE, 45, 1.2),
    _piece(PieceType.KNIGHT, PieceColor.RED, 50, 1.1),
    _piece(PieceType.QUEEN, PieceColor.BLUE, 80, 1.5),
    _piece(PieceType.QUEEN, PieceColor.GREEN, 75, 1.7),
    _piece(PieceType.QUEEN, PieceColor.PURPLE, 85, 1.4),
    _piece(PieceType.QUEEN, PieceColor.RED, 90, 2.0),
)

PIECE_CATALOG: Mapping[str, GamePiece] = MappingProxyType(
    {piece.id: piece for piece in AVAILABLE_PIECES}
)


def find_piece(piece_id: str) -> GamePiece | None:
    """Catalog entry for *piece_id*, or ``None``."""
    return PIECE_CATALOG.get(piece_id)


def get_piece(piece_id: str) -> GamePiece:
    """Catalog entry for *piece_id*; raises ``KeyError`` when unknown."""
    try:
        return PIECE_CATALOG[piece_id]
    except KeyError:
        raise KeyError(f"Unknown piece id: {piece_id!r}") from None


def pieces_of_type(piece_type: PieceType) -> tuple[GamePiece, ...]:
    return tuple(p for p in AVAILABLE_PIECES if p.piece_type == piece_type)
