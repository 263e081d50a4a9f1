"""Movement patterns per piece type and the capture predicate.

Moves are pure geometry: occupancy never blocks a line, so a rook on
``a1`` reaches ``a5`` even with pieces in between.
"""

from __future__ import annotations

from collections.abc import Iterable

from kingchain.config import BOARD_SIZE
from kingchain.core.enums import PieceType
from kingchain.core.piece import GamePiece
from kingchain.core.types import Square, all_squares, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_steps(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, frozenset[Square]]:
    table: dict[Square, frozenset[Square]] = {}
    for sq in all_squares():
        targets = (sq.offset(dx, dy) for dx, dy in offsets)
        table[sq] = frozenset(t for t in targets if is_on_board(t))
    return table


def _build_lines(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, frozenset[Square]]:
    table: dict[Square, frozenset[Square]] = {}
    for sq in all_squares():
        reach: set[Square] = set()
        for dx, dy in directions:
            for dist in range(1, BOARD_SIZE):
                target = sq.offset(dx * dist, dy * dist)
                if not is_on_board(target):
                    break
                reach.add(target)
        table[sq] = frozenset(reach)
    return table


_ROOK_MOVES = _build_lines(ROOK_DIRS)
_BISHOP_MOVES = _build_lines(BISHOP_DIRS)
_KNIGHT_MOVES = _build_steps(KNIGHT_OFFSETS)
_KING_MOVES = _build_steps(KING_OFFSETS)

_EMPTY: frozenset[Square] = frozenset()


# -- Public API -------------------------------------------------------------


def moves_from(piece: GamePiece | PieceType, from_sq: Square) -> frozenset[Square]:
    """Every square *piece* reaches from *from_sq*.

    Unknown piece types and off-board origins give the empty set.
    """
    ptype = piece.piece_type if isinstance(piece, GamePiece) else piece
    if not is_on_board(from_sq):
        return _EMPTY

    match ptype:
        case PieceType.ROOK:
            return _ROOK_MOVES[from_sq]
        case PieceType.BISHOP:
            return _BISHOP_MOVES[from_sq]
        case PieceType.KNIGHT:
            return _KNIGHT_MOVES[from_sq]
        case PieceType.QUEEN:
            return moves_from(PieceType.ROOK, from_sq) | moves_from(
                PieceType.BISHOP, from_sq
            )
        case PieceType.KING:
            return _KING_MOVES[from_sq]
        case _:
            return _EMPTY


def can_capture(piece: GamePiece | PieceType, from_sq: Square, to_sq: Square) -> bool:
    """Whether *piece* standing on *from_sq* can take whatever is on *to_sq*.

    Occupancy of *to_sq* is the caller's concern.
    """
    return to_sq in moves_from(piece, from_sq)


def capture_targets(
    piece: GamePiece | PieceType,
    from_sq: Square,
    candidates: Iterable[Square],
) -> list[Square]:
    """The members of *candidates* capturable from *from_sq*, in order."""
    reach = moves_from(piece, from_sq)
    return [sq for sq in candidates if sq in reach]
