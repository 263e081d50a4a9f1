"""Occupancy - which piece stands on which square."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from kingchain.core.catalog import get_piece
from kingchain.core.piece import GamePiece
from kingchain.core.types import Square


class Occupancy(Mapping[Square, GamePiece]):
    """Persistent square → piece mapping.

    Mutators return a new instance and leave the receiver untouched, so a
    caller can keep the previous value for undo or comparison. A piece id
    occupies at most one square: placing it again moves it.
    """

    __slots__ = ("_squares", "_by_id")

    def __init__(self, placements: Mapping[Square, GamePiece] | None = None) -> None:
        self._squares: dict[Square, GamePiece] = {}
        # piece id -> square it currently stands on.
        self._by_id: dict[str, Square] = {}
        for sq, piece in (placements or {}).items():
            self._put(sq, piece)

    def _put(self, sq: Square, piece: GamePiece) -> None:
        prior = self._by_id.get(piece.id)
        if prior is not None:
            del self._squares[prior]
        displaced = self._squares.get(sq)
        if displaced is not None:
            del self._by_id[displaced.id]
        self._squares[sq] = piece
        self._by_id[piece.id] = sq

    def _copy(self) -> Occupancy:
        occ = Occupancy()
        occ._squares = self._squares.copy()
        occ._by_id = self._by_id.copy()
        return occ

    # -- Mapping protocol ---------------------------------------------------

    def __getitem__(self, sq: Square) -> GamePiece:
        return self._squares[sq]

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    # -- Query helpers ------------------------------------------------------

    def piece_at(self, sq: Square) -> GamePiece | None:
        return self._squares.get(sq)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._squares

    def square_of(self, piece_id: str) -> Square | None:
        """Square holding the piece with *piece_id*, if placed."""
        return self._by_id.get(piece_id)

    # -- Persistent updates -------------------------------------------------

    def place(self, piece: GamePiece, sq: Square) -> Occupancy:
        """New occupancy with *piece* on *sq*.

        Any prior square held by the same id is vacated, and whatever stood
        on *sq* is replaced.
        """
        occ = self._copy()
        occ._put(sq, piece)
        return occ

    def remove(self, sq: Square) -> Occupancy:
        if sq not in self._squares:
            return self
        occ = self._copy()
        piece = occ._squares.pop(sq)
        del occ._by_id[piece.id]
        return occ

    def clear(self) -> Occupancy:
        return Occupancy()

    # -- Keyed form ---------------------------------------------------------

    def to_keyed(self) -> dict[str, GamePiece]:
        """``{"x,y": piece}`` form used at the presentation boundary."""
        return {sq.key: piece for sq, piece in self._squares.items()}

    @classmethod
    def from_keyed(cls, keyed: Mapping[str, GamePiece | str]) -> Occupancy:
        """Build from ``"x,y"`` keys; values may be pieces or catalog ids."""
        placements: dict[Square, GamePiece] = {}
        for key, value in keyed.items():
            piece = get_piece(value) if isinstance(value, str) else value
            placements[Square.from_key(key)] = piece
        return cls(placements)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Occupancy):
            return self._squares == other._squares
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{sq.key}: {p.id}" for sq, p in self._squares.items())
        return f"Occupancy({{{body}}})"
