"""Tests for GamePiece and the piece catalog."""

import pytest

from kingchain.core.catalog import (
    AVAILABLE_PIECES,
    PIECE_CATALOG,
    find_piece,
    get_piece,
    pieces_of_type,
)
from kingchain.core.enums import PLACEABLE_TYPES, PieceColor, PieceType
from kingchain.core.piece import ENEMY_KING, GamePiece


class TestGamePiece:
    def test_frozen(self) -> None:
        piece = get_piece("rook-blue")
        with pytest.raises(AttributeError):
            piece.points = 1  # type: ignore[misc]

    def test_symbol(self) -> None:
        assert get_piece("knight-red").symbol == "♘"

    def test_negative_points_rejected(self) -> None:
        with pytest.raises(ValueError):
            GamePiece("x", PieceType.ROOK, PieceColor.RED, -1, 1)

    def test_zero_multiplier_rejected(self) -> None:
        with pytest.raises(ValueError):
            GamePiece("x", PieceType.ROOK, PieceColor.RED, 1, 0)


class TestEnemyKing:
    def test_zero_value(self) -> None:
        assert ENEMY_KING.piece_type == PieceType.KING
        assert ENEMY_KING.points == 0
        assert ENEMY_KING.multiplier == 1
        assert ENEMY_KING.is_enemy_king

    def test_not_in_catalog(self) -> None:
        assert ENEMY_KING.id not in PIECE_CATALOG


class TestCatalog:
    def test_size(self) -> None:
        assert len(AVAILABLE_PIECES) == 16
        assert len(PIECE_CATALOG) == 16

    def test_ids_follow_type_and_color(self) -> None:
        for piece in AVAILABLE_PIECES:
            assert piece.id == f"{piece.piece_type.value}-{piece.color.value}"

    def test_no_kings(self) -> None:
        assert all(p.piece_type in PLACEABLE_TYPES for p in AVAILABLE_PIECES)
        assert pieces_of_type(PieceType.KING) == ()

    def test_four_per_type(self) -> None:
        for ptype in PLACEABLE_TYPES:
            assert len(pieces_of_type(ptype)) == 4

    def test_values(self) -> None:
        queen = get_piece("queen-red")
        assert (queen.points, queen.multiplier) == (90, 2.0)
        bishop = get_piece("bishop-green")
        assert (bishop.points, bishop.multiplier) == (30, 1.5)

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            PIECE_CATALOG["rook-gold"] = get_piece("rook-blue")  # type: ignore[index]

    def test_lookup_unknown(self) -> None:
        assert find_piece("rook-gold") is None
        with pytest.raises(KeyError, match="rook-gold"):
            get_piece("rook-gold")
