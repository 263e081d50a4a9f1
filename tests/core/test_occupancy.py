"""Tests for Occupancy."""

import pytest

from kingchain.core.catalog import get_piece
from kingchain.core.occupancy import Occupancy
from kingchain.core.types import Square


class TestOccupancyBasics:
    def test_empty(self) -> None:
        occ = Occupancy()
        assert len(occ) == 0
        assert occ.is_empty(Square(0, 0))
        assert occ.piece_at(Square(0, 0)) is None

    def test_place_returns_new_value(self) -> None:
        rook = get_piece("rook-blue")
        empty = Occupancy()
        occ = empty.place(rook, Square(0, 0))
        assert len(empty) == 0
        assert occ[Square(0, 0)] == rook
        assert occ.square_of("rook-blue") == Square(0, 0)

    def test_remove(self) -> None:
        occ = Occupancy().place(get_piece("rook-blue"), Square(0, 0))
        after = occ.remove(Square(0, 0))
        assert len(after) == 0
        assert after.square_of("rook-blue") is None
        assert len(occ) == 1

    def test_remove_empty_square_is_noop(self) -> None:
        occ = Occupancy()
        assert occ.remove(Square(1, 1)) is occ

    def test_clear(self) -> None:
        occ = Occupancy().place(get_piece("rook-blue"), Square(0, 0))
        assert len(occ.clear()) == 0


class TestOccupancyInvariants:
    def test_same_id_moves(self) -> None:
        rook = get_piece("rook-blue")
        occ = Occupancy().place(rook, Square(0, 0)).place(rook, Square(0, 3))
        assert Square(0, 0) not in occ
        assert occ[Square(0, 3)] == rook
        assert len(occ) == 1

    def test_replacing_square_forgets_displaced_id(self) -> None:
        occ = (
            Occupancy()
            .place(get_piece("rook-blue"), Square(0, 0))
            .place(get_piece("queen-red"), Square(0, 0))
        )
        assert occ[Square(0, 0)].id == "queen-red"
        assert occ.square_of("rook-blue") is None

    def test_constructor_applies_same_rules(self) -> None:
        rook = get_piece("rook-blue")
        occ = Occupancy({Square(0, 0): rook, Square(1, 0): rook})
        assert len(occ) == 1


class TestKeyedForm:
    def test_to_keyed(self) -> None:
        occ = Occupancy().place(get_piece("knight-red"), Square(2, 1))
        assert occ.to_keyed() == {"2,1": get_piece("knight-red")}

    def test_from_keyed_ids_and_pieces(self) -> None:
        occ = Occupancy.from_keyed({"0,0": "rook-blue", "0,2": get_piece("bishop-green")})
        assert occ[Square(0, 0)].id == "rook-blue"
        assert occ[Square(0, 2)].id == "bishop-green"

    def test_from_keyed_unknown_id(self) -> None:
        with pytest.raises(KeyError):
            Occupancy.from_keyed({"0,0": "rook-gold"})

    def test_from_keyed_bad_key(self) -> None:
        with pytest.raises(ValueError):
            Occupancy.from_keyed({"00": "rook-blue"})


class TestDunder:
    def test_equality(self) -> None:
        a = Occupancy().place(get_piece("rook-blue"), Square(0, 0))
        b = Occupancy({Square(0, 0): get_piece("rook-blue")})
        assert a == b
        assert a == {Square(0, 0): get_piece("rook-blue")}

    def test_repr(self) -> None:
        occ = Occupancy().place(get_piece("rook-blue"), Square(0, 0))
        assert repr(occ) == "Occupancy({0,0: rook-blue})"
