"""Tests for RoundState and the placement policy."""

from kingchain.core.catalog import get_piece
from kingchain.core.enums import Difficulty
from kingchain.core.types import Square
from kingchain.game.interfaces import PlacementOutcome
from kingchain.game.round import (
    RoundState,
    check_placement,
    legal_targets,
    place_piece,
    start_round,
    undo_last,
)

A1 = Square(0, 0)
A3 = Square(0, 2)
E1 = Square(4, 0)
E4 = Square(4, 3)


def _placed(state: RoundState, *moves: tuple[str, Square]) -> RoundState:
    for piece_id, sq in moves:
        outcome, state = place_piece(state, get_piece(piece_id), sq)
        assert outcome is PlacementOutcome.PLACED
    return state


class TestStartRound:
    def test_seeded(self) -> None:
        a = start_round(Difficulty.EASY, "round-seed")
        b = start_round(Difficulty.EASY, "round-seed")
        assert a == b
        assert len(a.pieces) == 4
        assert a.chain == ()
        assert len(a.occupancy) == 0

    def test_level(self) -> None:
        state = start_round(seed="lvl", level_id="knight-challenge")
        assert all(p.id.startswith("knight-") for p in state.pieces)


class TestFirstPlacement:
    def test_must_use_start(self, basic_round: RoundState) -> None:
        knight = get_piece("knight-purple")
        assert check_placement(basic_round, knight, Square(1, 1)) is (
            PlacementOutcome.NOT_START_SQUARE
        )
        assert check_placement(basic_round, knight, A1) is PlacementOutcome.PLACED

    def test_legal_targets_only_start(self, basic_round: RoundState) -> None:
        assert legal_targets(basic_round, get_piece("queen-red")) == {A1}


class TestRefusals:
    def test_unavailable_piece(self, basic_round: RoundState) -> None:
        outcome, state = place_piece(basic_round, get_piece("rook-red"), A1)
        assert outcome is PlacementOutcome.PIECE_UNAVAILABLE
        assert state is basic_round

    def test_off_board(self, basic_round: RoundState) -> None:
        rook = get_piece("rook-blue")
        assert check_placement(basic_round, rook, Square(5, 0)) is (
            PlacementOutcome.OFF_BOARD
        )

    def test_missing_square(self, basic_round: RoundState) -> None:
        rook = get_piece("rook-blue")
        assert check_placement(basic_round, rook, Square(4, 4)) is (
            PlacementOutcome.SQUARE_MISSING
        )

    def test_king_square(self, basic_round: RoundState) -> None:
        rook = get_piece("rook-blue")
        assert check_placement(basic_round, rook, Square(2, 4)) is (
            PlacementOutcome.KING_SQUARE
        )

    def test_occupied(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1))
        assert check_placement(state, get_piece("knight-purple"), A1) is (
            PlacementOutcome.SQUARE_OCCUPIED
        )

    def test_used(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1))
        assert check_placement(state, get_piece("rook-blue"), A3) is (
            PlacementOutcome.PIECE_USED
        )

    def test_not_capturable(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1))
        assert check_placement(state, get_piece("bishop-green"), Square(1, 1)) is (
            PlacementOutcome.NOT_CAPTURABLE
        )


class TestChainGrowth:
    def test_place_extends_chain(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1), ("queen-red", E1))
        assert state.chain == (A1, E1)
        assert state.used_ids == {"rook-blue", "queen-red"}
        assert [p.id for p in state.remaining_pieces] == [
            "bishop-green",
            "knight-purple",
        ]
        assert len(basic_round.chain) == 0

    def test_legal_targets_follow_last_piece(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1))
        targets = legal_targets(state, get_piece("bishop-green"))
        assert targets == {Square(x, 0) for x in range(1, 5)} | {
            Square(0, y) for y in range(1, 5)
        }

    def test_complete(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1), ("bishop-green", A3))
        assert state.is_complete()
        score = state.potential_score()
        assert score.points == 86
        assert score.multiplier_trace == "1.2x 1.5"

    def test_no_drops_after_completion(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1), ("bishop-green", A3))
        outcome, after = place_piece(state, get_piece("queen-red"), E1)
        assert outcome is PlacementOutcome.ROUND_OVER
        assert after is state

    def test_single_piece_never_complete(self, basic_round: RoundState) -> None:
        # The rook on a1 could not reach c5 anyway, but length alone rules it out.
        state = _placed(basic_round, ("rook-blue", A1))
        assert not state.is_complete()

    def test_incomplete_preview(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1), ("queen-red", E1))
        assert not state.is_complete()
        assert state.potential_score().points == 158

    def test_three_links(self, basic_round: RoundState) -> None:
        state = _placed(
            basic_round,
            ("rook-blue", A1),
            ("queen-red", E1),
            ("knight-purple", E4),
        )
        assert state.is_complete()
        assert state.potential_score().points == 266


class TestUndoAndClear:
    def test_undo_last(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1), ("queen-red", E1))
        back = undo_last(state)
        assert back.chain == (A1,)
        assert E1 not in back.occupancy
        assert "queen-red" not in back.used_ids

    def test_undo_empty(self, basic_round: RoundState) -> None:
        assert undo_last(basic_round) is basic_round

    def test_cleared(self, basic_round: RoundState) -> None:
        state = _placed(basic_round, ("rook-blue", A1))
        cleared = state.cleared()
        assert cleared.chain == ()
        assert len(cleared.occupancy) == 0
        assert cleared.config == state.config
        assert cleared.pieces == state.pieces
