"""Immutable round state and the piece-placement policy.

Every operation returns a new :class:`RoundState`; the caller decides which
one to keep.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from kingchain.core.board_config import BoardConfig
from kingchain.core.board_generator import generate_board
from kingchain.core.chain import ChainScore, score_chain, validate_chain
from kingchain.core.enums import Difficulty
from kingchain.core.move_generator import can_capture
from kingchain.core.occupancy import Occupancy
from kingchain.core.piece import GamePiece
from kingchain.core.piece_selector import select_pieces
from kingchain.core.types import Square, all_squares, is_on_board
from kingchain.game.interfaces import PlacementOutcome


@dataclass(frozen=True, slots=True)
class RoundState:
    """One puzzle: fixed board and piece set, growing occupancy and chain."""

    config: BoardConfig
    pieces: tuple[GamePiece, ...]
    occupancy: Occupancy = field(default_factory=Occupancy)
    chain: tuple[Square, ...] = ()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def used_ids(self) -> frozenset[str]:
        return frozenset(self.occupancy[sq].id for sq in self.chain if sq in self.occupancy)

    @property
    def remaining_pieces(self) -> tuple[GamePiece, ...]:
        used = self.used_ids
        return tuple(p for p in self.pieces if p.id not in used)

    @property
    def last_placed(self) -> tuple[Square, GamePiece] | None:
        if not self.chain:
            return None
        sq = self.chain[-1]
        return sq, self.occupancy[sq]

    def is_complete(self) -> bool:
        """The chain captures its way to the king."""
        return validate_chain(self.occupancy, self.chain, self.config.king)

    def potential_score(self) -> ChainScore:
        """Score the chain would earn as it stands."""
        return score_chain(self.occupancy, self.chain)

    def cleared(self) -> RoundState:
        """Same board and pieces, nothing placed."""
        return replace(self, occupancy=Occupancy(), chain=())


def start_round(
    difficulty: Difficulty = Difficulty.MEDIUM,
    seed: str | None = None,
    level_id: str | None = None,
) -> RoundState:
    """Generate a board and its piece set from one seed."""
    config = generate_board(difficulty, seed)
    return RoundState(config=config, pieces=select_pieces(config, level_id))


def check_placement(
    state: RoundState, piece: GamePiece, sq: Square
) -> PlacementOutcome:
    """Why *piece* may or may not go on *sq*; ``PLACED`` when it may."""
    if state.is_complete():
        return PlacementOutcome.ROUND_OVER
    if piece not in state.pieces:
        return PlacementOutcome.PIECE_UNAVAILABLE
    if piece.id in state.used_ids:
        return PlacementOutcome.PIECE_USED
    if not is_on_board(sq):
        return PlacementOutcome.OFF_BOARD
    if state.config.is_missing(sq):
        return PlacementOutcome.SQUARE_MISSING
    if sq == state.config.king:
        return PlacementOutcome.KING_SQUARE
    if not state.occupancy.is_empty(sq):
        return PlacementOutcome.SQUARE_OCCUPIED

    last = state.last_placed
    if last is None:
        if sq != state.config.start:
            return PlacementOutcome.NOT_START_SQUARE
        return PlacementOutcome.PLACED

    last_sq, last_piece = last
    if not can_capture(last_piece, last_sq, sq):
        return PlacementOutcome.NOT_CAPTURABLE
    return PlacementOutcome.PLACED


def place_piece(
    state: RoundState, piece: GamePiece, sq: Square
) -> tuple[PlacementOutcome, RoundState]:
    """Try to extend the chain; the state is unchanged unless ``PLACED``."""
    outcome = check_placement(state, piece, sq)
    if outcome is not PlacementOutcome.PLACED:
        return outcome, state
    return outcome, replace(
        state,
        occupancy=state.occupancy.place(piece, sq),
        chain=(*state.chain, sq),
    )


def legal_targets(state: RoundState, piece: GamePiece) -> frozenset[Square]:
    """Squares where *piece* could be placed next."""
    return frozenset(
        sq
        for sq in all_squares()
        if check_placement(state, piece, sq) is PlacementOutcome.PLACED
    )


def undo_last(state: RoundState) -> RoundState:
    """Take back the most recent placement; no-op on an empty chain."""
    if not state.chain:
        return state
    sq = state.chain[-1]
    return replace(state, occupancy=state.occupancy.remove(sq), chain=state.chain[:-1])
