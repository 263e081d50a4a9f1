"""GameSession - the caller-owned record of a play session.

Holds the current round plus the running score and combo, and notifies
listeners through plain callbacks so a UI or a test can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingchain.config import default_difficulty
from kingchain.core.enums import Difficulty
from kingchain.core.piece import GamePiece
from kingchain.core.types import Square
from kingchain.game.interfaces import GamePhase, PlacementOutcome
from kingchain.game.round import (
    RoundState,
    legal_targets,
    place_piece,
    start_round,
    undo_last,
)
from kingchain.game.save import BoardSave, make_save

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

PlacedCallback = Callable[[PlacementOutcome, RoundState], None]
RoundCompleteCallback = Callable[["RoundResult"], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_placed: list[PlacedCallback] = field(default_factory=list)
    on_round_complete: list[RoundCompleteCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RoundResult:
    """A completed round as it stood on the winning placement."""

    round: RoundState
    points: int
    multiplier_trace: str
    combo: int


# ── Session ──────────────────────────────────────────────────────────────────


@dataclass
class GameSession:
    """Runs rounds one after another and keeps the score.

    A completed chain banks its points, bumps the combo and clears the
    board; further drops are refused until :meth:`new_round`.
    """

    difficulty: Difficulty = field(default_factory=default_difficulty)
    level_id: str | None = None
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    round: RoundState | None = field(default=None, init=False)
    total_score: int = field(default=0, init=False)
    combo: int = field(default=0, init=False)
    history: list[RoundResult] = field(default_factory=list, init=False)
    events: SessionEvents = field(default_factory=SessionEvents, init=False)

    # ── Round lifecycle ──────────────────────────────────────────────────

    def new_round(self, seed: str | None = None) -> RoundState:
        """Generate a fresh board and piece set."""
        self.round = start_round(self.difficulty, seed, self.level_id)
        self._set_phase(GamePhase.AWAITING_PLACEMENT)
        return self.round

    def load_round(self, state: RoundState) -> None:
        """Resume a round rebuilt elsewhere, e.g. from a save."""
        self.round = state
        self._set_phase(GamePhase.AWAITING_PLACEMENT)

    def reset_round(self) -> None:
        """Abandon the current attempt: same board, empty chain, combo lost."""
        if self.round is None:
            return
        self.round = self.round.cleared()
        self.combo = 0
        self._set_phase(GamePhase.AWAITING_PLACEMENT)

    # ── Placement ────────────────────────────────────────────────────────

    def drop_piece(self, piece: GamePiece, sq: Square) -> PlacementOutcome:
        """Place *piece* on *sq* if the rules allow it."""
        if self.round is None or self.phase != GamePhase.AWAITING_PLACEMENT:
            return PlacementOutcome.ROUND_OVER

        outcome, state = place_piece(self.round, piece, sq)
        self.round = state
        self._emit_placed(outcome, state)

        if outcome is PlacementOutcome.PLACED and state.is_complete():
            self._complete_round(state)
        return outcome

    def undo(self) -> bool:
        """Take back the last placement. Returns True if one was removed."""
        if self.round is None or self.phase != GamePhase.AWAITING_PLACEMENT:
            return False
        if not self.round.chain:
            return False
        self.round = undo_last(self.round)
        return True

    def targets_for(self, piece: GamePiece) -> frozenset[Square]:
        """Highlightable drop squares for *piece*."""
        if self.round is None or self.phase != GamePhase.AWAITING_PLACEMENT:
            return frozenset()
        return legal_targets(self.round, piece)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def potential_points(self) -> int:
        return self.round.potential_score().points if self.round else 0

    @property
    def multiplier_trace(self) -> str:
        return self.round.potential_score().multiplier_trace if self.round else ""

    def snapshot(self, name: str | None = None) -> BoardSave:
        """Save payload for the current round and session score."""
        if self.round is None:
            raise ValueError("No round to save")
        return make_save(self.round, self.total_score, name)

    # ── Internal ─────────────────────────────────────────────────────────

    def _complete_round(self, state: RoundState) -> None:
        score = state.potential_score()
        self.total_score += score.points
        self.combo += 1
        result = RoundResult(state, score.points, score.multiplier_trace, self.combo)
        self.history.append(result)
        _LOGGER.info(
            "Round complete: %d points (%s), combo %d",
            score.points,
            score.multiplier_trace,
            self.combo,
        )

        self.round = state.cleared()
        self._set_phase(GamePhase.ROUND_COMPLETE)
        for cb in self.events.on_round_complete:
            cb(result)

    def _emit_placed(self, outcome: PlacementOutcome, state: RoundState) -> None:
        for cb in self.events.on_placed:
            cb(outcome, state)

    def _set_phase(self, phase: GamePhase) -> None:
        self.phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
