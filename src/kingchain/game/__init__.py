"""Game management layer: rounds, placement policy, session, saves.

Quick start::

    from kingchain.game import GameSession

    session = GameSession()
    state = session.new_round(seed="demo")
    session.drop_piece(state.pieces[0], state.config.start)
"""

from kingchain.game.interfaces import GamePhase, PlacementOutcome
from kingchain.game.round import (
    RoundState,
    check_placement,
    legal_targets,
    place_piece,
    start_round,
    undo_last,
)
from kingchain.game.save import BoardSave, load_save, make_save
from kingchain.game.session import GameSession, RoundResult, SessionEvents

__all__ = [
    # Enums
    "GamePhase",
    "PlacementOutcome",
    # Round
    "RoundState",
    "check_placement",
    "legal_targets",
    "place_piece",
    "start_round",
    "undo_last",
    # Session
    "GameSession",
    "RoundResult",
    "SessionEvents",
    # Saves
    "BoardSave",
    "load_save",
    "make_save",
]
