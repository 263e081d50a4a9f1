"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from kingchain.core.board_config import BoardConfig
from kingchain.core.catalog import get_piece
from kingchain.core.piece_selector import get_level
from kingchain.core.types import Square
from kingchain.game.round import RoundState

# King on c5, start on a1, e5 knocked out.
KING = Square(2, 4)
START = Square(0, 0)
MISSING = frozenset({Square(4, 4)})


@pytest.fixture
def board_config() -> BoardConfig:
    return BoardConfig(king=KING, start=START, missing=MISSING, seed="fixture")


@pytest.fixture
def basic_round(board_config: BoardConfig) -> RoundState:
    """Empty round with the ``basic`` preset: rook-blue, bishop-green,
    knight-purple, queen-red."""
    level = get_level("basic")
    assert level is not None
    return RoundState(config=board_config, pieces=level.resolve())


@pytest.fixture
def rook_blue():
    return get_piece("rook-blue")


@pytest.fixture
def bishop_green():
    return get_piece("bishop-green")


@pytest.fixture
def knight_purple():
    return get_piece("knight-purple")


@pytest.fixture
def queen_red():
    return get_piece("queen-red")
