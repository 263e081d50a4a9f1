"""Capture-chain validation and scoring.

A chain is an ordered run of occupied squares: the piece on ``chain[i]``
takes the piece on ``chain[i + 1]``, and the last piece takes the enemy
king. Both functions are total; bad input yields ``False`` or a zero score.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from kingchain.core.move_generator import can_capture
from kingchain.core.piece import GamePiece
from kingchain.core.types import Square

Chain = Sequence[Square]

_TIMES = "x "


@dataclass(frozen=True, slots=True)
class ChainScore:
    """Points earned by a chain plus the multipliers applied along it."""

    points: int
    multiplier_trace: str

    @classmethod
    def zero(cls) -> ChainScore:
        return cls(0, "")


def chain_is_connected(occupancy: Mapping[Square, GamePiece], chain: Chain) -> bool:
    """Every entry is occupied and each piece can take the next one.

    The king is not consulted; shorter-than-two chains are trivially
    connected as long as their entries are occupied.
    """
    for sq in chain:
        if sq not in occupancy:
            return False
    for current, nxt in zip(chain, chain[1:]):
        if not can_capture(occupancy[current], current, nxt):
            return False
    return True


def validate_chain(
    occupancy: Mapping[Square, GamePiece],
    chain: Chain,
    king_square: Square,
) -> bool:
    """Whether *chain* is a complete capture run ending on *king_square*."""
    if len(chain) < 2:
        return False

    for current, nxt in zip(chain, chain[1:]):
        attacker = occupancy.get(current)
        if attacker is None or nxt not in occupancy:
            return False
        if not can_capture(attacker, current, nxt):
            return False

    last = chain[-1]
    return can_capture(occupancy[last], last, king_square)


def score_chain(occupancy: Mapping[Square, GamePiece], chain: Chain) -> ChainScore:
    """Fold points and multipliers along *chain*.

    A piece's own multiplier only boosts the pieces after it. Empty entries
    are skipped, so partial chains can be previewed before they are valid.
    """
    total = 0.0
    running = 1.0
    multipliers: list[str] = []

    for sq in chain:
        piece = occupancy.get(sq)
        if piece is None:
            continue
        total += piece.points * running
        running *= piece.multiplier
        multipliers.append(format_multiplier(piece.multiplier))

    return ChainScore(_round_half_up(total), _TIMES.join(multipliers))


def format_multiplier(value: float) -> str:
    """Compact multiplier text: ``2.0`` → ``'2'``, ``1.25`` → ``'1.25'``."""
    return f"{value:g}"


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; halves go up here.
    return math.floor(value + 0.5)
