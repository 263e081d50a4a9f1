"""Plain-text board diagrams."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from kingchain.config import BOARD_SIZE
from kingchain.core.board_config import BoardConfig
from kingchain.core.piece import GamePiece
from kingchain.core.types import Square, square_name

KING_CHAR = "K"
MISSING_CHAR = "#"
START_CHAR = "S"
EMPTY_CHAR = "."


def square_char(
    config: BoardConfig,
    occupancy: Mapping[Square, GamePiece],
    sq: Square,
) -> str:
    piece = occupancy.get(sq)
    if piece is not None:
        return piece.symbol
    if sq == config.king:
        return KING_CHAR
    if config.is_missing(sq):
        return MISSING_CHAR
    if sq == config.start:
        return START_CHAR
    return EMPTY_CHAR


def render_board(
    config: BoardConfig,
    occupancy: Mapping[Square, GamePiece] | None = None,
    chain: Sequence[Square] = (),
) -> str:
    """Diagram with the top rank first, e.g.::

        5 . . # . .
        4 . K . . .
        3 . . . # .
        2 # . . . .
        1 S . . . .
          a b c d e
    """
    occupancy = occupancy or {}
    rows: list[str] = []
    for y in range(BOARD_SIZE - 1, -1, -1):
        cells = [square_char(config, occupancy, Square(x, y)) for x in range(BOARD_SIZE)]
        rows.append(f"{y + 1} {' '.join(cells)}")
    rows.append("  " + " ".join("abcde"[:BOARD_SIZE]))

    if chain:
        steps = []
        for sq in chain:
            piece = occupancy.get(sq)
            label = piece.id if piece is not None else "?"
            steps.append(f"{square_name(sq)}({label})")
        steps.append(f"{square_name(config.king)}(king)")
        rows.append("chain: " + " -> ".join(steps))
    return "\n".join(rows)
