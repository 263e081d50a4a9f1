"""Choose the four pieces available for a round."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kingchain.config import MAX_SELECTION_DRAWS, PIECES_PER_ROUND
from kingchain.core.board_config import BoardConfig
from kingchain.core.catalog import AVAILABLE_PIECES, find_piece
from kingchain.core.piece import GamePiece
from kingchain.core.seeded import SeededRandom

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LevelPreset:
    """Named fixed piece set."""

    id: str
    name: str
    piece_ids: tuple[str, ...]

    def resolve(self) -> tuple[GamePiece, ...]:
        """Catalog pieces for this preset; unknown ids are dropped."""
        pieces: list[GamePiece] = []
        for piece_id in self.piece_ids:
            piece = find_piece(piece_id)
            if piece is None:
                _LOGGER.warning("Level %s names unknown piece %r", self.id, piece_id)
                continue
            pieces.append(piece)
        return tuple(pieces)


LEVEL_PRESETS: tuple[LevelPreset, ...] = (
    LevelPreset(
        "basic",
        "Basic",
        ("rook-blue", "bishop-green", "knight-purple", "queen-red"),
    ),
    LevelPreset(
        "multiplier-focus",
        "Multiplier Focus",
        ("rook-red", "bishop-purple", "knight-green", "queen-blue"),
    ),
    LevelPreset(
        "queen-power",
        "Queen Power",
        ("queen-blue", "queen-green", "queen-purple", "queen-red"),
    ),
    LevelPreset(
        "knight-challenge",
        "Knight Challenge",
        ("knight-blue", "knight-green", "knight-purple", "knight-red"),
    ),
)


def get_level(level_id: str) -> LevelPreset | None:
    for level in LEVEL_PRESETS:
        if level.id == level_id:
            return level
    return None


def select_pieces(
    board_config: BoardConfig,
    level_id: str | None = None,
    seed: str | None = None,
) -> tuple[GamePiece, ...]:
    """Pieces for a round: a named preset, or a seeded random draw.

    An unknown *level_id* falls through to the random draw. The random
    draw is seeded by *seed*, else by the board's own seed.
    """
    if level_id:
        level = get_level(level_id)
        if level is not None:
            return level.resolve()
        _LOGGER.debug("Unknown level %r, drawing random pieces", level_id)

    return _draw_random(SeededRandom(seed or board_config.seed))


def _draw_random(rng: SeededRandom) -> tuple[GamePiece, ...]:
    """Prefer distinct types for the first two picks, distinct colours after."""
    selected: list[GamePiece] = []
    used_types: set[str] = set()
    used_colors: set[str] = set()

    for _ in range(MAX_SELECTION_DRAWS):
        if len(selected) == PIECES_PER_ROUND:
            break
        if len(selected) < 2:
            pool = [p for p in AVAILABLE_PIECES if p.piece_type not in used_types]
        else:
            pool = [p for p in AVAILABLE_PIECES if p.color not in used_colors]

        piece = rng.choice(pool or AVAILABLE_PIECES)
        if piece in selected:
            continue
        selected.append(piece)
        used_types.add(piece.piece_type)
        used_colors.add(piece.color)

    if len(selected) < PIECES_PER_ROUND:
        _LOGGER.warning(
            "Random draw stalled at %d pieces (seed=%s), filling in catalog order",
            len(selected),
            rng.seed,
        )
        for piece in AVAILABLE_PIECES:
            if len(selected) == PIECES_PER_ROUND:
                break
            if piece not in selected:
                selected.append(piece)

    return tuple(selected)
