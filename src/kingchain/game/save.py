"""Round snapshots for a persistence layer to store and replay.

Nothing here touches the filesystem: :meth:`BoardSave.as_dict` yields a
JSON-ready payload and :func:`load_save` rebuilds a round from it by
re-resolving piece ids against the catalog.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from kingchain.core.board_config import BoardConfig
from kingchain.core.catalog import find_piece
from kingchain.core.occupancy import Occupancy
from kingchain.core.piece import GamePiece
from kingchain.core.types import Square
from kingchain.game.round import RoundState

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BoardSave:
    """Board, placed piece ids in chain order, chain squares and score."""

    config: BoardConfig
    piece_ids: tuple[str, ...]
    chain: tuple[Square, ...]
    score: int
    name: str
    timestamp: float

    # ── Serialisation ────────────────────────────────────────────────────

    def as_dict(self) -> dict[str, Any]:
        return {
            "boardConfig": {
                "kingPosition": _square_dict(self.config.king),
                "missingSquares": [
                    _square_dict(sq) for sq in sorted(self.config.missing)
                ],
                "startingSquare": _square_dict(self.config.start),
                "seed": self.config.seed,
            },
            "selectedPieces": list(self.piece_ids),
            "captureChain": [_square_dict(sq) for sq in self.chain],
            "score": self.score,
            "name": self.name,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BoardSave:
        """Inverse of :meth:`as_dict`; raises ``ValueError`` on bad payloads."""
        try:
            board = data["boardConfig"]
            config = BoardConfig(
                king=_parse_square(board["kingPosition"]),
                start=_parse_square(board["startingSquare"]),
                missing=frozenset(
                    _parse_square(sq) for sq in board.get("missingSquares", ())
                ),
                seed=board.get("seed"),
            )
            return cls(
                config=config,
                piece_ids=tuple(str(pid) for pid in data["selectedPieces"]),
                chain=tuple(_parse_square(sq) for sq in data["captureChain"]),
                score=int(data.get("score", 0)),
                name=str(data.get("name", "")),
                timestamp=float(data.get("timestamp", 0.0)),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Invalid board save: {exc}") from exc


def make_save(state: RoundState, score: int, name: str | None = None) -> BoardSave:
    """Snapshot *state*; piece ids are recorded in chain order."""
    piece_ids = tuple(state.occupancy[sq].id for sq in state.chain)
    return BoardSave(
        config=state.config,
        piece_ids=piece_ids,
        chain=state.chain,
        score=score,
        name=name or f"Board {datetime.now():%Y-%m-%d %H:%M:%S}",
        timestamp=time.time(),
    )


def load_save(
    save: BoardSave, pieces: Sequence[GamePiece] | None = None
) -> RoundState:
    """Rebuild the round in *save*.

    The i-th piece id lands on the i-th chain square. Ids missing from the
    catalog, repeated ids and repeated squares are skipped together with
    their partner, so every chain entry of the result is occupied. *pieces*
    is the round's available set; it defaults to the pieces named by the
    save.
    """
    occupancy = Occupancy()
    chain: list[Square] = []
    resolved: list[GamePiece] = []
    for sq, piece_id in zip(save.chain, save.piece_ids):
        piece = find_piece(piece_id)
        if piece is None:
            _LOGGER.warning("Save %r names unknown piece %r", save.name, piece_id)
            continue
        if occupancy.square_of(piece.id) is not None or sq in chain:
            _LOGGER.warning(
                "Save %r repeats piece %r or square %s", save.name, piece_id, sq
            )
            continue
        occupancy = occupancy.place(piece, sq)
        chain.append(sq)
        resolved.append(piece)

    return RoundState(
        config=save.config,
        pieces=tuple(pieces) if pieces is not None else tuple(resolved),
        occupancy=occupancy,
        chain=tuple(chain),
    )


def _square_dict(sq: Square) -> dict[str, int]:
    return {"x": sq.x, "y": sq.y}


def _parse_square(raw: Mapping[str, Any]) -> Square:
    return Square(int(raw["x"]), int(raw["y"]))
