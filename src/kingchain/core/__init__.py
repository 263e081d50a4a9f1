"""Core domain layer: pure capture-chain rules with no external dependencies.

Quick start::

    from kingchain.core import (
        Occupancy, Square, generate_board, get_piece, score_chain, validate_chain,
    )

    config = generate_board(seed="demo")
    occ = Occupancy({Square(0, 0): get_piece("rook-blue")})
    validate_chain(occ, [Square(0, 0)], config.king)  # False, needs two pieces
"""

from kingchain.core.board_config import BoardConfig
from kingchain.core.board_generator import generate_board
from kingchain.core.catalog import (
    AVAILABLE_PIECES,
    PIECE_CATALOG,
    find_piece,
    get_piece,
    pieces_of_type,
)
from kingchain.core.chain import (
    ChainScore,
    chain_is_connected,
    score_chain,
    validate_chain,
)
from kingchain.core.enums import PLACEABLE_TYPES, Difficulty, PieceColor, PieceType
from kingchain.core.move_generator import can_capture, capture_targets, moves_from
from kingchain.core.notation import render_board
from kingchain.core.occupancy import Occupancy
from kingchain.core.piece import ENEMY_KING, GamePiece
from kingchain.core.piece_selector import (
    LEVEL_PRESETS,
    LevelPreset,
    get_level,
    select_pieces,
)
from kingchain.core.seeded import SeededRandom, new_seed
from kingchain.core.types import (
    Square,
    all_squares,
    corner_squares,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Difficulty",
    "PLACEABLE_TYPES",
    "PieceColor",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "corner_squares",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "BoardConfig",
    "ENEMY_KING",
    "GamePiece",
    "Occupancy",
    # Catalog
    "AVAILABLE_PIECES",
    "PIECE_CATALOG",
    "find_piece",
    "get_piece",
    "pieces_of_type",
    # Rules
    "ChainScore",
    "can_capture",
    "capture_targets",
    "chain_is_connected",
    "moves_from",
    "score_chain",
    "validate_chain",
    # Generators
    "LEVEL_PRESETS",
    "LevelPreset",
    "SeededRandom",
    "generate_board",
    "get_level",
    "new_seed",
    "select_pieces",
    # Notation
    "render_board",
]
