"""Console entry point: preview a generated round and replay placements."""

from __future__ import annotations

import argparse
import logging
import sys

from kingchain.config import ENV_DIFFICULTY, default_difficulty
from kingchain.core.enums import Difficulty
from kingchain.core.notation import render_board
from kingchain.core.piece_selector import LEVEL_PRESETS
from kingchain.core.types import Square, parse_square, square_name
from kingchain.game.interfaces import GamePhase, PlacementOutcome
from kingchain.game.session import GameSession


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="kingchain",
        description="Generate a capture-chain round and optionally play it",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--seed", type=str, default=None, help="Round seed")
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=default_difficulty().value,
        help=f"Board difficulty (default from ${ENV_DIFFICULTY})",
    )
    parser.add_argument(
        "--level",
        type=str,
        choices=[level.id for level in LEVEL_PRESETS],
        default=None,
        help="Fixed piece preset instead of a random draw",
    )
    parser.add_argument(
        "--chain",
        type=str,
        default="",
        help="Comma-separated squares to place the pieces on, e.g. a1,a3",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    try:
        args.squares = _parse_chain(args.chain)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def _parse_chain(text: str) -> list[Square]:
    return [parse_square(part) for part in text.split(",") if part.strip()]


def run(args: argparse.Namespace) -> int:
    """Play out *args* and print the result. Returns the exit code."""
    session = GameSession(difficulty=Difficulty(args.difficulty), level_id=args.level)
    state = session.new_round(args.seed)

    print(f"seed: {state.config.seed}  difficulty: {args.difficulty}")
    print("pieces: " + ", ".join(p.id for p in state.pieces))

    refused = False
    for piece, sq in zip(state.pieces, args.squares):
        if session.phase is GamePhase.ROUND_COMPLETE:
            break
        outcome = session.drop_piece(piece, sq)
        if outcome is not PlacementOutcome.PLACED:
            print(f"{piece.id} on {square_name(sq)}: {outcome.name.lower()}")
            refused = True
            break

    if session.history:
        result = session.history[-1]
        print(render_board(result.round.config, result.round.occupancy, result.round.chain))
        print(f"king captured: {result.points} points ({result.multiplier_trace})")
        return 0

    current = session.round
    if current is None:
        return 1
    print(render_board(current.config, current.occupancy, current.chain))
    if current.chain:
        print(
            f"potential: {session.potential_points} points ({session.multiplier_trace})"
        )
    return 1 if refused else 0


def main(argv: list[str] | None = None) -> None:
    """Launch the kingchain console preview."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
