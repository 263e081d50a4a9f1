"""Square value type and coordinate helpers.

Board layout (x = file, y = rank)::

    y=4  a5 b5 c5 d5 e5
    ...
    y=0  a1 b1 c1 d1 e1
         x=0 ...     x=4

Squares have two text forms: the ``"x,y"`` key used by occupancy maps and
save payloads, and the algebraic name (``a1``..``e5``) used on the command
line.
"""

from __future__ import annotations

from dataclasses import dataclass

from kingchain.config import BOARD_SIZE

_FILES = "abcde"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    x: int
    y: int

    @property
    def key(self) -> str:
        """Occupancy key, e.g. ``Square(0, 2).key == '0,2'``."""
        return f"{self.x},{self.y}"

    @classmethod
    def from_key(cls, key: str) -> Square:
        """Parse an ``"x,y"`` key."""
        parts = key.split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid square key: {key!r}")
        try:
            x, y = (int(p) for p in parts)
        except ValueError:
            raise ValueError(f"Invalid square key: {key!r}") from None
        return cls(x, y)

    def offset(self, dx: int, dy: int) -> Square:
        return Square(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return self.key


def is_on_board(sq: Square) -> bool:
    """Whether both coordinates lie in ``[0, BOARD_SIZE)``."""
    return 0 <= sq.x < BOARD_SIZE and 0 <= sq.y < BOARD_SIZE


def all_squares() -> tuple[Square, ...]:
    """Every square, rank-major from ``(0, 0)``."""
    return tuple(Square(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE))


def corner_squares() -> tuple[Square, ...]:
    last = BOARD_SIZE - 1
    return (Square(0, 0), Square(0, last), Square(last, 0), Square(last, last))


def is_corner(sq: Square) -> bool:
    return sq in corner_squares()


def manhattan_distance(a: Square, b: Square) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(0, 0)`` → ``'a1'``."""
    return _FILES[sq.x] + str(sq.y + 1)


def parse_square(name: str) -> Square:
    """Parse an algebraic name, e.g. ``'c3'`` → ``Square(2, 2)``."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in _FILES or not text[1].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    sq = Square(_FILES.index(text[0]), int(text[1]) - 1)
    if not is_on_board(sq):
        raise ValueError(f"Invalid square name: {name!r}")
    return sq
