"""Seedable pseudo-random stream for reproducible rounds.

A string seed is folded into a 32-bit hash and drives a Park-Miller
("minimal standard") multiplicative congruential generator. Not suitable
for anything security related.
"""

from __future__ import annotations

import secrets
import string
from collections.abc import Sequence
from typing import Final, TypeVar

from kingchain.config import SEED_LENGTH

_MODULUS: Final = 2_147_483_647  # 2**31 - 1
_MULTIPLIER: Final = 16_807
_ALPHABET: Final = string.digits + string.ascii_lowercase

T = TypeVar("T")


def new_seed() -> str:
    """Fresh base-36 token for rounds started without a seed."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(SEED_LENGTH))


def hash_seed(seed: str) -> int:
    """Fold *seed* into a signed 32-bit integer (``h * 31 + ch``)."""
    h = 0
    for ch in seed:
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    return h - 0x1_0000_0000 if h & 0x8000_0000 else h


class SeededRandom:
    """Deterministic stream of floats in ``[0, 1]`` derived from a string."""

    __slots__ = ("seed", "_state")

    def __init__(self, seed: str | None = None) -> None:
        self.seed = seed or new_seed()
        # Park-Miller needs a state in [1, m - 1]; zero would stick forever.
        self._state = hash_seed(self.seed) % _MODULUS or 1

    def random(self) -> float:
        self._state = (self._state * _MULTIPLIER) % _MODULUS
        return (self._state - 1) / (_MODULUS - 2)

    def randint(self, low: int, high: int) -> int:
        """Integer in ``[low, high]``; reversed bounds are swapped."""
        if low > high:
            low, high = high, low
        value = int(self.random() * (high - low + 1)) + low
        return min(max(low, value), high)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randint(0, len(seq) - 1)]
