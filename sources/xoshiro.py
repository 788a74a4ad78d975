# sources/xoshiro.py

"""
xoshiro256** (Blackman & Vigna), in pure Python.

This is the default uniform source. 256 bits of state, 64-bit output:

    result = rotl(s1 * 5, 7) * 9

Seeding from a single u64 fills the four state words with successive
SplitMix64 outputs, which is the usual `seed_from_u64` scheme for the
xoshiro family.
"""

from __future__ import annotations

from typing import List

from core_types import U64, U64_MASK
from .splitmix import splitmix64_step


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & U64_MASK


class Xoshiro256StarStar:
    name = "xoshiro256**"

    def __init__(self, seed: int) -> None:
        x = int(seed) & U64_MASK
        state: List[int] = []
        for _ in range(4):
            word, x = splitmix64_step(x)
            state.append(word)
        self._s = state

    def next_u64(self) -> U64:
        s = self._s
        result = (_rotl((s[1] * 5) & U64_MASK, 7) * 9) & U64_MASK

        t = (s[1] << 17) & U64_MASK
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotl(s[3], 45)

        return result
