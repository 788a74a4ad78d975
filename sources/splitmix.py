# sources/splitmix.py

"""
SplitMix64.

A tiny 64-bit generator whose main job here is seed expansion: wider-state
sources (xoshiro256**) fill their state words from successive SplitMix64
outputs, so a single u64 seed never leaves them in an all-zero state.
"""

from __future__ import annotations

from typing import Tuple

from core_types import U64, U64_MASK

GOLDEN_GAMMA: int = 0x9E3779B97F4A7C15
_MIX_1: int = 0xBF58476D1CE4E5B9
_MIX_2: int = 0x94D049BB133111EB


def splitmix64_step(x: int) -> Tuple[U64, int]:
    """SplitMix64 step: returns (output, next_x)."""
    x = (x + GOLDEN_GAMMA) & U64_MASK
    z = x
    z = ((z ^ (z >> 30)) * _MIX_1) & U64_MASK
    z = ((z ^ (z >> 27)) * _MIX_2) & U64_MASK
    z ^= z >> 31
    return z, x


class SplitMix64:
    """SplitMix64 as a uniform source (seed -> next_u64 stream)."""

    name = "splitmix64"

    def __init__(self, seed: int) -> None:
        self._x = int(seed) & U64_MASK

    def next_u64(self) -> U64:
        out, self._x = splitmix64_step(self._x)
        return out
