# sources/counter.py

"""
Counter-based stub source.

Emits seed, seed + 1, seed + 2, ... (mod 2**64). Useless as randomness but
handy in unit tests: every draw is predictable, so draw accounting and the
range-reduction formulas can be checked exactly.
"""

from __future__ import annotations

from core_types import U64, U64_MASK


class CounterSource:
    name = "counter"

    def __init__(self, seed: int) -> None:
        self._next = int(seed) & U64_MASK

    def next_u64(self) -> U64:
        out = self._next
        self._next = (self._next + 1) & U64_MASK
        return out
