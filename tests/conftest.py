# tests/conftest.py

from __future__ import annotations

from typing import Callable, Iterable, List

import pytest

from rng.generator import SplittingRng
from sources.counter import CounterSource

# Stricter than config.CHI_SQUARE_Z (alpha = 1e-4) so fixed-seed statistical
# tests are not fragile.
TEST_Z = 3.719


class ScriptedSource:
    """Replays a fixed list of raw draws, then fails loudly."""

    name = "scripted"

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self._pos = 0

    def next_u64(self) -> int:
        if self._pos >= len(self._values):
            raise AssertionError("ScriptedSource ran out of draws")
        out = self._values[self._pos]
        self._pos += 1
        return out


def scripted(values: Iterable[int]) -> Callable[[int], ScriptedSource]:
    """Source factory that ignores the seed and replays `values`."""
    values = list(values)

    def build(seed: int) -> ScriptedSource:
        return ScriptedSource(values)

    return build


@pytest.fixture
def rng() -> SplittingRng:
    return SplittingRng(12345)


@pytest.fixture
def twin_rngs():
    """Two independently constructed generators with the same seed."""
    return SplittingRng(12345), SplittingRng(12345)


@pytest.fixture
def counter_rng() -> SplittingRng:
    return SplittingRng(1000, source=CounterSource)
