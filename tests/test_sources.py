# tests/test_sources.py

from __future__ import annotations

import numpy as np
import pytest

from core_types import TWO_64, UnknownSourceError
from sources.counter import CounterSource
from sources.numpy_sources import PCG64_SOURCE, NumpySource
from sources.registry import (
    SOURCES,
    available_sources,
    get_source_factory,
    source_name,
)
from sources.splitmix import SplitMix64, splitmix64_step
from sources.xoshiro import Xoshiro256StarStar


def _take(source, n):
    return [source.next_u64() for _ in range(n)]


def test_splitmix64_reference_vector():
    sm = SplitMix64(0)
    assert _take(sm, 3) == [
        0xE220A8397B1DCDAF,
        0x6E789E6AA1B965F4,
        0x06C45D188009454F,
    ]


def test_splitmix64_step_returns_output_and_next_state():
    out, nxt = splitmix64_step(0)
    assert out == 0xE220A8397B1DCDAF
    assert nxt == 0x9E3779B97F4A7C15


def test_xoshiro_state_comes_from_splitmix():
    # seed expansion must never produce the forbidden all-zero state
    xo = Xoshiro256StarStar(0)
    assert any(xo._s)
    assert xo._s[0] == 0xE220A8397B1DCDAF


@pytest.mark.parametrize("name", sorted(SOURCES))
def test_every_source_is_deterministic(name):
    factory = SOURCES[name]
    a = _take(factory(2024), 64)
    b = _take(factory(2024), 64)
    assert a == b
    assert all(0 <= v < TWO_64 for v in a)


@pytest.mark.parametrize("name", sorted(set(SOURCES) - {"counter"}))
def test_different_seeds_give_different_sequences(name):
    factory = SOURCES[name]
    assert _take(factory(1), 16) != _take(factory(2), 16)


@pytest.mark.parametrize("name", sorted(SOURCES))
def test_seed_is_reduced_mod_2_64(name):
    factory = SOURCES[name]
    assert _take(factory(5 + TWO_64), 8) == _take(factory(5), 8)


def test_counter_source_counts_and_wraps():
    src = CounterSource(TWO_64 - 2)
    assert _take(src, 4) == [TWO_64 - 2, TWO_64 - 1, 0, 1]


def test_numpy_source_matches_raw_bit_generator():
    ours = PCG64_SOURCE(99)
    theirs = np.random.PCG64(99)
    assert _take(ours, 10) == [int(theirs.random_raw()) for _ in range(10)]


def test_numpy_source_wraps_any_bit_generator():
    src = NumpySource(np.random.SFC64(3), name="sfc64")
    assert src.name == "sfc64"
    assert isinstance(src.next_u64(), int)


def test_registry_lookup_is_case_insensitive():
    assert get_source_factory("PCG64") is SOURCES["pcg64"]
    assert get_source_factory(" xoshiro256** ") is Xoshiro256StarStar


def test_registry_passes_factories_through():
    assert get_source_factory(CounterSource) is CounterSource


def test_registry_rejects_unknown_names():
    with pytest.raises(UnknownSourceError) as excinfo:
        get_source_factory("mersenne")
    assert "mersenne" in str(excinfo.value)
    assert isinstance(excinfo.value, KeyError)


def test_available_sources_sorted():
    names = available_sources()
    assert names == sorted(names)
    assert {"xoshiro256**", "pcg64", "counter"} <= set(names)


def test_source_name():
    assert source_name(Xoshiro256StarStar) == "xoshiro256**"
    assert source_name(PCG64_SOURCE) == "pcg64"

    def custom(seed):
        return CounterSource(seed)

    assert source_name(custom) == "custom"
