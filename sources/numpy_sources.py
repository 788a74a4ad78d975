# sources/numpy_sources.py

"""
Uniform sources backed by NumPy bit generators.

NumPy already ships well-tested 64-bit generators (PCG64, PCG64DXSM, SFC64,
Philox). We only need their raw output, so these adapters call
`BitGenerator.random_raw()` once per draw and never touch NumPy's
`Generator` sampling methods. Range reduction stays in rng.sampling.

Seeding goes through the bit generator's own SeedSequence handling, which is
a pure function of the integer seed.

MT19937 is deliberately not offered: its raw output is 32 bits wide.
"""

from __future__ import annotations

from typing import Type

import numpy as np

from core_types import U64, U64_MASK


class NumpySource:
    """Wraps one NumPy BitGenerator instance as a uniform source."""

    def __init__(self, bit_generator: np.random.BitGenerator, name: str = "numpy") -> None:
        self._bitgen = bit_generator
        self.name = name

    def next_u64(self) -> U64:
        return int(self._bitgen.random_raw()) & U64_MASK


class NumpySourceFactory:
    """
    Seed -> NumpySource for a fixed BitGenerator class.

    Instances are what the registry hands out, so a SplittingRng built on
    e.g. PCG64 keeps splitting into PCG64 children.
    """

    def __init__(self, bitgen_cls: Type[np.random.BitGenerator], name: str) -> None:
        self.bitgen_cls = bitgen_cls
        self.name = name

    def __call__(self, seed: int) -> NumpySource:
        return NumpySource(self.bitgen_cls(int(seed) & U64_MASK), name=self.name)

    def __repr__(self) -> str:
        return f"NumpySourceFactory({self.bitgen_cls.__name__})"


PCG64_SOURCE = NumpySourceFactory(np.random.PCG64, "pcg64")
PCG64DXSM_SOURCE = NumpySourceFactory(np.random.PCG64DXSM, "pcg64dxsm")
SFC64_SOURCE = NumpySourceFactory(np.random.SFC64, "sfc64")
PHILOX_SOURCE = NumpySourceFactory(np.random.Philox, "philox")
