# rng/generator.py

"""
SplittingRng: a deterministic generator that can spawn independent children.

A program is expected to build ONE SplittingRng from a root seed and derive
all other randomness from it, either by drawing directly or by calling
`split()` to hand a dedicated child to a subsystem. Every operation consumes
a fixed, documented number of raw draws (or, for fair rolls and shuffles, a
number determined entirely by the draws themselves), so the whole program's
random behavior is a pure function of the root seed and the call sequence.

Draw accounting per call:

    get_u64 / get_u32 / get_bool   1 draw
    biased_roll(sides)             1 draw
    fair_roll(sides)               >= 1 draw (rejection sampling)
    shuffle(seq), len n            >= n - 1 draws (0 when n <= 1)
    split()                        1 draw on the parent

Invalid roll requests and non-mutable targets for shuffle_in_place raise
before any draw is taken.

Threading:
    An instance is NOT safe to share between threads. For parallel work,
    split one child per task *before* starting the workers and give each
    worker exclusive ownership of its child. Keeping results reproducible
    also requires a stable task -> generator assignment and a stable amount
    of generator use per task; that part is up to the caller.

Persistence:
    Generator state cannot be saved, restored or fast-forwarded. Reproduce a
    generator by re-running the same call sequence from the same seed.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Iterable, List, Optional, TypeVar

from core_types import BOOL_BIT, U64, U64_MASK, InvalidArgumentError, Seed, SourceFactory
from sources.xoshiro import Xoshiro256StarStar
from utils.logging_utils import get_logger
from .sampling import biased_reduce, fair_sample, validate_sides
from .shuffle import fisher_yates

T = TypeVar("T")

logger = get_logger(__name__)


def _factory_name(factory: SourceFactory) -> str:
    return getattr(factory, "name", None) or getattr(factory, "__name__", repr(factory))


class SplittingRng:
    """
    Splittable, seedable random generator.

    Args:
        seed:
            Root seed, an int. Reduced modulo 2**64. Floats, bools and other
            non-int values raise InvalidArgumentError rather than being
            truncated.
        source:
            Factory building the underlying uniform source from a seed.
            Children created by split() use the same factory. Defaults to
            xoshiro256**.
    """

    def __init__(self, seed: Seed, source: Optional[SourceFactory] = None) -> None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise InvalidArgumentError(
                f"seed must be an int, got {type(seed).__name__}"
            )
        self._seed = seed & U64_MASK
        self._factory: SourceFactory = source if source is not None else Xoshiro256StarStar
        self._source = self._factory(self._seed)
        self._draws = 0

    # -------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------

    @property
    def seed(self) -> Seed:
        """Seed this instance was constructed (or split) from."""
        return self._seed

    @property
    def draws(self) -> int:
        """Number of raw draws consumed since construction."""
        return self._draws

    @property
    def source_factory(self) -> SourceFactory:
        return self._factory

    def __repr__(self) -> str:
        return (
            f"SplittingRng(seed={self._seed}, "
            f"source={_factory_name(self._factory)!r}, draws={self._draws})"
        )

    # -------------------------------------------------------------------
    # Raw draws
    # -------------------------------------------------------------------

    def _step(self) -> U64:
        self._draws += 1
        return self._source.next_u64()

    def get_u64(self) -> U64:
        """One raw draw, unmodified."""
        return self._step()

    def get_u32(self) -> int:
        """One raw draw, high 32 bits."""
        return self._step() >> 32

    def get_bool(self) -> bool:
        """
        One raw draw, reduced to its most-significant bit (bit 63).

        Exactly one draw per boolean, so boolean use never shifts the
        draw count of anything that follows.
        """
        return bool((self._step() >> BOOL_BIT) & 1)

    # -------------------------------------------------------------------
    # Rolls
    # -------------------------------------------------------------------

    def biased_roll(self, sides: int) -> int:
        """
        Value in [0, sides) as `draw % sides`, one draw.

        Fast but very slightly non-uniform; see rng.sampling for the exact
        skew. Raises InvalidArgumentError for sides == 0 without drawing.
        """
        validate_sides(sides)
        return biased_reduce(self._step(), sides)

    def fair_roll(self, sides: int) -> int:
        """
        Exactly uniform value in [0, sides).

        Uses rejection sampling, so it may consume more than one draw;
        fewer than two on average for any sides <= 2**63. fair_roll(1)
        consumes one draw and returns 0. Raises InvalidArgumentError for
        sides == 0 without drawing.
        """
        validate_sides(sides)
        return fair_sample(self._step, sides)

    # -------------------------------------------------------------------
    # Shuffling
    # -------------------------------------------------------------------

    def shuffle(self, sequence: Iterable[T]) -> List[T]:
        """
        Return a uniformly random permutation of `sequence` as a new list.

        The input is left untouched. Sequences of length 0 or 1 come back
        in their original order without consuming any draws.
        """
        items = list(sequence)
        fisher_yates(items, self.fair_roll)
        return items

    def shuffle_in_place(self, items: MutableSequence[T]) -> None:
        """
        Same permutation as shuffle(), applied to `items` directly.

        Raises TypeError for immutable sequences (tuples, strings) without
        drawing.
        """
        if not isinstance(items, MutableSequence):
            raise TypeError(
                f"shuffle_in_place needs a mutable sequence, got {type(items).__name__}"
            )
        fisher_yates(items, self.fair_roll)

    # -------------------------------------------------------------------
    # Splitting
    # -------------------------------------------------------------------

    def split(self) -> "SplittingRng":
        """
        Derive an independent child generator.

        Consumes exactly one draw from this generator and uses it as the
        child's seed, with the same source algorithm. Parent and child
        share no state afterwards, and repeated splits give distinct
        children since each one consumes a fresh draw.
        """
        child_seed = self._step()
        logger.debug(
            "split: parent seed=%d draw #%d -> child seed=%d",
            self._seed,
            self._draws,
            child_seed,
        )
        return SplittingRng(child_seed, source=self._factory)
