# rng/sampling.py

"""
Range reduction: turning raw 64-bit draws into values in [0, sides).

Two reductions live here:

    - biased_reduce: a single `draw % sides`. One draw, always. Not uniform
      when 2**64 is not a multiple of `sides`: residues r < (2**64 % sides)
      are hit with probability ceil(2**64 / sides) / 2**64, the rest with
      floor(2**64 / sides) / 2**64. The absolute skew is at most
      (sides - 1) / 2**64.

    - fair_sample: rejection sampling. Draws at or above

          limit = (2**64 // sides) * sides

      are discarded and redrawn, so every residue class is backed by exactly
      2**64 // sides raw values and the result is exactly uniform.

Rejection loop cost:
    A single draw is accepted with probability limit / 2**64, which is
    >= 1/2 for every sides <= 2**63 and very close to 1 for small dice.
    The number of draws per call is geometric with mean 2**64 / limit, so
    P(k or more draws) = (1 - limit / 2**64) ** (k - 1). The worst case is
    sides = 2**63 + 1, where almost half of all draws are rejected; use it
    when you want to see the loop spin. There is no iteration cap, since
    any cap would reintroduce bias.
"""

from __future__ import annotations

from typing import Callable

from core_types import TWO_64, U64, InvalidArgumentError

# Largest die a single 64-bit draw can address.
MAX_SIDES: int = TWO_64


def validate_sides(sides: int) -> int:
    """
    Check a roll request and return it unchanged.

    `sides` must be an int in [1, 2**64]. Anything else raises
    InvalidArgumentError. Callers validate before drawing, so a rejected
    request never advances generator state.
    """
    if isinstance(sides, bool) or not isinstance(sides, int):
        raise InvalidArgumentError(
            f"sides must be an int, got {type(sides).__name__}"
        )
    if sides <= 0:
        raise InvalidArgumentError(f"sides must be positive, got {sides}")
    if sides > MAX_SIDES:
        raise InvalidArgumentError(
            f"sides must be at most 2**64, got {sides}"
        )
    return sides


def biased_reduce(draw: U64, sides: int) -> int:
    """Modulo reduction of one raw draw."""
    return draw % sides


def rejection_limit(sides: int) -> int:
    """
    Largest multiple of `sides` not exceeding 2**64.

    Draws strictly below this value are accepted by fair_sample. For
    sides == 1 (and any power of two) the limit is 2**64, i.e. nothing is
    ever rejected.
    """
    return (TWO_64 // sides) * sides


def fair_sample(draw: Callable[[], U64], sides: int) -> int:
    """
    Exactly uniform value in [0, sides) via rejection sampling.

    Args:
        draw:
            Zero-argument callable returning one raw u64 per call. Called
            once per attempt; rejected draws are discarded.
        sides:
            Exclusive upper bound, already validated.

    Returns:
        draw % sides for the first draw below rejection_limit(sides).
    """
    limit = rejection_limit(sides)
    while True:
        value = draw()
        if value < limit:
            return value % sides
