# rng/shuffle.py

"""
Fisher–Yates shuffle.

Walks the sequence from the back: for i = n-1 down to 1, pick j uniformly in
[0, i] and swap positions i and j. Given an exactly uniform, independent
index sampler, each of the n! orderings comes out with probability 1/n!.

The sampler is passed in rather than a generator so this module stays
independent of where the randomness comes from; SplittingRng hands in its
fair_roll.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")


def fisher_yates(items: MutableSequence[T], index_sampler: Callable[[int], int]) -> None:
    """
    Permute `items` in place.

    `index_sampler(k)` must return a value in [0, k). It is called exactly
    len(items) - 1 times (zero times for len <= 1), with k = n, n-1, ..., 2.
    """
    for i in range(len(items) - 1, 0, -1):
        j = index_sampler(i + 1)
        items[i], items[j] = items[j], items[i]
