# audit/uniformity.py

"""
Statistical uniformity checks for rolls and shuffles.

This module repeatedly samples from a SplittingRng and compares the observed
frequencies with a uniform distribution using Pearson's chi-square test:

    statistic = sum_k (observed_k - expected_k)^2 / expected_k

with k - 1 degrees of freedom for k categories. The critical value uses the
Wilson–Hilferty approximation, which is accurate to a few tenths for the
degrees of freedom used here and needs nothing beyond NumPy:

    critical(dof, z) = dof * (1 - 2/(9 dof) + z * sqrt(2/(9 dof)))^3

where z is the one-sided standard normal quantile (3.090 for alpha = 0.001).

Frequencies come back as pandas Series so they print and export cleanly.
"""

from __future__ import annotations

import itertools
import math
from collections import Counter
from typing import Callable, Optional, Sequence, Union

import numpy as np
import pandas as pd

from config import CHI_SQUARE_Z
from core_types import UniformityResult
from rng.generator import SplittingRng

# Pearson's test wants at least this many expected hits per category.
MIN_EXPECTED_PER_CATEGORY: int = 5

# 8! = 40320 orderings; beyond that the tally gets silly.
MAX_SHUFFLE_AUDIT_LENGTH: int = 8

ROLL_METHODS = ("fair", "biased")

ArrayLike = Union[np.ndarray, pd.Series, Sequence[float]]


# -------------------------------------------------------------------
# Chi-square helpers
# -------------------------------------------------------------------


def chi_square_statistic(
    observed: ArrayLike,
    expected: Optional[ArrayLike] = None,
) -> float:
    """
    Pearson chi-square statistic.

    If `expected` is None, a uniform expectation (total / k per category)
    is used.
    """
    obs = np.asarray(observed, dtype=float)
    if obs.size == 0:
        raise ValueError("observed must contain at least one category")

    if expected is None:
        exp = np.full(obs.shape, obs.sum() / obs.size)
    else:
        exp = np.asarray(expected, dtype=float)
        if exp.shape != obs.shape:
            raise ValueError(
                f"observed/expected shape mismatch: {obs.shape} vs {exp.shape}"
            )

    if np.any(exp <= 0.0):
        raise ValueError("expected counts must be positive")

    return float(np.sum((obs - exp) ** 2 / exp))


def chi_square_critical(dof: int, z: float = CHI_SQUARE_Z) -> float:
    """Approximate upper critical value of chi-square(dof) at quantile z."""
    if dof <= 0:
        raise ValueError(f"dof must be positive, got {dof}")
    h = 2.0 / (9.0 * dof)
    return float(dof * (1.0 - h + z * math.sqrt(h)) ** 3)


def _check_sample_size(n_samples: int, categories: int) -> None:
    if n_samples <= 0:
        raise ValueError(f"n_samples must be positive, got {n_samples}")
    if n_samples < MIN_EXPECTED_PER_CATEGORY * categories:
        raise ValueError(
            f"n_samples={n_samples} is too small for {categories} categories "
            f"(need at least {MIN_EXPECTED_PER_CATEGORY * categories})"
        )


def _uniformity_result(label: str, counts: pd.Series, z: float) -> UniformityResult:
    categories = int(counts.size)
    n_samples = int(counts.sum())

    if categories == 1:
        # One outcome: nothing to test, the only question is coverage
        return UniformityResult(
            label=label,
            categories=1,
            n_samples=n_samples,
            statistic=0.0,
            critical_value=0.0,
            passed=True,
        )

    statistic = chi_square_statistic(counts.to_numpy())
    critical = chi_square_critical(categories - 1, z)
    return UniformityResult(
        label=label,
        categories=categories,
        n_samples=n_samples,
        statistic=round(statistic, 4),
        critical_value=round(critical, 4),
        passed=statistic <= critical,
    )


# -------------------------------------------------------------------
# Rolls
# -------------------------------------------------------------------


def _roll_method(rng: SplittingRng, method: str) -> Callable[[int], int]:
    if method == "fair":
        return rng.fair_roll
    if method == "biased":
        return rng.biased_roll
    raise ValueError(f"method must be one of {ROLL_METHODS}, got {method!r}")


def roll_frequencies(
    rng: SplittingRng,
    sides: int,
    n_samples: int,
    method: str = "fair",
) -> pd.Series:
    """
    Roll a `sides`-sided die `n_samples` times and count each outcome.

    Returns:
        Series indexed 0..sides-1 (every face present, zero-filled) with
        the number of times each value came up.
    """
    roll = _roll_method(rng, method)
    _check_sample_size(n_samples, sides)

    samples = [roll(sides) for _ in range(n_samples)]
    counts = (
        pd.Series(samples, dtype="int64")
        .value_counts()
        .reindex(range(sides), fill_value=0)
        .astype("int64")
    )
    counts.index.name = "value"
    counts.name = "count"
    return counts


def audit_rolls(
    rng: SplittingRng,
    sides: int,
    n_samples: int,
    method: str = "fair",
    z: float = CHI_SQUARE_Z,
) -> UniformityResult:
    """Chi-square uniformity check of fair_roll / biased_roll."""
    counts = roll_frequencies(rng, sides, n_samples, method=method)
    return _uniformity_result(f"{method}_roll({sides})", counts, z)


# -------------------------------------------------------------------
# Shuffles
# -------------------------------------------------------------------


def _ordering_label(ordering) -> str:
    return "-".join(str(x) for x in ordering)


def permutation_frequencies(
    rng: SplittingRng,
    n_items: int,
    n_trials: int,
) -> pd.Series:
    """
    Shuffle [0, 1, ..., n_items-1] `n_trials` times and count each ordering.

    Returns:
        Series indexed by all n_items! orderings in lexicographic order
        (labels like "0-1-2-3"), zero-filled.
    """
    if n_items <= 0:
        raise ValueError(f"n_items must be positive, got {n_items}")
    if n_items > MAX_SHUFFLE_AUDIT_LENGTH:
        raise ValueError(
            f"n_items must be at most {MAX_SHUFFLE_AUDIT_LENGTH}, got {n_items}"
        )
    _check_sample_size(n_trials, math.factorial(n_items))

    base = list(range(n_items))
    seen: Counter = Counter()
    for _ in range(n_trials):
        seen[tuple(rng.shuffle(base))] += 1

    orderings = list(itertools.permutations(base))
    counts = pd.Series(
        [seen.get(p, 0) for p in orderings],
        index=pd.Index([_ordering_label(p) for p in orderings], name="ordering"),
        name="count",
        dtype="int64",
    )
    return counts


def audit_shuffle(
    rng: SplittingRng,
    n_items: int,
    n_trials: int,
    z: float = CHI_SQUARE_Z,
) -> UniformityResult:
    """Chi-square uniformity check over all n_items! shuffle orderings."""
    counts = permutation_frequencies(rng, n_items, n_trials)
    return _uniformity_result(f"shuffle({n_items})", counts, z)
