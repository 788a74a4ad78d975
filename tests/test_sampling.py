# tests/test_sampling.py

from __future__ import annotations

import pytest

from audit.uniformity import audit_rolls
from conftest import TEST_Z, scripted
from core_types import TWO_64, InvalidArgumentError
from rng.generator import SplittingRng
from rng.sampling import (
    MAX_SIDES,
    biased_reduce,
    fair_sample,
    rejection_limit,
    validate_sides,
)


@pytest.mark.parametrize(
    "sides, limit",
    [
        (1, TWO_64),
        (2, TWO_64),
        (3, TWO_64 - 1),
        (6, TWO_64 - 4),
        (2**63 + 1, 2**63 + 1),
        (TWO_64, TWO_64),
    ],
)
def test_rejection_limit(sides, limit):
    assert rejection_limit(sides) == limit
    assert rejection_limit(sides) % sides == 0


def test_validate_sides_accepts_full_range():
    assert validate_sides(1) == 1
    assert validate_sides(MAX_SIDES) == MAX_SIDES


@pytest.mark.parametrize("bad", [0, -5, MAX_SIDES + 1, 2.0, "3", False])
def test_validate_sides_rejects(bad):
    with pytest.raises(InvalidArgumentError):
        validate_sides(bad)


def test_biased_reduce():
    assert biased_reduce(17, 5) == 2
    assert biased_reduce(TWO_64 - 1, 6) == (TWO_64 - 1) % 6


def test_fair_sample_accepts_first_draw_below_limit():
    draws = iter([41])
    assert fair_sample(lambda: next(draws), 6) == 41 % 6


def test_fair_sample_rejects_at_and_above_limit():
    limit = rejection_limit(6)
    draws = iter([TWO_64 - 1, limit, limit - 1])
    calls = []

    def draw():
        value = next(draws)
        calls.append(value)
        return value

    # limit - 1 = 2**64 - 5, which is 5 mod 6
    assert fair_sample(draw, 6) == 5
    assert calls == [TWO_64 - 1, limit, limit - 1]


def test_fair_roll_retries_through_rejections():
    sides = 2**63 + 1
    rng = SplittingRng(0, source=scripted([TWO_64 - 1, 2**63 + 1, 5]))
    assert rng.fair_roll(sides) == 5
    assert rng.draws == 3


def test_fair_roll_d3_rejects_only_the_top_value():
    rng = SplittingRng(0, source=scripted([TWO_64 - 1, TWO_64 - 2, 7]))
    # 2**64 - 2 is below the limit (2**64 - 1) and is accepted
    assert rng.fair_roll(3) == (TWO_64 - 2) % 3
    assert rng.draws == 2


def test_fair_roll_near_2_63_terminates_and_rejects(rng):
    sides = 2**63 + 1
    n = 200
    values = [rng.fair_roll(sides) for _ in range(n)]
    assert all(0 <= v < sides for v in values)
    # about half of all draws are rejected at this size
    assert n < rng.draws < 4 * n


def test_fair_roll_near_2_63_is_balanced(rng):
    sides = 2**63 + 1
    n = 4000
    low = sum(rng.fair_roll(sides) < sides // 2 for _ in range(n))
    assert 0.45 < low / n < 0.55


@pytest.mark.parametrize("sides", [2, 3, 6, 7, 100])
def test_fair_roll_is_uniform(sides):
    result = audit_rolls(SplittingRng(2024 + sides), sides, 20000, method="fair", z=TEST_Z)
    assert result.n_samples == 20000
    assert result.categories == sides
    assert result.passed, result
