# core_types.py

"""
Shared type definitions, constants and errors for the splitrng project.

This module is intentionally small and dependency-free so it can be imported
from anywhere (sources/, rng/, audit/, etc.) without risk of circular
imports.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Protocol


# ---------- Basic aliases ----------

# A 64-bit unsigned value, stored as a plain Python int in [0, 2**64).
U64 = int
Seed = int


# ---------- Constants ----------

U64_MASK: int = (1 << 64) - 1
TWO_64: int = 1 << 64

# Bit of a raw draw that get_bool() returns. Changing this changes every
# downstream sequence that depends on booleans, so it must stay fixed.
BOOL_BIT: int = 63


# ---------- Pluggable uniform source ----------


class UniformSource(Protocol):
    """
    Anything that produces 64-bit unsigned draws.

    The only capability required is `next_u64`, which returns a value in
    [0, 2**64) and deterministically advances the source's own state.
    """

    def next_u64(self) -> U64:
        ...


# Seed -> fresh source. A class whose constructor takes the seed qualifies.
SourceFactory = Callable[[Seed], UniformSource]


# ---------- Errors ----------


class InvalidArgumentError(ValueError):
    """
    Raised when a caller violates an operation's contract, e.g. rolling a
    die with zero sides. Raised before any draw is consumed.
    """


class UnknownSourceError(KeyError):
    """Raised when a uniform source name is not in the registry."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message by default
        return str(self.args[0]) if self.args else ""


# ---------- Result dataclasses ----------


@dataclass(frozen=True)
class UniformityResult:
    """
    Outcome of one chi-square goodness-of-fit audit.

    `passed` is True when the statistic does not exceed the critical value,
    i.e. the sample is statistically consistent with a uniform distribution.
    """

    label: str
    categories: int
    n_samples: int
    statistic: float
    critical_value: float
    passed: bool

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
