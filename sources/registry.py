# sources/registry.py

"""
Name -> source factory lookup.

Used by config.DEFAULT_SOURCE, utils.rng.make_rng and the --source CLI flag.
The core generator itself never looks names up; it just receives a factory.
"""

from __future__ import annotations

from typing import Dict, List, Union

from core_types import SourceFactory, UnknownSourceError
from .counter import CounterSource
from .numpy_sources import (
    PCG64_SOURCE,
    PCG64DXSM_SOURCE,
    PHILOX_SOURCE,
    SFC64_SOURCE,
)
from .splitmix import SplitMix64
from .xoshiro import Xoshiro256StarStar


SOURCES: Dict[str, SourceFactory] = {
    "xoshiro256**": Xoshiro256StarStar,
    "splitmix64": SplitMix64,
    "pcg64": PCG64_SOURCE,
    "pcg64dxsm": PCG64DXSM_SOURCE,
    "sfc64": SFC64_SOURCE,
    "philox": PHILOX_SOURCE,
    "counter": CounterSource,
}


def available_sources() -> List[str]:
    return sorted(SOURCES)


def get_source_factory(source: Union[str, SourceFactory]) -> SourceFactory:
    """
    Resolve a registry name (case-insensitive) to its factory.

    Factories passed in directly are returned unchanged, so callers can
    accept either form.
    """
    if callable(source):
        return source

    key = str(source).strip().lower()
    try:
        return SOURCES[key]
    except KeyError:
        raise UnknownSourceError(
            f"Unknown uniform source {source!r}; "
            f"choose one of: {', '.join(available_sources())}"
        ) from None


def source_name(factory: SourceFactory) -> str:
    """Best-effort display name for a factory."""
    name = getattr(factory, "name", None)
    if name:
        return str(name)
    return getattr(factory, "__name__", repr(factory))
