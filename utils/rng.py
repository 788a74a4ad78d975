# utils/rng.py

"""
Random number generator utilities.

We use one SplittingRng per program run so that:
  - every run is reproducible from a single root seed,
  - subsystems get their own child generators via split().

This module provides a single helper, `make_rng`, which you should call
in main.py and then pass the resulting generator (or children split from
it) down into the rest of the program.
"""

from __future__ import annotations

from typing import Optional, Union

from config import DEFAULT_SOURCE, ROOT_SEED
from core_types import SourceFactory
from rng.generator import SplittingRng
from sources.registry import get_source_factory


def make_rng(
    seed: Optional[int] = None,
    source: Optional[Union[str, SourceFactory]] = None,
) -> SplittingRng:
    """
    Create the root SplittingRng.

    Args:
        seed:
            Root seed. If None, config.ROOT_SEED is used; this project does
            not draw seeds from OS entropy or the clock.
        source:
            Registry name (e.g. "pcg64") or a source factory. If None,
            config.DEFAULT_SOURCE is used.

    Returns:
        SplittingRng instance.
    """
    if seed is None:
        seed = ROOT_SEED
    factory = get_source_factory(source if source is not None else DEFAULT_SOURCE)
    return SplittingRng(seed, source=factory)
