"""
The splitting generator layer.

    from rng import SplittingRng

    root = SplittingRng(12345)
    terrain = root.split()
    loot = root.split()
"""

from .generator import SplittingRng
from .sampling import MAX_SIDES, fair_sample, rejection_limit, validate_sides
from .shuffle import fisher_yates

__all__ = [
    "SplittingRng",
    "MAX_SIDES",
    "fair_sample",
    "rejection_limit",
    "validate_sides",
    "fisher_yates",
]
