# config.py

"""
Global configuration for the splitrng project.

This module centralizes:
  - filesystem paths (logs, audit reports),
  - the default root seed and uniform source,
  - default statistical audit settings,
  - misc knobs you might want to tweak from a single place.

Library code never *requires* these values: every function takes explicit
arguments and only falls back to the defaults here when given None.
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple


# -------------------------------------------------------------------
# Core paths
# -------------------------------------------------------------------

# Root of the project (directory containing main.py, config.py, etc.)
PROJECT_ROOT: Path = Path(__file__).resolve().parent

# Directory for logs (if you want to write logs to disk)
LOGS_DIR: Path = PROJECT_ROOT / "logs"

# Directory for saved audit / scenario reports (optional)
REPORTS_DIR: Path = PROJECT_ROOT / "reports"


# -------------------------------------------------------------------
# Run mode & generator defaults
# -------------------------------------------------------------------

# Either "scenario" or "audit".
RUN_MODE: str = "scenario"

# Root seed every generator in a program run should descend from.
ROOT_SEED: int = 12345

# Registry name of the uniform source used when none is given.
DEFAULT_SOURCE: str = "xoshiro256**"


# -------------------------------------------------------------------
# Statistical audit settings
# -------------------------------------------------------------------

# Draws per roll audit.
N_SAMPLES_AUDIT: int = 20000

# Die sizes audited by default.
AUDIT_SIDES: Tuple[int, ...] = (2, 3, 6, 7, 100)

# Shuffle audit: length of the input list and number of shuffles.
# 24000 trials over 4! = 24 orderings -> 1000 expected hits per ordering.
SHUFFLE_AUDIT_LENGTH: int = 4
SHUFFLE_AUDIT_TRIALS: int = 24000

# One-sided standard normal quantile used for the chi-square critical value.
# 3.090 -> alpha = 0.001
CHI_SQUARE_Z: float = 3.090
