# audit/pipeline.py

"""
High-level entry points used by main.py.

This module glues together:
    - root generator construction (utils.rng.make_rng),
    - the reference call-sequence scenario,
    - roll and shuffle uniformity audits,
    - optional JSON reports on disk.

Public entry points:

    run_scenario(...)
    run_audit(...)
    save_report(...)

Every audit runs on its own child generator split from the root, so adding,
removing or reordering audits does not change the samples any *earlier*
audit sees, and the whole report is reproducible from (seed, source).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, Union

import numpy as np
import pandas as pd

from config import (
    AUDIT_SIDES,
    CHI_SQUARE_Z,
    N_SAMPLES_AUDIT,
    REPORTS_DIR,
    SHUFFLE_AUDIT_LENGTH,
    SHUFFLE_AUDIT_TRIALS,
)
from core_types import SourceFactory, UniformityResult
from sources.registry import source_name
from utils.logging_utils import get_logger
from utils.rng import make_rng
from .uniformity import ROLL_METHODS, audit_rolls, audit_shuffle

logger = get_logger(__name__)

SCENARIO_INPUT = [0, 1, 2, 3, 4]

REPORT_COLUMNS = [
    "label",
    "categories",
    "n_samples",
    "statistic",
    "critical_value",
    "passed",
]


# -------------------------------------------------------------------
# Scenario
# -------------------------------------------------------------------


def run_scenario(
    seed: Optional[int] = None,
    source: Optional[Union[str, SourceFactory]] = None,
) -> Dict[str, Any]:
    """
    Run the reference call sequence and record every intermediate value.

    Sequence on one root generator:

        shuffle([0, 1, 2, 3, 4]) -> biased_roll(6) -> fair_roll(6)
        -> get_bool() -> split() -> get_u64() on parent and on child

    Re-running with the same (seed, source) must reproduce the returned
    dict exactly.
    """
    rng = make_rng(seed, source)

    shuffled = rng.shuffle(SCENARIO_INPUT)
    biased = rng.biased_roll(6)
    fair = rng.fair_roll(6)
    flag = rng.get_bool()
    child = rng.split()
    parent_u64 = rng.get_u64()
    child_u64 = child.get_u64()

    return {
        "seed": rng.seed,
        "source": source_name(rng.source_factory),
        "shuffle": shuffled,
        "biased_roll": biased,
        "fair_roll": fair,
        "bool": flag,
        "child_seed": child.seed,
        "parent_u64": parent_u64,
        "child_u64": child_u64,
        "parent_draws": rng.draws,
        "child_draws": child.draws,
    }


# -------------------------------------------------------------------
# Audit
# -------------------------------------------------------------------


def run_audit(
    seed: Optional[int] = None,
    source: Optional[Union[str, SourceFactory]] = None,
    n_samples: int = N_SAMPLES_AUDIT,
    sides: Iterable[int] = AUDIT_SIDES,
    methods: Sequence[str] = ROLL_METHODS,
    shuffle_length: Optional[int] = SHUFFLE_AUDIT_LENGTH,
    shuffle_trials: int = SHUFFLE_AUDIT_TRIALS,
    z: float = CHI_SQUARE_Z,
) -> pd.DataFrame:
    """
    Chi-square audit of fair rolls, biased rolls and shuffles.

    Args:
        seed, source:
            Root generator settings (defaults from config.py).
        n_samples:
            Rolls per (method, sides) audit.
        sides:
            Die sizes to audit.
        methods:
            Any of "fair", "biased".
        shuffle_length:
            Length of the shuffled list; None skips the shuffle audit.
        shuffle_trials:
            Number of shuffles for the shuffle audit.
        z:
            One-sided normal quantile for the critical values.

    Returns:
        DataFrame with one row per audit (see REPORT_COLUMNS).
    """
    if n_samples <= 0:
        raise ValueError(f"n_samples must be positive, got {n_samples}")

    root = make_rng(seed, source)
    logger.info(
        "Audit: seed=%d source=%s n_samples=%d",
        root.seed,
        source_name(root.source_factory),
        n_samples,
    )

    results: list[UniformityResult] = []

    for method in methods:
        for k in sides:
            res = audit_rolls(root.split(), int(k), n_samples, method=method, z=z)
            _log_result(res)
            results.append(res)

    if shuffle_length is not None:
        res = audit_shuffle(root.split(), int(shuffle_length), shuffle_trials, z=z)
        _log_result(res)
        results.append(res)

    return pd.DataFrame([r.as_dict() for r in results], columns=REPORT_COLUMNS)


def _log_result(res: UniformityResult) -> None:
    status = "PASS" if res.passed else "FAIL"
    logger.info(
        "%s %s: chi2=%.3f (critical %.3f, %d categories, %d samples)",
        status,
        res.label,
        res.statistic,
        res.critical_value,
        res.categories,
        res.n_samples,
    )


# -------------------------------------------------------------------
# Reports on disk
# -------------------------------------------------------------------


def _json_default(obj: Any) -> Any:
    # numpy scalars sneak in through pandas
    if isinstance(obj, np.generic):
        return obj.item()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def save_report(
    report: Union[pd.DataFrame, Dict[str, Any]],
    name: str,
    out_dir: Optional[Path] = None,
) -> Path:
    """
    Write an audit DataFrame or a scenario dict to `<out_dir>/<name>.json`.

    Only results are written; generator state is never persisted.

    Args:
        report:
            Output of run_audit (DataFrame) or run_scenario (dict).
        name:
            File stem, e.g. "audit_12345".
        out_dir:
            Target directory; defaults to config.REPORTS_DIR.

    Returns:
        Path of the written file.
    """
    out_dir = out_dir or REPORTS_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{name}.json"

    if isinstance(report, pd.DataFrame):
        payload: Any = report.to_dict(orient="records")
    else:
        payload = report

    path.write_text(
        json.dumps(payload, indent=2, default=_json_default),
        encoding="utf-8",
    )
    return path
