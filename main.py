# main.py

"""
Entry point for the splitrng project.

Typical usage:

    # Run the reference call sequence from the default root seed
    python main.py --mode scenario

    # Chi-square audit of rolls and shuffles
    python main.py --mode audit --n-samples 50000

You can also pick the seed and the uniform source:
    python main.py --mode audit --seed 7 --source pcg64 --sides 2 6 100

This script wires together:
    - config (paths, seed, audit defaults),
    - utils.logging_utils (console / file logging),
    - audit.pipeline (run_scenario / run_audit / save_report),
    - sources.registry (available uniform sources).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config import (
    AUDIT_SIDES,
    CHI_SQUARE_Z,
    DEFAULT_SOURCE,
    LOGS_DIR,
    N_SAMPLES_AUDIT,
    PROJECT_ROOT,
    REPORTS_DIR,
    ROOT_SEED,
    RUN_MODE,
    SHUFFLE_AUDIT_LENGTH,
    SHUFFLE_AUDIT_TRIALS,
)
from core_types import UnknownSourceError
from audit.pipeline import run_audit, run_scenario, save_report
from sources.registry import available_sources, get_source_factory
from utils.logging_utils import configure_root_logger


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Splittable deterministic RNG")

    parser.add_argument(
        "--mode",
        choices=["scenario", "audit"],
        default=RUN_MODE,
        help=f"Run mode (default from config.py: {RUN_MODE!r})",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=ROOT_SEED,
        help=f"Root seed (default from config.py: {ROOT_SEED})",
    )

    parser.add_argument(
        "--source",
        default=DEFAULT_SOURCE,
        help=f"Uniform source name (default from config.py: {DEFAULT_SOURCE!r}); "
             f"see --list-sources",
    )

    parser.add_argument(
        "--list-sources",
        action="store_true",
        help="Print the available uniform sources and exit.",
    )

    parser.add_argument(
        "--n-samples",
        type=int,
        default=N_SAMPLES_AUDIT,
        help=f"Rolls per audit in AUDIT mode (default: {N_SAMPLES_AUDIT})",
    )

    parser.add_argument(
        "--sides",
        type=int,
        nargs="+",
        default=list(AUDIT_SIDES),
        help=f"Die sizes to audit (default: {' '.join(map(str, AUDIT_SIDES))})",
    )

    parser.add_argument(
        "--shuffle-length",
        type=int,
        default=SHUFFLE_AUDIT_LENGTH,
        help=f"List length for the shuffle audit, 0 to skip "
             f"(default: {SHUFFLE_AUDIT_LENGTH})",
    )

    parser.add_argument(
        "--shuffle-trials",
        type=int,
        default=SHUFFLE_AUDIT_TRIALS,
        help=f"Number of shuffles in the shuffle audit (default: {SHUFFLE_AUDIT_TRIALS})",
    )

    parser.add_argument(
        "--z",
        type=float,
        default=CHI_SQUARE_Z,
        help=f"Normal quantile for chi-square critical values (default: {CHI_SQUARE_Z})",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level (includes every split).",
    )

    parser.add_argument(
        "--log-file",
        action="store_true",
        help=f"Also write logs to {LOGS_DIR.relative_to(PROJECT_ROOT)}/splitrng.log",
    )

    parser.add_argument(
        "--save-report",
        action="store_true",
        help=f"Save the result to {REPORTS_DIR.relative_to(PROJECT_ROOT)}/*.json",
    )

    return parser.parse_args(argv)


def _print_scenario(result: dict) -> None:
    print(f"  shuffle([0, 1, 2, 3, 4]) -> {result['shuffle']}")
    print(f"  biased_roll(6)           -> {result['biased_roll']}")
    print(f"  fair_roll(6)             -> {result['fair_roll']}")
    print(f"  get_bool()               -> {result['bool']}")
    print(f"  split()                  -> child seed {result['child_seed']}")
    print(f"  parent get_u64()         -> {result['parent_u64']}")
    print(f"  child  get_u64()         -> {result['child_u64']}")
    print(f"  draws: parent={result['parent_draws']} child={result['child_draws']}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    if args.list_sources:
        for name in available_sources():
            print(name)
        return 0

    configure_root_logger(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_to_file=args.log_file,
    )

    try:
        source = get_source_factory(args.source)
    except UnknownSourceError as exc:
        raise SystemExit(str(exc))

    print(f"Mode: {args.mode}")
    print(f"Root seed: {args.seed}")
    print(f"Source: {args.source}")

    if args.mode == "scenario":
        result = run_scenario(seed=args.seed, source=source)
        _print_scenario(result)
        if args.save_report:
            path = save_report(result, name=f"scenario_{args.seed}")
            print(f"Report saved to: {path}")
        return 0

    if args.mode == "audit":
        try:
            report = run_audit(
                seed=args.seed,
                source=source,
                n_samples=args.n_samples,
                sides=args.sides,
                shuffle_length=args.shuffle_length or None,
                shuffle_trials=args.shuffle_trials,
                z=args.z,
            )
        except ValueError as exc:
            raise SystemExit(f"Invalid audit settings: {exc}")

        print(report.to_string(index=False))
        if args.save_report:
            path = save_report(report, name=f"audit_{args.seed}")
            print(f"Report saved to: {path}")

        failed = report.loc[~report["passed"], "label"].tolist()
        if failed:
            print(f"FAILED: {', '.join(failed)}")
            return 1
        print("All audits passed.")
        return 0

    raise SystemExit(f"Unknown mode: {args.mode!r}")


if __name__ == "__main__":
    sys.exit(main())
