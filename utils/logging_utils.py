# utils/logging_utils.py

"""
Logging helpers for the splitrng project.

Everything logs through the standard `logging` module; this helper adds:

    - one place to configure format / level for the CLI,
    - optional log file under config.LOGS_DIR,
    - a cached `get_logger(__name__)`.

Usage:

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.debug("split child from draw %d", n)

Library modules only ever call get_logger; configure_root_logger is for
entry points (main.py).
"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from config import LOGS_DIR


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Multiple calls with the same name return the same logger instance.
_LOGGER_CACHE: dict[str, Logger] = {}


def _ensure_log_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def configure_root_logger(
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_stdout: bool = True,
    filename: str = "splitrng.log",
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure the root logger once, near the start of main().

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, write logs to `log_dir / filename`.
        log_to_stdout:
            If True, also log to the console.
        filename:
            Name of the log file.
        log_dir:
            Directory for the log file; defaults to config.LOGS_DIR.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by pytest); just adjust the level
        root.setLevel(level)
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if log_to_file:
        directory = log_dir or LOGS_DIR
        _ensure_log_dir(directory)
        fh = logging.FileHandler(directory / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_stdout:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Get a (cached) logger.

    Unlike configure_root_logger this has no side effects on the root
    logger: without configuration, records below WARNING are simply
    dropped, which is what a library should do.

    Args:
        name:
            Logger name (usually __name__ in the caller). Defaults to
            "splitrng".
    """
    if name is None:
        name = "splitrng"

    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    logger = logging.getLogger(name)

    _LOGGER_CACHE[name] = logger
    return logger
