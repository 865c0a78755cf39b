"""Logging setup for the board generator.

Levels used across the package:

- DEBUG: rejected candidates (stuck walks, rollbacks, deadlocked scans)
  and CP-SAT statuses.
- INFO: run parameters, the final placed/target count and density, and
  saved level paths.
- WARNING: the attempt budget ran out before the target count was reached.
- ERROR: a finished board failed final verification or validation.
"""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a sensible formatter.

    Generation runs thousands of tentative commits, most of which are rolled
    back, so per-candidate detail is only emitted at DEBUG level. Callers can
    reconfigure before invoking :class:`LevelGenerator`.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wiggle_escape")
