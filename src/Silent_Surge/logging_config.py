"""Logging setup for the ``silent-surge`` commands.

Logs go to stderr so ``scan --json`` leaves stdout to the report.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# LOG_LEVEL_<AREA> env var -> logger it tunes
_AREA_LOGGERS: dict[str, str] = {
    "SERVICES": "Silent_Surge.services",
    "SCREENING": "Silent_Surge.screening",
    "ANALYSIS": "Silent_Surge.analysis",
    "REPORTING": "Silent_Surge.reporting",
}

# Chatty third-party loggers: httpx logs every request at INFO
_QUIETED_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "yfinance")


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger for one CLI invocation.

    ``--verbose`` wins over ``--quiet``; without either flag the level comes
    from ``LOG_LEVEL`` (INFO when unset or unknown). ``LOG_LEVEL_<AREA>``
    overrides one package area.
    """
    if verbose:
        root_level = logging.DEBUG
    elif quiet:
        root_level = logging.WARNING
    else:
        root_level = _env_level("LOG_LEVEL") or logging.INFO

    logging.basicConfig(level=root_level, format=LOG_FORMAT, force=True)

    for name in _QUIETED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    for area, logger_name in _AREA_LOGGERS.items():
        area_level = _env_level(f"LOG_LEVEL_{area}")
        if area_level is not None:
            logging.getLogger(logger_name).setLevel(area_level)


def _env_level(key: str) -> int | None:
    """Numeric level named by env var *key*, or None when unset or unknown."""
    name = os.environ.get(key, "").strip().upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else None
