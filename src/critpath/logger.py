"""Logging for critpath with scheduler-oriented verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Levels sitting between the standard ones
SUMMARY_LEVEL = 25  # Between INFO (20) and WARNING (30) - pass summaries, verbosity 1
DETAIL_LEVEL = 15  # Between DEBUG (10) and INFO (20) - per-task values, verbosity 2

logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
logging.addLevelName(DETAIL_LEVEL, "DETAIL")

VERBOSITY_SILENT = 0
VERBOSITY_SUMMARY = 1
VERBOSITY_DETAIL = 2
VERBOSITY_DEBUG = 3

_LEVELS = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_SUMMARY: SUMMARY_LEVEL,
    VERBOSITY_DETAIL: DETAIL_LEVEL,
    VERBOSITY_DEBUG: logging.DEBUG,
}


class CritPathLogger(logging.Logger):
    """Logger with one method per scheduler verbosity level.

    - summary(): one line per pass (ordering, forward, backward, derivation)
    - detail(): one line per task inside a pass
    - debug(): traversal internals
    """

    def summary(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a pass summary (verbosity level 1)."""
        if self.isEnabledFor(SUMMARY_LEVEL):
            self._log(SUMMARY_LEVEL, msg, args, **kwargs)

    def detail(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log per-task values (verbosity level 2)."""
        if self.isEnabledFor(DETAIL_LEVEL):
            self._log(DETAIL_LEVEL, msg, args, **kwargs)


def get_logger() -> CritPathLogger:
    """Return the shared critpath logger.

    The logger class is swapped in only for the duration of the lookup so
    other libraries keep getting plain loggers.
    """
    previous = logging.getLoggerClass()
    logging.setLoggerClass(CritPathLogger)
    try:
        logger = logging.getLogger("critpath")
    finally:
        logging.setLoggerClass(previous)
    assert isinstance(logger, CritPathLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the critpath logger.

    Safe to call repeatedly; existing handlers are replaced.

    Args:
        verbosity: 0=errors only, 1=pass summaries, 2=per-task detail, 3=debug
        stream: Output stream, stderr when omitted
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVELS.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to errors-only output."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def summary_enabled() -> bool:
    """True when verbosity >= 1."""
    return get_logger().isEnabledFor(SUMMARY_LEVEL)


def detail_enabled() -> bool:
    """True when verbosity >= 2."""
    return get_logger().isEnabledFor(DETAIL_LEVEL)


def debug_enabled() -> bool:
    """True when verbosity >= 3."""
    return get_logger().isEnabledFor(logging.DEBUG)
