"""Logger setup for the command line harness."""

from __future__ import annotations

import logging
import sys


def setup_logger(*, name: str, level: str = "warning") -> logging.Logger:
    logger = logging.getLogger(str(name))
    logger.handlers.clear()
    logger.propagate = False

    lvl = getattr(logging, str(level).upper(), logging.WARNING)
    logger.setLevel(lvl)

    # stderr keeps stdout free for the JSON report
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["setup_logger"]
