"""Logging configuration for the command line entry point."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None, *, stream: TextIO | None = None) -> str:
    """Send log records to stderr and return the effective level name.

    Stdout is reserved for command results, so records never go there. `LOG_LEVEL` is used when
    no explicit level is given.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
    return log_level
