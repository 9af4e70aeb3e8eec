"""Logging setup for the server process.

Logs go to stderr; stdout carries the MCP stdio stream.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

# Third-party loggers that report every request or job run at INFO
_QUIET_LOGGERS = ("apscheduler", "httpx")


def setup_logging(level: str = "INFO") -> int:
    """Configure root logging and return the numeric level applied.

    Unknown level names fall back to INFO. An existing root handler is
    reused; otherwise one stderr handler is installed.
    """
    numeric_level = logging.getLevelName((level or "INFO").strip().upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(numeric_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return numeric_level
