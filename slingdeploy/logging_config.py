"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

_QUIET_LOGGERS = ("httpx", "httpcore")

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> None:
    """Install a stderr handler on the root logger; later calls only change the level."""
    global _handler
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if _handler is None or _handler not in root.handlers:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(numeric_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
