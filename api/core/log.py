"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)`; this only configures the
root logger once, at app startup.
"""

from __future__ import annotations

import logging
import os

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def log_level() -> int:
    raw = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    global _initialized
    if _initialized:
        return None
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(log_level())
    _initialized = True
