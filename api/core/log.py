"""
Process-wide logging setup (stdlib `logging`).

Feature modules keep using `logging.getLogger(__name__)`; this only wires the
root handler and level once at startup.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def log_level() -> int:
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    return getattr(logging, level, logging.INFO)


def setup_logging() -> None:
    logging.basicConfig(level=log_level(), format=LOG_FORMAT, force=True)
