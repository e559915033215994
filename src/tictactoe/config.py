"""Runtime settings.

Environment-first; command-line flags override what the environment says.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "[%(levelname)s] %(message)s"


def log_level(verbose: bool = False) -> int:
    """Logging level to use.

    Order: --verbose -> env var TTT_LOG_LEVEL -> INFO.
    Unknown level names fall back to INFO.
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv("TTT_LOG_LEVEL", "").strip().upper()
    if not name:
        return logging.INFO
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=log_level(verbose), format=LOG_FORMAT)
