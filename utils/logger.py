"""
utils/logger.py
---------------
Logging setup for the Lunchly customer layer.

The database pool, schema bootstrap and repositories all log through
`get_logger(__name__)`, so writes (`Created customer #12`), store
failures and DEBUG-level search/ranking traces share one stdout stream.
The level comes from LOG_LEVEL in the environment (default INFO).
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _resolve_level(name: str) -> int:
    """Map a level name such as 'debug' to its logging constant; unknown names mean INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _init_logging() -> None:
    """Attach the stdout handler to the root logger, once per process."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(_resolve_level(LOG_LEVEL))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module, e.g. ``repositories.customer_repo``.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
