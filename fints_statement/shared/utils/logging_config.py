"""
Logging setup shared by every layer.

Modules obtain their logger with ``get_logger(__name__)``; the handler is
configured once by ``setup_logging`` (called from ``main.py`` or by the
embedding application).
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "fints_statement"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str = "INFO", fmt: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Standard logging level name (DEBUG, INFO, ...)
        fmt: Optional log format string

    Returns:
        The package root logger
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level.upper())

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
        root.addHandler(handler)
        _configured = True

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
