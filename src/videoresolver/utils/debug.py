"""Logging setup for VideoResolver.

Every module logs through ``logging.getLogger(__name__)``, so records land on
the package-level ``videoresolver`` logger configured here.

Debug output is enabled by the VIDEORESOLVER_DEBUG environment variable or the
CLI ``--debug`` flag (see set_debug()). When enabled, debug() also echoes to
stdout so messages interleave with Rich output.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "videoresolver"
LOG_FORMAT = "[%(levelname)s] %(asctime)s %(name)s: %(message)s"

DEBUG_ON = os.getenv("VIDEORESOLVER_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """Attach a stream handler to the package logger (once) and return it."""
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if DEBUG_ON else logging.INFO)
    _logger = logger
    return logger


def set_debug(enabled: bool) -> None:
    """Toggle debug output for the current process."""
    global DEBUG_ON
    DEBUG_ON = enabled
    setup_logger().setLevel(logging.DEBUG if enabled else logging.INFO)


def debug(msg: str, *args: object) -> None:
    """Log a debug message, echoing it to stdout when debugging is enabled."""
    if DEBUG_ON:
        setup_logger().debug(msg, *args)
        print(f"[DEBUG] {msg % args if args else msg}", file=sys.stdout, flush=True)


def info(msg: str, *args: object) -> None:
    """Log an info message."""
    setup_logger().info(msg, *args)


def warn(msg: str, *args: object) -> None:
    """Log a warning message."""
    setup_logger().warning(msg, *args)


def error(msg: str, *args: object) -> None:
    """Log an error message."""
    setup_logger().error(msg, *args)
