"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Logging setup shared by the test runner and the pytest session.

Exports:
    - init_logger: Initialize the loguru logger with standard settings
    - reset_logger: Allow init_logger to run again (tests, runner reconfig)
    - ensure_directory: Create a directory if it does not exist

Usage:
    from autotest_tools.common import init_logger

    init_logger()
    init_logger(level="DEBUG", log_file="reports/logs/ui.log")

================================================================================
"""

import os
import sys
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to $LOG_LEVEL or INFO.
        log_file: Optional file path to write logs to.
        format_string: Log format string. Uses default if not provided.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/ui.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    # Remove default handler
    logger.remove()

    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    format_string = format_string or DEFAULT_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    if log_file:
        ensure_directory(os.path.dirname(log_file))
        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation="10 MB",
            retention="7 days",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def reset_logger() -> None:
    """Allow the next init_logger call to reconfigure sinks."""
    global _logger_initialized
    _logger_initialized = False


# ============================================================
# Common Utilities
# ============================================================

def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path (empty string means the current directory)

    Returns:
        The path (for chaining)
    """
    if path:
        os.makedirs(path, exist_ok=True)
    return path


# Export public API
__all__ = [
    "ensure_directory",
    "init_logger",
    "reset_logger",
]
