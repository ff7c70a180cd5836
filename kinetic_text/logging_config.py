"""
Logging configuration for kinetic_text.

Call ``configure_logging()`` once at startup. The effect library itself
only emits through the module-level loguru ``logger``.
"""

import os
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .config import get_cli_setting

LOG_LEVEL_ENV = "KINETIC_TEXT_LOG_LEVEL"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def resolve_log_level(level: Optional[str] = None) -> str:
    """Explicit level, then ``KINETIC_TEXT_LOG_LEVEL``, then ``[general] log_level``."""
    if level:
        return level.upper()
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        return env_level.upper()
    return str(get_cli_setting("general", "log_level", "INFO")).upper()


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
) -> str:
    """
    Configure loguru sinks.

    Args:
        level: Minimum level; see ``resolve_log_level`` for the fallbacks.
        log_file: Optional path of a rotating file sink.
        console: Add a stderr sink. Disable inside a full-screen TUI.

    Returns:
        The level in effect.
    """
    resolved = resolve_log_level(level)
    logger.remove()  # Remove default handler

    if console:
        logger.add(sink=sys.stderr, level=resolved, colorize=True)

    if log_file is not None:
        logger.add(
            sink=str(log_file),
            level=resolved,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
        )

    logger.info(f"kinetic_text logging configured: level={resolved}, file={log_file or '-'}")
    return resolved
