"""Logging utilities for the GitLab client.

The library logs through loguru but stays silent until the application opts
in with ``setup_logging`` (or ``logger.enable('gitlab_client')``).
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from loguru import logger

if TYPE_CHECKING:
    from ..config.config import LoggingConfig

PACKAGE = 'gitlab_client'

DEFAULT_FORMAT = (
    '<green>{time:YYYY-MM-DD HH:mm:ss}</green> | '
    '<level>{level: <8}</level> | '
    '<cyan>{name}</cyan>:<cyan>{function}</cyan> | '
    '<level>{message}</level>'
)

FILE_FORMAT = '{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} | {message}'

logger.disable(PACKAGE)


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """Route the client's log records to stderr and optionally a file.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        log_format: Optional custom log format
    """
    logger.remove()
    logger.enable(PACKAGE)

    logger.add(
        sys.stderr,
        format=log_format or DEFAULT_FORMAT,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Request logs at DEBUG grow quickly
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation='10 MB',
            retention='30 days',
            compression='gz',
            backtrace=True,
            diagnose=False,
        )

    logger.bind(component=PACKAGE).debug(f'Logging initialized with level: {level}')


def setup_logging_from_config(config: 'LoggingConfig') -> None:
    """Apply a ``LoggingConfig``."""
    setup_logging(level=config.level, log_file=config.file, log_format=config.format)


def get_logger(name: str):
    """Get a logger bound to a component name.

    Args:
        name: Component name (typically a class or module name)

    Returns:
        Logger instance
    """
    return logger.bind(component=name)
