"""Logging configuration for the simulation core."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    max_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (optional)
        max_size_mb: Maximum log file size in MB before rotation
        backup_count: Number of rotated files to keep
    """
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            format=LOG_FORMAT,
            level=level,
            rotation=f"{max_size_mb} MB",
            retention=backup_count,
        )
        logger.info(f"Logging to file: {log_file}")


def get_logger(name: str):
    """Logger bound to a component name (shows up in ``extra``)."""
    return logger.bind(name=name)
