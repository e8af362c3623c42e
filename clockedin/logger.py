"""Logger configuration."""

import sys
from pathlib import Path

from loguru import logger

DEFAULT_LOG_PATH = Path.home() / ".local" / "state" / "clocked-in" / "clocked-in.log"


def setup_logger(
    level: str = "WARNING",
    log_file: Path | None = None,
    rotation: str = "1 MB",
    retention: str = "7 days",
) -> None:
    """Send loguru output to stderr, or to a rotating file when one is given.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file. The terminal app logs here since
            it owns the screen.
        rotation: Log rotation size (e.g., "1 MB", "1 day")
        retention: Log retention period (e.g., "7 days")
    """
    logger.remove()

    if log_file is None:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=level,
            colorize=True,
        )
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level=level,
        rotation=rotation,
        retention=retention,
    )
