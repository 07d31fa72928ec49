"""Logging configuration for the resolver and the CLI."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_RETENTION_DAYS

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str | None = None, to_file: bool = True, log_dir: Path | None = None):
    """Replace loguru's default sink with a console sink and an optional daily file."""
    level = (level or LOG_LEVEL).upper()
    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        # File sink always records DEBUG
        logger.add(
            log_dir / "problemsets_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention=f"{LOG_RETENTION_DAYS} days",
            compression="gz",
        )
        logger.debug("File logging to {} (retention {} days)", log_dir, LOG_RETENTION_DAYS)

    return logger
