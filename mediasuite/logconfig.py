from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

FMT_CONSOLE = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> | {extra}"
)
FMT_FILE = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format=FMT_CONSOLE, colorize=True)
    if log_file is not None:
        logger.add(str(log_file), level="DEBUG", rotation="10 MB", format=FMT_FILE)
