from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Route loguru output to stderr and, optionally, a rotating log file.

    Also enables the package's own records, which are disabled on import.
    """
    logger.remove()
    logger.enable("rcbeam")
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level: <8} | {message}")
    if log_file is not None:
        logger.add(
            str(log_file), level="DEBUG", rotation="5 MB", retention=10,
            backtrace=False, diagnose=False,
        )
