"""
Logging setup using Loguru.

The blessed UI owns the screen while a session runs, so logs go to a
rotating file only.
"""

import sys
from pathlib import Path

from loguru import logger


def setup_loguru(log_file: Path, level: str = "INFO") -> None:
    """
    Configure loguru for file-only logging.

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
    """
    logger.remove()

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention=5,  # Keep 5 backup files
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
            enqueue=False,
        )
    except OSError as e:
        # Never write to the terminal once the UI is up; warnings only before it
        logger.add(sys.stderr, level="WARNING")
        logger.warning(f"Cannot open log file {log_file}: {e}")
        return

    logger.info(f"Loguru initialized: {log_file} (level={level})")
