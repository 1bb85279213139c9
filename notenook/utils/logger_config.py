"""
Logging Setup
Configures loguru sinks for scripts
"""

import sys
from typing import Optional
from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Replace loguru's default sink with the NoteNook sinks

    Args:
        level: Minimum level for the stderr sink
        log_file: Optional path for a DEBUG-level rotating log file

    Raises:
        ValueError: Unknown level; existing sinks are left in place
    """
    # Unknown names raise here, before any sink is removed
    logger.level(level)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format=FILE_FORMAT,
            level="DEBUG"
        )
