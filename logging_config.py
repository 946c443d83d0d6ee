"""
Logging Configuration for the Blog Posts API

Configures loguru from the application settings:
- Console output with colors, DEBUG when DEBUG_LEVEL > 0
- Rotating error log under LOG_DIR
- Rotating debug log under LOG_DIR, only when DEBUG_LEVEL > 0
"""

import os
import sys

from loguru import logger

from config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(debug_level: int, log_dir: str) -> list[int]:
    """Replace all loguru sinks; returns the ids of the sinks added"""
    logger.remove()
    os.makedirs(log_dir, exist_ok=True)

    sink_ids = [
        logger.add(
            sys.stdout,
            format=CONSOLE_FORMAT,
            level="DEBUG" if debug_level > 0 else "INFO",
            colorize=True,
        ),
        logger.add(
            os.path.join(log_dir, "errors.log"),
            format=FILE_FORMAT,
            level="ERROR",
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        ),
    ]
    if debug_level > 0:
        sink_ids.append(logger.add(
            os.path.join(log_dir, "debug.log"),
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="50 MB",
            retention="7 days",
            compression="zip",
        ))
    return sink_ids


configure_logging(settings.DEBUG_LEVEL, settings.LOG_DIR)

# Export configured logger
__all__ = ['logger', 'configure_logging']
