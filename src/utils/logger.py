"""Logging setup for the rulebook pipeline"""
import os
import sys
from typing import Optional

from loguru import logger
from config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    (Re)configure the loguru sinks

    Args:
        log_level: Minimum level, defaults to the settings
        log_file: Rotating log file, defaults to the settings
    """
    log_level = (log_level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logger.remove()
    # stdout is reserved for the CLI summary
    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)
    logger.add(
        log_file,
        level=log_level,
        format=FILE_FORMAT,
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        encoding="utf-8",
    )


setup_logger()

__all__ = ["logger", "setup_logger"]
