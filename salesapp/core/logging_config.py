"""
Logging Setup
=============

Configures the ``salesapp`` logger used by every module
(``logging.getLogger(__name__)``).
"""
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from salesapp.core.config import get_settings

LOGGER_NAME = "salesapp"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the application logger.

    Features:
    - Console output
    - Optional daily rotating log file (LOG_FILE)
    - Unified log format with timestamp and level

    Calling it more than once does not add duplicate handlers.

    Args:
        level: Log level name, defaults to LOG_LEVEL from settings
        log_file: Log file path, defaults to LOG_FILE from settings

    Returns:
        The configured application logger
    """
    settings = get_settings()
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logging() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_path,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
