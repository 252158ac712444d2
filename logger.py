"""Logging for Tally.

Ledger events go to a dated file under the configured log directory. The
console handler defaults to WARNING because the menu itself owns stdout.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional
from config import Config

LOGGER_NAME = "tally"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def get_log_file_path(config: Config, day: Optional[date] = None) -> Path:
    """Get the log file for a given day (today by default).

    Args:
        config: Application configuration containing the log directory.
        day: Date the file is named after.

    Returns:
        Path of the form <log_dir>/tally-YYYY-MM-DD.log.
    """
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Attach the file and console handlers to the tally logger.

    Any handlers from an earlier call are closed first, so calling this twice
    does not duplicate output.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    shutdown_logging()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = get_logger()
    logger.setLevel(config.log_level)

    file_handler = logging.FileHandler(get_log_file_path(config))
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.console_log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def shutdown_logging() -> None:
    """Flush, close and detach every handler on the tally logger."""
    logger = get_logger()
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The tally logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
