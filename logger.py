"""Logging for SurfReset.

Every run appends to a dated file under config.log_dir. The console shows the
same progress messages without timestamps, since they are the tool's output.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional
from config import Config

LOGGER_NAME = "surfreset"


def log_file_for(config: Config, day: Optional[date] = None) -> Path:
    """Path of the log file for the given day (today by default)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config, level: Optional[str] = None) -> logging.Logger:
    """Attach the file and console handlers to the surfreset logger.

    Args:
        config: Application configuration containing log settings.
        level: Level name that overrides config.log_level for this run,
            e.g. "DEBUG" from the --verbose flag.

    Returns:
        Configured logger instance.
    """
    level = (level or config.log_level).upper()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Calling this twice must not duplicate output
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file_for(config), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
