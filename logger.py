"""
Logging utilities for the paint session.
"""
import logging
import sys
from typing import Optional

from config import LOG_FILE, LOG_LEVEL

_logger = None


def setup_logger(
    name: str = "ascii_paint",
    level: Optional[str] = None,
    console: bool = False,
    log_file: Optional[str] = LOG_FILE,
) -> logging.Logger:
    """Set up and return the session logger.

    The console handler writes to stderr and is off by default, since the
    interactive screen owns the terminal.
    """
    global _logger

    if _logger is not None:
        return _logger

    level = level or LOG_LEVEL
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Avoid duplicate handlers
    if logger.handlers:
        _logger = logger
        return logger

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    _logger = logger
    return logger


def get_logger(name: str = "ascii_paint") -> logging.Logger:
    """Get the logger instance without configuring handlers.

    Until `setup_logger` runs, records propagate to the root logger only.
    """
    if _logger is None:
        return logging.getLogger(name)
    return _logger
