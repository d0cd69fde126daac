"""Centralized logging configuration for the roster app."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """
    Configure the ``rosterapp`` logger.

    Always logs to stdout. When ``log_dir`` is given, a timestamped file with a
    more detailed format is written there as well.

    Args:
        log_dir: Directory for log files (default: no file logging)
        level: Logging level, as an int or a name like "INFO"

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger('rosterapp')
    logger.setLevel(level)

    # Repeated calls (reloads, tests) must not stack handlers
    logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    simple_formatter = logging.Formatter('%(levelname)s: %(name)s: %(message)s')

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'rosterapp_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'rosterapp') -> logging.Logger:
    """Get a logger under the ``rosterapp`` hierarchy."""
    if name != 'rosterapp' and not name.startswith('rosterapp.'):
        name = f'rosterapp.{name}'
    return logging.getLogger(name)
