"""Logging setup for the score tracker, driven by TrackerConfig."""

import logging
import sys
from pathlib import Path

from .config import TrackerConfig

LOG_FILE_NAME = 'nertz.log'

# File lines carry time and logger name
CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'


def setup_logging(config: TrackerConfig, verbose: bool = False) -> logging.Logger:
    """
    Install handlers on the ``nertz`` logger.

    The console handler writes to stdout at ``config.log_level`` (DEBUG when
    verbose). When ``config.log_dir`` is set, every record from INFO up is
    also appended to ``<log_dir>/nertz.log`` so one log accumulates across
    CLI invocations.

    Returns:
        The configured ``nertz`` logger
    """
    logger = logging.getLogger('nertz')
    console_level = logging.DEBUG if verbose else getattr(logging, config.log_level)

    # Repeated calls replace rather than stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    file_level = console_level
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_level = min(console_level, logging.INFO)
        game_log = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding='utf-8')
        game_log.setLevel(file_level)
        game_log.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(game_log)

    logger.setLevel(min(console_level, file_level))
    return logger
