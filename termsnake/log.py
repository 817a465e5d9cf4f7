"""
termsnake - Logging

The game owns the screen, so log records go to a file under ``logs/``
instead of the console.
"""

import logging
import os
from datetime import datetime

LOGGER_NAME = "termsnake"


def setup_logging(log_dir: str = "logs", level: str = "INFO") -> str:
    """Attach a timestamped file handler to the package logger.

    Returns the path of the log file. Calling it again replaces the
    previous handler.
    """
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"termsnake_{timestamp}.log")

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(file_handler)

    return log_file
