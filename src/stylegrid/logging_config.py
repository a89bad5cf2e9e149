"""
Logging setup used by the stylegrid demo entry point.

The library modules only create their own loggers and emit DEBUG records
(grid growth, ignored deletes, capacity rejections); nothing is shown
until a caller attaches handlers, which is what setup_logging does.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Route every 'stylegrid.*' logger to stdout and, optionally, a log file.

    Args:
        level: Threshold for the package logger and its handlers
        log_file: Path of a file that receives the same records, overwritten
    """

    package_logger = logging.getLogger("stylegrid")
    package_logger.setLevel(level)

    # main() may run several times in one process
    package_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging to %d handler(s) at level %s",
                         len(handlers), logging.getLevelName(level))
