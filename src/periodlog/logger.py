"""Diagnostic logging for Periodlog itself.

Failures inside the rollover engine are reported here instead of being raised.
Set PERIODLOG_DEBUG_LOG to a file path to also capture debug output with a
RotatingFileHandler.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEBUG_LOG_ENV = "PERIODLOG_DEBUG_LOG"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3


def get_logger(name: str = "periodlog") -> logging.Logger:
    """Get or create the Periodlog diagnostic logger."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    debug_log = os.environ.get(DEBUG_LOG_ENV)
    if debug_log:
        try:
            Path(debug_log).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                debug_log,
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning("Cannot open debug log %s: %s", debug_log, e)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


log = get_logger()
