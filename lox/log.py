"""
Logging setup for the lox package.

Library modules only call logging.getLogger(__name__). The command-line
host calls get_logger() once to attach a handler.
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "LOX_LOG_LEVEL"


def default_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def get_logger(name: str = "lox", level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level or default_level()))
    if logger.handlers:
        return logger
    # stdout carries scanner output
    handler = logging.StreamHandler(stream=sys.stderr)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    return logger
