"""Package logger shared by the engine and the console shell."""
import logging
import os
import sys
from typing import Union

LOGGER_NAME = "arithmetic_engine"
LOG_LEVEL_ENV = "ARITHMETIC_ENGINE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"


def _build_logger() -> logging.Logger:
    """
    Create the package logger with a single stderr handler.

    The initial level is read from the ``ARITHMETIC_ENGINE_LOG_LEVEL`` environment variable.

    :return: Configured logger
    :rtype: logging.Logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    raw_level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    # getLevelName returns the number for a known name and a "Level ..." string otherwise
    level = logging.getLevelName(raw_level.strip().upper())
    if isinstance(level, int):
        package_logger.setLevel(level)
    else:
        package_logger.setLevel(logging.WARNING)
        package_logger.warning(f"Unknown log level {raw_level!r} in {LOG_LEVEL_ENV}, using WARNING")
    return package_logger


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the level of the package logger.

    :param Union[int, str] level: Logging level, as a number or a name such as "DEBUG"
    """
    logger.setLevel(level.upper() if isinstance(level, str) else level)


logger: logging.Logger = _build_logger()
