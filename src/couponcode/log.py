"""
Logging helpers.

Modules log through logging.getLogger(__name__), so every record lands
under the "couponcode" logger. The package only attaches a NullHandler;
applications decide where records go. The command line calls
configure_logging to print them to stderr.
"""

import logging
import os
from typing import Optional, Union

ROOT_LOGGER_NAME = "couponcode"
LOG_LEVEL_ENV = "COUPONCODE_LOG_LEVEL"

LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Send package records to stderr.

    Safe to call more than once: the stream handler is only added the
    first time, later calls just update the level.

    Args:
        level: Level name or number; defaults to COUPONCODE_LOG_LEVEL, then INFO

    Returns:
        The package logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(level)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(handler)
    return root


def log(logger: logging.Logger, level: str, message: str, **kwargs) -> None:
    """Log message with optional key=value context appended."""
    if kwargs:
        context = " ".join(f"{k}={v}" for k, v in kwargs.items())
        message = f"{message} | {context}"
    logger.log(getattr(logging, level.upper(), logging.INFO), message)
