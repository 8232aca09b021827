# ==============================================
# Logging Configuration
# ==============================================
#
# PURPOSE:
#   Set up the "zerobuffer" package logger. Output goes to stderr
#   so stdout only ever carries the success line.
#
# FUNCTION:
# ---------
# - setup_logging(level="WARNING", stream=None) -> Logger
#     Replaces any existing handlers with a single stream handler.
#
# ==============================================

import logging
import sys
from typing import Optional, TextIO, Union


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configures the logger for the 'zerobuffer' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        stream: Where to write records. Defaults to sys.stderr.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("zerobuffer")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging initialized.")
    return logger
