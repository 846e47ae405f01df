"""Logger configuration."""

import sys

from loguru import logger

_LOG_FORMAT = "<level>{message}</level>"
_DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Replace loguru's default sink with one matching the requested verbosity.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages with timestamps and source locations
    """
    logger.remove()

    if debug:
        logger.add(sys.stderr, level="DEBUG", format=_DEBUG_FORMAT)
    elif verbose:
        logger.add(sys.stderr, level="INFO", format=_LOG_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING", format=_LOG_FORMAT)
