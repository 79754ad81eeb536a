import sys

from loguru import logger

from .config import Config


VERBOSE = Config.VERBOSE
LOG_PATH = Config.LOG_PATH
LOG_LEVEL = Config.LOG_LEVEL
LOG_ROTATION = Config.LOG_ROTATION
LOG_RETENTION = Config.LOG_RETENTION


def configure_logging(level=LOG_LEVEL, verbose=VERBOSE, log_path=LOG_PATH):
    """Install the console and file sinks. Called by entry points, not the library."""
    logger.remove()
    logger.enable("qbittorrent_client")

    # Log to console
    logger.add(
        sys.stderr,
        level="TRACE" if verbose else level,
    )

    # Log to a file
    if log_path:
        logger.add(
            log_path,
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            level=level,
        )
