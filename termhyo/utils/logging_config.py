"""
Centralized logging configuration for termhyo.
Log records go to stderr so they never interleave with rendered tables on stdout.
"""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Setup logging for the termhyo package.

    Args:
        verbose: Enable debug level logging if True

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("termhyo")
    # Replace handlers from a previous call instead of stacking duplicates
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False

    return logger
