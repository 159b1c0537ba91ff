"""Logging configuration for hierarchy-table."""

import sys
from typing import TextIO

from loguru import logger

LOG_FORMAT = "{level.icon} {message}"


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> None:
    """Route loguru output to ``sink`` (stderr by default) at INFO or DEBUG."""
    logger.remove()
    logger.add(
        sink or sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=LOG_FORMAT,
        diagnose=verbose,
    )
