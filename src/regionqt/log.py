"""Logging setup for applications embedding regionqt."""

import logging
import sys

from regionqt.config import settings


def setup_logging(level: str | None = None) -> None:
    """
    Configure root logging.

    The library itself only creates module loggers; call this from an
    application entry point to see their output.

    Args:
        level: Level name (default: settings.log_level)
    """
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
