"""Process-wide logging setup for the CLI entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stderr handler on the root logger.

    Unknown level names fall back to INFO. ``force=True`` replaces any
    previous handler so repeated calls in one process don't duplicate output.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=True)
    if numeric > logging.DEBUG:
        logging.getLogger("botocore").setLevel(logging.WARNING)
