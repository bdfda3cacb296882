"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging

from dewey2md.config import DEWEY2MD_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(*, verbose: bool = False) -> None:
    """Configure the root logger once for a command line run."""
    level = logging.DEBUG if verbose else logging.getLevelName(DEWEY2MD_LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
