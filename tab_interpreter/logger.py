"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
MESSAGE_FORMAT = "%(message)s"


def setup_logger(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Route all log records through a single root handler.

    Any handlers already on the root logger are replaced. Debug mode adds
    timestamps, logger names and source locations to every record.

    Parameters
    ----------
    level : int
        Level for the root logger and its handler.
    stream : TextIO | None
        Where records are written. Defaults to standard output.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if level == logging.DEBUG else MESSAGE_FORMAT))
    root.addHandler(handler)
