"""Process-wide logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that drown out report logs at DEBUG
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level_name: str, stream: TextIO) -> None:
    """Install the root handler and set the ``tally`` logger level.

    Replaces handlers installed by an earlier call, so the API and the CLI
    can each choose their stream.
    """
    level = resolve_level(level_name)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=stream,
        force=True,
    )
    logging.getLogger("tally").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
