# dayplan/log.py
from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int | str = logging.WARNING, log_file: Optional[str] = None) -> None:
    """Entry-point logging setup; library modules only create loggers."""
    kwargs = {}
    if log_file:
        kwargs["filename"] = log_file
        kwargs["encoding"] = "utf-8"
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=True,
        **kwargs,
    )
