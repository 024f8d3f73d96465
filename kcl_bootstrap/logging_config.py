"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Send log records to stderr; stdout carries only the printed command."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format=settings.log_format,
        stream=sys.stderr,
        force=True,
    )
    # httpx logs every request at INFO, which duplicates our own progress lines
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
