"""Parsed command line options handed to the bootstrap pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class LaunchOptions:
    """Options collected by the CLI; validation happens before construction."""

    java_location: Optional[str] = None
    properties_file: Optional[str] = None
    jar_folder: Optional[str] = None
    execute: bool = False
    log_configuration: Optional[str] = None


def resolve_jar_folder(jar_folder: Optional[str], default: str = "jars") -> Path:
    """Return the absolute cache folder, resolving relative names against the cwd."""
    folder = Path(jar_folder or default)
    if not folder.is_absolute():
        folder = Path.cwd() / folder
    return folder
