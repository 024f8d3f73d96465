"""Host operating system category used when rendering commands."""

from __future__ import annotations

import platform
import subprocess
from enum import Enum
from functools import lru_cache
from typing import Callable, Optional, Sequence

Launcher = Callable[[Sequence[str]], int]


class OsCategory(str, Enum):
    UNIX = "UNIX"
    WINDOWS = "WINDOWS"


def detect_os_category(system: Optional[str] = None) -> OsCategory:
    system = platform.system() if system is None else system
    if system.lower().startswith("win"):
        return OsCategory.WINDOWS
    return OsCategory.UNIX


@lru_cache(maxsize=None)
def current_os_category() -> OsCategory:
    """Category of this host, computed once per process."""
    return detect_os_category()


def run_process(argv: Sequence[str]) -> int:
    """Run ``argv`` without a shell, inheriting stdio, and return its exit status."""
    completed = subprocess.run(list(argv), check=False)
    return completed.returncode
