"""Locate a java executable able to start the MultiLangDaemon."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from kcl_bootstrap.settings import Settings
from .host import Launcher, OsCategory, current_os_category

VERSION_FLAG = "-version"


def run_version_probe(argv: Sequence[str]) -> int:
    """Start ``argv`` with captured output and wait for it to exit."""
    log = logging.getLogger(__name__)
    completed = subprocess.run(
        list(argv),
        capture_output=True,
        stdin=subprocess.DEVNULL,
        check=False,
    )
    # java prints its version banner on stderr, in whatever encoding it likes
    raw = completed.stderr or completed.stdout or b""
    banner = raw.decode("utf-8", errors="replace").strip()
    if banner:
        log.debug("%s reports: %s", argv[0], banner.splitlines()[0])
    return completed.returncode


class RuntimeLocator:
    """Find a runtime by trying to launch it with ``-version``."""

    def __init__(
        self,
        settings: Settings,
        *,
        launcher: Launcher = run_version_probe,
        environ: Optional[Mapping[str, str]] = None,
        os_category: Optional[OsCategory] = None,
    ) -> None:
        self.default_java = settings.default_java
        self.launcher = launcher
        self.environ = os.environ if environ is None else environ
        self.os_category = os_category or current_os_category()
        self.log = logging.getLogger(self.__class__.__name__)

    def probe(self, path: str) -> bool:
        """True when ``path`` can be started; its exit status is not inspected."""
        try:
            returncode = self.launcher([path, VERSION_FLAG])
        except OSError as exc:
            self.log.debug("Cannot start %s: %s", path, exc)
            return False
        self.log.debug("%s %s exited with %s", path, VERSION_FLAG, returncode)
        return True

    def find(self, preferred: Optional[str] = None) -> Optional[str]:
        for candidate in self._candidates(preferred):
            if self.probe(candidate):
                return candidate
        return None

    def _candidates(self, preferred: Optional[str]) -> List[str]:
        if preferred:
            return [preferred]
        candidates = [self.default_java]
        java_home = self.environ.get("JAVA_HOME")
        if java_home:
            exe = "java.exe" if self.os_category == OsCategory.WINDOWS else "java"
            candidates.append(str(Path(java_home) / "bin" / exe))
        return candidates
