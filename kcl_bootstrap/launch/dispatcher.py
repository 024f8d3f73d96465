"""Execute an invocation or print it for the operator."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from kcl_bootstrap.domain import Invocation, LaunchMode, LaunchPlan
from .host import Launcher, OsCategory, current_os_category, run_process

WINDOWS_CALL_OPERATOR = "& "


class LaunchDispatcher:
    """Consumes a LaunchPlan and returns the process exit status."""

    def __init__(
        self,
        *,
        launcher: Launcher = run_process,
        stdout: Optional[TextIO] = None,
        os_category: Optional[OsCategory] = None,
    ) -> None:
        self.launcher = launcher
        self.stdout = stdout
        self.os_category = os_category or current_os_category()
        self.log = logging.getLogger(self.__class__.__name__)

    def run(self, plan: LaunchPlan) -> int:
        if plan.mode is LaunchMode.EXECUTE:
            return self.execute(plan.invocation)
        if plan.mode is LaunchMode.PRINT:
            out = self.stdout or sys.stdout
            out.write(self.render(plan.invocation) + "\n")
            out.flush()
            return 0
        raise ValueError(f"unsupported launch mode {plan.mode!r}")

    def execute(self, invocation: Invocation) -> int:
        argv = invocation.argv
        self.log.debug("Starting %s", argv)
        returncode = self.launcher(argv)
        if returncode < 0:
            # killed by signal -returncode (POSIX); report it the way a shell does
            return 128 - returncode
        return returncode

    def render(self, invocation: Invocation) -> str:
        """Quote every element and join; prefix the PowerShell call operator on Windows."""
        command = " ".join(f'"{part}"' for part in invocation.argv)
        if self.os_category == OsCategory.WINDOWS:
            command = WINDOWS_CALL_OPERATOR + command
        return command
