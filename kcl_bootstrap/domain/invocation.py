"""Command line objects produced by the invocation builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


@dataclass(frozen=True)
class Invocation:
    """Executable plus ordered arguments; never quoted."""

    executable: str
    arguments: Tuple[str, ...] = ()

    @property
    def argv(self) -> List[str]:
        return [self.executable, *self.arguments]


class LaunchMode(str, Enum):
    EXECUTE = "EXECUTE"
    PRINT = "PRINT"


@dataclass(frozen=True)
class LaunchPlan:
    """What the dispatcher should do with an invocation."""

    mode: LaunchMode
    invocation: Invocation

    @classmethod
    def execute(cls, invocation: Invocation) -> "LaunchPlan":
        return cls(LaunchMode.EXECUTE, invocation)

    @classmethod
    def print(cls, invocation: Invocation) -> "LaunchPlan":
        return cls(LaunchMode.PRINT, invocation)
