"""Assemble the MultiLangDaemon command line."""

from __future__ import annotations

from typing import List, Optional

from kcl_bootstrap.domain import Invocation

MULTILANG_DAEMON_CLASS = "software.amazon.kinesis.multilang.MultiLangDaemon"
CLASSPATH_FLAG = "-cp"
PROPERTIES_FLAG = "-p"
LOG_CONFIGURATION_FLAG = "-l"


class InvocationBuilder:
    """Build an unquoted argv for ``java -cp <jars> MultiLangDaemon -p <properties>``."""

    def __init__(self, entry_point: str = MULTILANG_DAEMON_CLASS) -> None:
        self.entry_point = entry_point

    def build(
        self,
        runtime: str,
        classpath: str,
        properties_file: Optional[str],
        log_configuration: Optional[str] = None,
    ) -> Invocation:
        arguments: List[str] = [
            CLASSPATH_FLAG,
            classpath,
            self.entry_point,
            PROPERTIES_FLAG,
            properties_file or "",
        ]
        if log_configuration:
            arguments.extend([LOG_CONFIGURATION_FLAG, log_configuration])
        return Invocation(runtime, tuple(arguments))
