from .dispatcher import LaunchDispatcher
from .invocation import MULTILANG_DAEMON_CLASS, InvocationBuilder
from .host import OsCategory, current_os_category, detect_os_category, run_process
from .runtime import RuntimeLocator, run_version_probe

__all__ = [
    "LaunchDispatcher",
    "InvocationBuilder",
    "MULTILANG_DAEMON_CLASS",
    "OsCategory",
    "current_os_category",
    "detect_os_category",
    "run_process",
    "RuntimeLocator",
    "run_version_probe",
]
