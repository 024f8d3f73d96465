from .artifact import MavenArtifact
from .invocation import Invocation, LaunchMode, LaunchPlan
from .manifest import DEFAULT_MANIFEST, validate_manifest
from .options import LaunchOptions, resolve_jar_folder

__all__ = [
    "MavenArtifact",
    "Invocation",
    "LaunchMode",
    "LaunchPlan",
    "DEFAULT_MANIFEST",
    "validate_manifest",
    "LaunchOptions",
    "resolve_jar_folder",
]
