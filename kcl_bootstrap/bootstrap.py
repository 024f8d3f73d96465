"""Wire the bootstrap components and run fetch -> locate -> build -> launch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .domain import DEFAULT_MANIFEST, LaunchOptions, LaunchPlan, MavenArtifact, resolve_jar_folder
from .fileget import ArtifactCache
from .launch import InvocationBuilder, LaunchDispatcher, RuntimeLocator
from .settings import Settings

log = logging.getLogger(__name__)

JAVA_NOT_FOUND_EXIT_CODE = 2


@dataclass
class BootstrapContainer:
    """Holds the collaborators of one run; any of them may be supplied up front."""

    settings: Settings
    manifest: Sequence[MavenArtifact] = DEFAULT_MANIFEST
    artifact_cache: Optional[ArtifactCache] = None
    runtime_locator: Optional[RuntimeLocator] = None
    invocation_builder: InvocationBuilder = field(default_factory=InvocationBuilder)
    dispatcher: Optional[LaunchDispatcher] = None

    def __post_init__(self) -> None:
        if self.artifact_cache is None:
            self.artifact_cache = ArtifactCache(self.settings)
        if self.runtime_locator is None:
            self.runtime_locator = RuntimeLocator(self.settings)
        if self.dispatcher is None:
            self.dispatcher = LaunchDispatcher()

    def close(self) -> None:
        self.artifact_cache.close()


def run_bootstrap(options: LaunchOptions, container: BootstrapContainer) -> int:
    """Prepare the classpath, find java and launch or print the daemon command."""
    jar_folder = resolve_jar_folder(options.jar_folder, container.settings.default_jar_folder)
    classpath = container.artifact_cache.ensure(jar_folder, container.manifest)

    java = container.runtime_locator.find(options.java_location)
    if java is None:
        log.error("java could not be found. You may need to install it, or manually specify the path to it.")
        return JAVA_NOT_FOUND_EXIT_CODE

    invocation = container.invocation_builder.build(
        java,
        classpath,
        options.properties_file,
        options.log_configuration,
    )
    plan = LaunchPlan.execute(invocation) if options.execute else LaunchPlan.print(invocation)
    return container.dispatcher.run(plan)
