"""Exceptions raised while preparing the MultiLangDaemon launch."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from kcl_bootstrap.domain import MavenArtifact


class BootstrapError(RuntimeError):
    """Base class for fatal bootstrap failures."""


class ManifestError(BootstrapError):
    """Raised when the manifest maps distinct artifacts onto one jar file."""


class ArtifactFetchError(BootstrapError):
    """Raised when a jar cannot be downloaded or written to the cache folder."""

    def __init__(self, artifact: "MavenArtifact", url: str, reason: str) -> None:
        super().__init__(f"failed to fetch {artifact.coordinates} from {url}: {reason}")
        self.artifact = artifact
        self.url = url


class CacheFolderError(BootstrapError):
    """Raised when the jar folder cannot be created."""

    def __init__(self, folder: object, reason: str) -> None:
        super().__init__(f"cannot use jar folder {folder}: {reason}")
        self.folder = folder
