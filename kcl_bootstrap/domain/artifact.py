"""Maven artifact coordinates for the daemon's jar dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union


@dataclass(frozen=True)
class MavenArtifact:
    """Represents a Maven jar identified by group/artifact/version."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def file_name(self) -> str:
        return f"{self.artifact_id}-{self.version}.jar"

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    @property
    def path_segments(self) -> List[str]:
        return [*self.group_id.split("."), self.artifact_id, self.version, self.file_name]

    def remote_address(self, base_url: str) -> str:
        """Join the repository path onto ``base_url`` (a prefix, not a directory)."""
        return base_url + "/".join(self.path_segments)

    def exists_in(self, folder: Union[str, Path]) -> bool:
        return (Path(folder) / self.file_name).is_file()
