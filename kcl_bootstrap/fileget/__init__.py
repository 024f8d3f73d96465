from .artifact_cache import ArtifactCache

__all__ = ["ArtifactCache"]
