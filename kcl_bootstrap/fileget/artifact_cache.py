"""Local jar cache populated from a Maven repository."""

from __future__ import annotations

import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Optional

import httpx

from kcl_bootstrap.domain import DEFAULT_MANIFEST, MavenArtifact, validate_manifest
from kcl_bootstrap.errors import ArtifactFetchError, CacheFolderError
from kcl_bootstrap.settings import Settings


class ArtifactCache:
    """Make sure a folder holds every jar the daemon needs."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.base_url = settings.repository_url
        self.download_workers = settings.download_workers
        self.log = logging.getLogger(self.__class__.__name__)
        self._client = client or httpx.Client(
            timeout=settings.http_timeout,
            verify=settings.verify_tls,
            follow_redirects=True,
        )

    def ensure(self, folder: Path, manifest: Iterable[MavenArtifact] = DEFAULT_MANIFEST) -> str:
        """Fetch missing jars into ``folder`` and return its wildcard classpath."""
        artifacts = validate_manifest(manifest)
        self.log.info("Fetching required jars...")
        missing = [artifact for artifact in artifacts if not artifact.exists_in(folder)]
        if missing:
            try:
                folder.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise CacheFolderError(folder, str(exc) or exc.__class__.__name__) from exc
            self._fetch_all(missing, folder)
        self.log.info("Done.")
        return str(folder / "*")

    def _fetch_all(self, artifacts: List[MavenArtifact], folder: Path) -> None:
        max_workers = min(self.download_workers, len(artifacts))
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="jar-fetch") as executor:
            futures = [executor.submit(self.fetch, artifact, folder) for artifact in artifacts]
            try:
                for future in as_completed(futures):
                    future.result()
            except Exception:
                for future in futures:
                    future.cancel()
                raise

    def fetch(self, artifact: MavenArtifact, folder: Path) -> Path:
        """Download one jar; an existing file is reused as is."""
        destination = folder / artifact.file_name
        if artifact.exists_in(folder):
            self.log.debug("Reusing cached jar %s", destination)
            return destination
        url = artifact.remote_address(self.base_url)
        self.log.info("%s --> %s", url, destination)
        try:
            folder.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{artifact.file_name}.", suffix=".part", dir=folder)
        except OSError as exc:
            raise ArtifactFetchError(artifact, url, str(exc) or exc.__class__.__name__) from exc
        tmp_path = Path(tmp_name)
        downloaded = 0
        try:
            with os.fdopen(fd, "wb") as fh:
                with self._client.stream("GET", url) as response:
                    if response.status_code != httpx.codes.OK:
                        raise ArtifactFetchError(artifact, url, f"HTTP {response.status_code}")
                    for chunk in response.iter_bytes(65536):
                        fh.write(chunk)
                        downloaded += len(chunk)
            os.replace(tmp_path, destination)
        except ArtifactFetchError:
            raise
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, OSError) as exc:
            raise ArtifactFetchError(artifact, url, str(exc) or exc.__class__.__name__) from exc
        finally:
            # gone already once os.replace succeeded
            tmp_path.unlink(missing_ok=True)
        self.log.debug("Fetched %s (%d bytes)", artifact.coordinates, downloaded)
        return destination

    def close(self) -> None:
        self._client.close()
