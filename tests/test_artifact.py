from pathlib import Path

import pytest

from kcl_bootstrap.domain import DEFAULT_MANIFEST, MavenArtifact, resolve_jar_folder, validate_manifest
from kcl_bootstrap.errors import ManifestError


def test_file_name_is_artifact_and_version():
    artifact = MavenArtifact("software.amazon.kinesis", "amazon-kinesis-client", "2.2.8")

    assert artifact.file_name == "amazon-kinesis-client-2.2.8.jar"
    assert artifact.file_name == MavenArtifact("other.group", "amazon-kinesis-client", "2.2.8").file_name


def test_remote_address_splits_group_on_dots():
    artifact = MavenArtifact("io.netty", "netty-codec", "4.1.42.Final")

    url = artifact.remote_address("https://search.maven.org/remotecontent?filepath=")

    assert url == (
        "https://search.maven.org/remotecontent?filepath="
        "io/netty/netty-codec/4.1.42.Final/netty-codec-4.1.42.Final.jar"
    )


def test_exists_in(tmp_path):
    artifact = MavenArtifact("g", "a", "1.0")
    assert not artifact.exists_in(tmp_path)

    (tmp_path / "a-1.0.jar").write_bytes(b"jar")
    assert artifact.exists_in(tmp_path)


def test_equal_coordinates_are_interchangeable():
    assert MavenArtifact("g", "a", "1") == MavenArtifact("g", "a", "1")
    assert len({MavenArtifact("g", "a", "1"), MavenArtifact("g", "a", "1")}) == 1


def test_validate_manifest_drops_exact_duplicates():
    first = MavenArtifact("g", "a", "1")
    second = MavenArtifact("g", "b", "1")

    assert validate_manifest([first, second, first]) == [first, second]


def test_validate_manifest_rejects_conflicting_file_names():
    with pytest.raises(ManifestError):
        validate_manifest([MavenArtifact("g1", "a", "1"), MavenArtifact("g2", "a", "1")])


def test_default_manifest_is_consistent():
    artifacts = validate_manifest(DEFAULT_MANIFEST)

    assert len(artifacts) == len(DEFAULT_MANIFEST)
    assert artifacts[0].artifact_id == "amazon-kinesis-client-multilang"


def test_resolve_jar_folder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert resolve_jar_folder(None) == Path.cwd() / "jars"
    assert resolve_jar_folder("lib") == Path.cwd() / "lib"
    assert resolve_jar_folder(str(tmp_path / "abs")) == tmp_path / "abs"
