"""Jar dependencies required by the KCL MultiLangDaemon."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from kcl_bootstrap.errors import ManifestError
from .artifact import MavenArtifact

KCL_VERSION = "2.2.8"
AWS_SDK_VERSION = "2.10.56"
NETTY_VERSION = "4.1.42.Final"

DEFAULT_MANIFEST: Tuple[MavenArtifact, ...] = (
    MavenArtifact("software.amazon.kinesis", "amazon-kinesis-client-multilang", KCL_VERSION),
    MavenArtifact("software.amazon.kinesis", "amazon-kinesis-client", KCL_VERSION),
    MavenArtifact("software.amazon.awssdk", "kinesis", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "aws-cbor-protocol", AWS_SDK_VERSION),
    MavenArtifact("com.fasterxml.jackson.dataformat", "jackson-dataformat-cbor", "2.10.0"),
    MavenArtifact("software.amazon.awssdk", "aws-json-protocol", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "dynamodb", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "cloudwatch", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "netty-nio-client", AWS_SDK_VERSION),
    MavenArtifact("io.netty", "netty-codec-http", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-codec-http2", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-codec", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-transport", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-resolver", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-common", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-buffer", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-handler", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-transport-native-epoll", NETTY_VERSION),
    MavenArtifact("io.netty", "netty-transport-native-unix-common", NETTY_VERSION),
    MavenArtifact("com.typesafe.netty", "netty-reactive-streams-http", "2.0.4"),
    MavenArtifact("com.typesafe.netty", "netty-reactive-streams", "2.0.4"),
    MavenArtifact("org.reactivestreams", "reactive-streams", "1.0.2"),
    MavenArtifact("com.google.guava", "guava", "26.0-jre"),
    MavenArtifact("com.google.code.findbugs", "jsr305", "3.0.2"),
    MavenArtifact("org.checkerframework", "checker-qual", "2.5.2"),
    MavenArtifact("com.google.errorprone", "error_prone_annotations", "2.1.3"),
    MavenArtifact("com.google.j2objc", "j2objc-annotations", "1.1"),
    MavenArtifact("org.codehaus.mojo", "animal-sniffer-annotations", "1.14"),
    MavenArtifact("com.google.protobuf", "protobuf-java", "2.6.1"),
    MavenArtifact("org.apache.commons", "commons-lang3", "3.8.1"),
    MavenArtifact("org.slf4j", "slf4j-api", "1.7.25"),
    MavenArtifact("io.reactivex.rxjava2", "rxjava", "2.1.14"),
    MavenArtifact("software.amazon.awssdk", "sts", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "aws-query-protocol", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "protocol-core", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "profiles", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "sdk-core", AWS_SDK_VERSION),
    MavenArtifact("com.fasterxml.jackson.core", "jackson-core", "2.9.8"),
    MavenArtifact("com.fasterxml.jackson.core", "jackson-databind", "2.9.8"),
    MavenArtifact("software.amazon.awssdk", "auth", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.eventstream", "eventstream", "1.0.1"),
    MavenArtifact("software.amazon.awssdk", "http-client-spi", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "regions", AWS_SDK_VERSION),
    MavenArtifact("com.fasterxml.jackson.core", "jackson-annotations", "2.9.0"),
    MavenArtifact("software.amazon.awssdk", "annotations", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "utils", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "aws-core", AWS_SDK_VERSION),
    MavenArtifact("software.amazon.awssdk", "apache-client", AWS_SDK_VERSION),
    MavenArtifact("org.apache.httpcomponents", "httpclient", "4.5.9"),
    MavenArtifact("commons-codec", "commons-codec", "1.11"),
    MavenArtifact("org.apache.httpcomponents", "httpcore", "4.4.11"),
    MavenArtifact("com.amazonaws", "aws-java-sdk-core", "1.11.477"),
    MavenArtifact("commons-logging", "commons-logging", "1.1.3"),
    MavenArtifact("software.amazon.ion", "ion-java", "1.0.2"),
    MavenArtifact("joda-time", "joda-time", "2.8.1"),
    MavenArtifact("ch.qos.logback", "logback-classic", "1.2.3"),
    MavenArtifact("ch.qos.logback", "logback-core", "1.2.3"),
    MavenArtifact("com.beust", "jcommander", "1.72"),
    MavenArtifact("commons-io", "commons-io", "2.6"),
    MavenArtifact("org.apache.commons", "commons-collections4", "4.2"),
    MavenArtifact("commons-beanutils", "commons-beanutils", "1.9.3"),
    MavenArtifact("commons-collections", "commons-collections", "3.2.2"),
)


def validate_manifest(artifacts: Iterable[MavenArtifact]) -> List[MavenArtifact]:
    """Return artifacts in order with exact duplicates dropped.

    Two different coordinates that map to the same jar file name would make
    the cache folder ambiguous, so that case is rejected.
    """
    seen: Dict[str, MavenArtifact] = {}
    ordered: List[MavenArtifact] = []
    for artifact in artifacts:
        existing = seen.get(artifact.file_name)
        if existing is None:
            seen[artifact.file_name] = artifact
            ordered.append(artifact)
        elif existing != artifact:
            raise ManifestError(
                f"{existing.coordinates} and {artifact.coordinates} both resolve to {artifact.file_name}"
            )
    return ordered
