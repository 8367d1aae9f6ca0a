"""Application context with dependency injection."""

from dataclasses import dataclass

from registry_publisher.core.config import PublisherConfig
from registry_publisher.integrations.dist_tag_cache.abc import DistTagCache
from registry_publisher.integrations.dist_tag_cache.real import FileDistTagCache
from registry_publisher.integrations.file_sink.abc import FileSink
from registry_publisher.integrations.file_sink.real import RealFileSink
from registry_publisher.integrations.installer.abc import ArtifactInstaller
from registry_publisher.integrations.installer.real import RealArtifactInstaller
from registry_publisher.integrations.metadata_source.abc import PackageMetadataSource
from registry_publisher.integrations.metadata_source.real import RealPackageMetadataSource
from registry_publisher.integrations.publisher.abc import ArtifactPublisher
from registry_publisher.integrations.publisher.dry_run import DryRunArtifactPublisher
from registry_publisher.integrations.publisher.real import RealArtifactPublisher
from registry_publisher.integrations.time.abc import Time
from registry_publisher.integrations.time.real import RealTime


@dataclass(frozen=True)
class PublisherContext:
    """Immutable context holding all dependencies for a publish run.

    Created at CLI entry point and threaded through the workflow.
    Frozen to prevent accidental modification at runtime.
    """

    metadata_source: PackageMetadataSource
    dist_tag_cache: DistTagCache
    publisher: ArtifactPublisher
    installer: ArtifactInstaller
    file_sink: FileSink
    time: Time
    config: PublisherConfig
    dry_run: bool

    @staticmethod
    def for_test(
        metadata_source: PackageMetadataSource | None = None,
        dist_tag_cache: DistTagCache | None = None,
        publisher: ArtifactPublisher | None = None,
        installer: ArtifactInstaller | None = None,
        file_sink: FileSink | None = None,
        time: Time | None = None,
        config: PublisherConfig | None = None,
        dry_run: bool = False,
    ) -> "PublisherContext":
        """Create test context with optional pre-configured integration classes.

        Any collaborator left as None is replaced by its empty fake.

        Example:
            >>> cache = FakeDistTagCache(dist_tags={"@types%2freact": {"latest": "18.0.0"}})
            >>> ctx = PublisherContext.for_test(dist_tag_cache=cache)
        """
        from registry_publisher.integrations.dist_tag_cache.fake import FakeDistTagCache
        from registry_publisher.integrations.file_sink.fake import FakeFileSink
        from registry_publisher.integrations.installer.fake import FakeArtifactInstaller
        from registry_publisher.integrations.metadata_source.fake import (
            FakePackageMetadataSource,
        )
        from registry_publisher.integrations.publisher.fake import FakeArtifactPublisher
        from registry_publisher.integrations.time.fake import FakeTime

        return PublisherContext(
            metadata_source=metadata_source or FakePackageMetadataSource(),
            dist_tag_cache=dist_tag_cache or FakeDistTagCache(),
            publisher=publisher or FakeArtifactPublisher(),
            installer=installer or FakeArtifactInstaller(),
            file_sink=file_sink or FakeFileSink(),
            time=time or FakeTime(),
            config=config or PublisherConfig(),
            dry_run=dry_run,
        )


def create_context(config: PublisherConfig, *, dry_run: bool) -> PublisherContext:
    """Create production context with real implementations.

    Called once at CLI entry point. In dry-run mode the publisher is wrapped
    so that publish and tag calls only log.
    """
    publisher: ArtifactPublisher = RealArtifactPublisher()
    if dry_run:
        publisher = DryRunArtifactPublisher(publisher)

    return PublisherContext(
        metadata_source=RealPackageMetadataSource(),
        dist_tag_cache=FileDistTagCache(config.cache_path),
        publisher=publisher,
        installer=RealArtifactInstaller(config.validate_dir),
        file_sink=RealFileSink(),
        time=RealTime(),
        config=config,
        dry_run=dry_run,
    )
