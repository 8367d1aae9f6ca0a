"""Fake metadata source for testing."""

from registry_publisher.integrations.metadata_source.abc import PackageMetadataSource
from registry_publisher.integrations.metadata_source.types import PublishedMetadata


class FakePackageMetadataSource(PackageMetadataSource):
    """In-memory fake returning pre-configured metadata.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, metadata: dict[str, PublishedMetadata] | None = None) -> None:
        """Create FakePackageMetadataSource.

        Args:
            metadata: Mapping of package name -> live metadata
        """
        self._metadata = metadata or {}
        self._fetched: list[str] = []

    @property
    def fetched(self) -> list[str]:
        """Package names passed to fetch_live_metadata(), for test assertions."""
        return self._fetched

    def fetch_live_metadata(self, package_name: str) -> PublishedMetadata:
        self._fetched.append(package_name)
        if package_name not in self._metadata:
            raise RuntimeError(f"Failed to fetch npm info for {package_name}: 404 Not Found")
        return self._metadata[package_name]
