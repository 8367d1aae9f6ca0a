from registry_publisher.integrations.metadata_source.abc import PackageMetadataSource
from registry_publisher.integrations.metadata_source.types import PublishedMetadata

__all__ = ["PackageMetadataSource", "PublishedMetadata"]
