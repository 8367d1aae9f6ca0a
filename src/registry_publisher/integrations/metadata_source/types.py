"""Type definitions for live package metadata."""

from dataclasses import dataclass
from datetime import datetime

from registry_publisher.core.semver import SemanticVersion


@dataclass(frozen=True)
class PublishedMetadata:
    """Currently live state of a published package.

    ``version`` is the version tagged ``latest``; ``highest_semver_version`` is
    the highest version ever published. They differ when a run published a
    version and stopped before promoting it.
    """

    version: SemanticVersion
    highest_semver_version: SemanticVersion
    content_hash: str | None  # None when the latest manifest carries no hash
    last_modified: datetime
