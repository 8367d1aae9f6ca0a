"""No-op wrapper for publisher operations."""

import logging
from pathlib import Path

from registry_publisher.integrations.publisher.abc import ArtifactPublisher

logger = logging.getLogger(__name__)


class DryRunArtifactPublisher(ArtifactPublisher):
    """No-op wrapper for publisher operations.

    Every operation of this interface writes to the registry, so none are
    delegated; each one only logs what would have happened.
    """

    def __init__(self, wrapped: ArtifactPublisher) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real publisher implementation to wrap
        """
        self._wrapped = wrapped

    def publish(self, directory: Path, manifest: dict[str, object], dry_run: bool) -> None:
        logger.info(
            "(dry) Skip publish of %s@%s from %s",
            manifest.get("name"),
            manifest.get("version"),
            directory,
        )

    def tag(self, package_name: str, version: str, tag_name: str) -> None:
        logger.info("(dry) Skip tag of %s@%s as %s", package_name, version, tag_name)
