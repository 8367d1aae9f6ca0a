"""Abstract base class for publishing and tagging packages."""

from abc import ABC, abstractmethod
from pathlib import Path

# Fresh versions land here and are promoted to "latest" only after validation
DEFAULT_PUBLISH_TAG = "next"


class ArtifactPublisher(ABC):
    """Abstract interface for registry write operations.

    All implementations (real, dry-run and fake) must implement this interface.
    """

    @abstractmethod
    def publish(self, directory: Path, manifest: dict[str, object], dry_run: bool) -> None:
        """Publish the package in ``directory`` under the default publish tag.

        Args:
            directory: Directory holding package.json and the package files
            manifest: The package.json contents, for naming and logging
            dry_run: If True, ask the registry to validate without publishing
        """
        ...

    @abstractmethod
    def tag(self, package_name: str, version: str, tag_name: str) -> None:
        """Point ``tag_name`` of ``package_name`` at ``version``."""
        ...
