"""Abstract base class for reading live package metadata."""

from abc import ABC, abstractmethod

from registry_publisher.integrations.metadata_source.types import PublishedMetadata


class PackageMetadataSource(ABC):
    """Abstract interface for fetching what is currently published.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def fetch_live_metadata(self, package_name: str) -> PublishedMetadata:
        """Fetch the live metadata of ``package_name``.

        Raises:
            PreconditionViolation: If the live versions are not semantic versions
            RuntimeError: If the registry cannot be queried
        """
        ...
