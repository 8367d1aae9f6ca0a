"""Abstract base class for the cached dist-tag lookup."""

from abc import ABC, abstractmethod


class DistTagCache(ABC):
    """Read-through cache of registry dist-tags, keyed by escaped npm name."""

    @abstractmethod
    def get_cached(self, package_key: str) -> dict[str, str] | None:
        """Return the cached dist-tag map for ``package_key``, or None if absent."""
        ...

    @abstractmethod
    def list_known_keys(self) -> set[str]:
        ...

    def format_keys(self) -> str:
        """Render the known keys for diagnostics."""
        return ", ".join(sorted(self.list_known_keys()))
