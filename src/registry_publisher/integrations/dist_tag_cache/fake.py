"""Fake dist-tag cache for testing."""

from registry_publisher.integrations.dist_tag_cache.abc import DistTagCache


class FakeDistTagCache(DistTagCache):
    """In-memory fake holding pre-configured dist-tags.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, dist_tags: dict[str, dict[str, str]] | None = None) -> None:
        """Create FakeDistTagCache.

        Args:
            dist_tags: Mapping of escaped npm name -> (tag -> version)
        """
        self._dist_tags = dist_tags or {}

    def get_cached(self, package_key: str) -> dict[str, str] | None:
        tags = self._dist_tags.get(package_key)
        return dict(tags) if tags is not None else None

    def list_known_keys(self) -> set[str]:
        return set(self._dist_tags)
