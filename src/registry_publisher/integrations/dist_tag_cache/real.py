"""Dist-tag cache backed by the JSON file written by calculate-versions."""

import json
import logging
from pathlib import Path

from registry_publisher.integrations.dist_tag_cache.abc import DistTagCache

logger = logging.getLogger(__name__)


class FileDistTagCache(DistTagCache):
    """Reads ``{escapedName: {"distTags": {...}, ...}}`` from ``cache_path``.

    The file is loaded on first access and never written.
    """

    def __init__(self, cache_path: Path) -> None:
        self._cache_path = cache_path
        self._entries: dict[str, dict[str, str]] | None = None

    def get_cached(self, package_key: str) -> dict[str, str] | None:
        tags = self._load().get(package_key)
        return dict(tags) if tags is not None else None

    def list_known_keys(self) -> set[str]:
        return set(self._load())

    def _load(self) -> dict[str, dict[str, str]]:
        if self._entries is not None:
            return self._entries

        if not self._cache_path.exists():
            logger.debug("No dist-tag cache at %s", self._cache_path)
            self._entries = {}
            return self._entries

        data = json.loads(self._cache_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self._cache_path}")

        entries: dict[str, dict[str, str]] = {}
        for key, info in data.items():
            dist_tags = info.get("distTags") if isinstance(info, dict) else None
            if not isinstance(dist_tags, dict):
                raise ValueError(f"Cache entry {key!r} in {self._cache_path} has no 'distTags'")
            entries[key] = {str(tag): str(version) for tag, version in dist_tags.items()}
        logger.debug("Loaded %d dist-tag entries from %s", len(entries), self._cache_path)
        self._entries = entries
        return entries
