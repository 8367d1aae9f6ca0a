"""Build the canonical registry document from cached dist-tags."""

import hashlib
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from registry_publisher.core.errors import PreconditionViolation
from registry_publisher.core.packages import TypingsPackage
from registry_publisher.integrations.dist_tag_cache.abc import DistTagCache

LATEST_TAG = "latest"


@dataclass(frozen=True)
class RegistryDocument:
    """Package name -> (dist-tag -> version)."""

    entries: Mapping[str, Mapping[str, str]]

    def to_json_data(self) -> dict[str, dict[str, dict[str, str]]]:
        return {"entries": {name: dict(tags) for name, tags in self.entries.items()}}

    @staticmethod
    def from_json_data(data: object) -> "RegistryDocument":
        """Read a decoded ``index.json``.

        Raises:
            ValueError: If the data lacks an ``entries`` object of string tag maps
        """
        entries = data.get("entries") if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            raise ValueError("Registry document has no 'entries' object")
        parsed: dict[str, dict[str, str]] = {}
        for name, tags in entries.items():
            if not isinstance(tags, dict) or not all(
                isinstance(tag, str) and isinstance(version, str)
                for tag, version in tags.items()
            ):
                raise ValueError(f"Registry entry {name!r} is not a tag -> version map")
            parsed[name] = dict(tags)
        return RegistryDocument(entries=parsed)


@dataclass(frozen=True)
class RegistrySnapshot:
    """A built registry document with its serialized form and content hash."""

    document: RegistryDocument
    serialized: str
    content_hash: str


def filter_tags(tags: Mapping[str, str]) -> dict[str, str]:
    """Drop tags that only alias the ``latest`` version.

    ``latest`` itself is always kept, as is every tag pointing at a different
    version, so each distinct published version stays recorded.
    """
    latest_version = tags.get(LATEST_TAG)
    return {
        tag: version
        for tag, version in tags.items()
        if tag == LATEST_TAG or version != latest_version
    }


def generate_registry(
    typings: Sequence[TypingsPackage], cache: DistTagCache
) -> RegistryDocument:
    """Build the registry document from cached dist-tags.

    Every package must already be in the cache (the calculate-versions step
    fills it); nothing is fetched here.

    Raises:
        PreconditionViolation: Listing every package missing from the cache
    """
    entries: dict[str, dict[str, str]] = {}
    missing: list[str] = []
    for typing in typings:
        tags = cache.get_cached(typing.full_escaped_npm_name)
        if tags is None:
            missing.append(typing.full_escaped_npm_name)
            continue
        entries[typing.name] = filter_tags(tags)
    if missing:
        msg = f"{', '.join(missing)} not found in {cache.format_keys()}"
        raise PreconditionViolation(msg)
    return RegistryDocument(entries=entries)


def serialize_registry(document: RegistryDocument) -> str:
    """Canonical compact JSON with sorted keys."""
    return json.dumps(document.to_json_data(), sort_keys=True, separators=(",", ":"))


def compute_hash(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def build_snapshot(typings: Sequence[TypingsPackage], cache: DistTagCache) -> RegistrySnapshot:
    document = generate_registry(typings, cache)
    serialized = serialize_registry(document)
    return RegistrySnapshot(
        document=document, serialized=serialized, content_hash=compute_hash(serialized)
    )
