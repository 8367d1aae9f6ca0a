"""Parsing of `npm view --json` output into PublishedMetadata."""

from datetime import UTC, datetime

from registry_publisher.core.errors import PreconditionViolation
from registry_publisher.core.semver import SemanticVersion, highest_version
from registry_publisher.integrations.metadata_source.types import PublishedMetadata

CONTENT_HASH_FIELD = "typesPublisherContentHash"


def parse_npm_view_output(package_name: str, data: dict) -> PublishedMetadata:
    """Extract the publish-relevant fields from a package document.

    Args:
        package_name: Package queried (for error messages)
        data: Decoded `npm view <pkg> --json` output

    Raises:
        PreconditionViolation: If dist-tags, versions or modification time are
            missing, or the latest version is not a semantic version
    """
    dist_tags = data.get("dist-tags") or {}
    latest = dist_tags.get("latest")
    if not isinstance(latest, str):
        raise PreconditionViolation(f"{package_name} has no 'latest' dist-tag")
    version = SemanticVersion.try_parse(latest)
    if version is None:
        raise PreconditionViolation(
            f"{package_name}@latest is not a semantic version: {latest!r}"
        )

    versions = data.get("versions")
    # npm view prints a bare string when only one version exists
    if isinstance(versions, str):
        versions = [versions]
    highest = highest_version(list(versions or [])) or version

    modified = (data.get("time") or {}).get("modified")
    if not isinstance(modified, str):
        raise PreconditionViolation(f"{package_name} has no modification time")

    content_hash = data.get(CONTENT_HASH_FIELD)
    return PublishedMetadata(
        version=version,
        highest_semver_version=highest,
        content_hash=content_hash if isinstance(content_hash, str) else None,
        last_modified=parse_timestamp(modified),
    )


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
