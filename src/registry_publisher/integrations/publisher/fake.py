"""Fake publisher for testing."""

from pathlib import Path

from registry_publisher.integrations.publisher.abc import ArtifactPublisher


class FakeArtifactPublisher(ArtifactPublisher):
    """In-memory fake that records publish and tag calls.

    This class has NO public setup methods. Calls are captured for assertions.
    """

    def __init__(self) -> None:
        self._published: list[tuple[Path, dict[str, object], bool]] = []
        self._tags: list[tuple[str, str, str]] = []

    @property
    def published(self) -> list[tuple[Path, dict[str, object], bool]]:
        """List of (directory, manifest, dry_run) tuples passed to publish()."""
        return self._published

    @property
    def tags(self) -> list[tuple[str, str, str]]:
        """List of (package_name, version, tag_name) tuples passed to tag()."""
        return self._tags

    def publish(self, directory: Path, manifest: dict[str, object], dry_run: bool) -> None:
        self._published.append((directory, dict(manifest), dry_run))

    def tag(self, package_name: str, version: str, tag_name: str) -> None:
        self._tags.append((package_name, version, tag_name))
