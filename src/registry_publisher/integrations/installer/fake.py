"""Fake installer for testing."""

from pathlib import Path

from registry_publisher.integrations.installer.abc import ArtifactInstaller


class FakeArtifactInstaller(ArtifactInstaller):
    """Returns pre-configured install locations without installing anything.

    Pair with a FakeFileSink holding the installed files at those locations.
    This class has NO public setup methods.
    """

    def __init__(self, *, installed_paths: dict[str, Path] | None = None) -> None:
        """Create FakeArtifactInstaller.

        Args:
            installed_paths: Mapping of package name -> installed package directory
        """
        self._installed_paths = installed_paths or {}
        self._installs: list[tuple[str, str]] = []

    @property
    def installs(self) -> list[tuple[str, str]]:
        """List of (package_name, dist_tag) tuples that were installed."""
        return self._installs

    def install_for_inspection(self, package_name: str, dist_tag: str) -> Path:
        self._installs.append((package_name, dist_tag))
        if package_name not in self._installed_paths:
            raise RuntimeError(f"Failed to install {package_name}@{dist_tag} for validation")
        return self._installed_paths[package_name]
