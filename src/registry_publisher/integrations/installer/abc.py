"""Abstract base class for installing a published package for inspection."""

from abc import ABC, abstractmethod
from pathlib import Path


class ArtifactInstaller(ABC):
    """Installs a package the way a consumer would, so its files can be read."""

    @abstractmethod
    def install_for_inspection(self, package_name: str, dist_tag: str) -> Path:
        """Install ``package_name@dist_tag`` and return the installed package directory.

        Raises:
            RuntimeError: If the install fails
        """
        ...
