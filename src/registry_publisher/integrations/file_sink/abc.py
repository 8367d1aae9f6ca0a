"""Abstract base class for local file output."""

from abc import ABC, abstractmethod
from pathlib import Path


class FileSink(ABC):
    """Abstract interface for the local directories a run writes and reads."""

    @abstractmethod
    def write_document(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path``, creating parent directories."""
        ...

    @abstractmethod
    def read_document(self, path: Path) -> str:
        """Read ``path`` as UTF-8 text.

        Raises:
            FileNotFoundError: If ``path`` does not exist
        """
        ...

    @abstractmethod
    def clear_directory(self, path: Path) -> None:
        """Ensure ``path`` exists and is empty."""
        ...
