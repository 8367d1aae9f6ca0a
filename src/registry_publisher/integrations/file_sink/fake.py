"""Fake file sink for testing."""

from pathlib import Path

from registry_publisher.integrations.file_sink.abc import FileSink


class FakeFileSink(FileSink):
    """In-memory fake mapping paths to file contents.

    This class has NO public setup methods. Initial files are provided via
    constructor; writes are visible through ``files``.
    """

    def __init__(self, *, files: dict[Path, str] | None = None) -> None:
        self._files = dict(files or {})
        self._cleared: list[Path] = []

    @property
    def files(self) -> dict[Path, str]:
        return self._files

    @property
    def cleared(self) -> list[Path]:
        """Directories passed to clear_directory(), for test assertions."""
        return self._cleared

    def write_document(self, path: Path, content: str) -> None:
        self._files[path] = content

    def read_document(self, path: Path) -> str:
        if path not in self._files:
            raise FileNotFoundError(f"Document not found at {path}")
        return self._files[path]

    def clear_directory(self, path: Path) -> None:
        self._cleared.append(path)
        for existing in list(self._files):
            if existing.is_relative_to(path):
                del self._files[existing]
