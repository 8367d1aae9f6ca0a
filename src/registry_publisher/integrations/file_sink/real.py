"""Filesystem-backed file sink."""

import shutil
from pathlib import Path

from registry_publisher.integrations.file_sink.abc import FileSink


class RealFileSink(FileSink):
    """Production implementation on the local filesystem."""

    def write_document(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def read_document(self, path: Path) -> str:
        if not path.exists():
            raise FileNotFoundError(f"Document not found at {path}")
        return path.read_text(encoding="utf-8")

    def clear_directory(self, path: Path) -> None:
        if path.exists():
            shutil.rmtree(path)
        path.mkdir(parents=True)
