"""Generation of the registry package directory."""

import json
from pathlib import Path

from registry_publisher.core.registry import RegistrySnapshot
from registry_publisher.integrations.file_sink.abc import FileSink

README = """This package contains a listing of all packages published to the @types scope on NPM.
Generated by [types-publisher](https://github.com/Microsoft/types-publisher)."""

MANIFEST_FILENAME = "package.json"
INDEX_FILENAME = "index.json"
README_FILENAME = "README.md"


def generate_package_manifest(
    package_name: str, version: str, content_hash: str
) -> dict[str, object]:
    """Build package.json for the registry package.

    Everything except the version and content hash is fixed.
    """
    return {
        "name": package_name,
        "version": version,
        "description": (
            "A registry of TypeScript declaration file packages "
            "published within the @types scope."
        ),
        "repository": {
            "type": "git",
            "url": "https://github.com/Microsoft/types-publisher.git",
        },
        "keywords": ["TypeScript", "declaration", "files", "types", "packages"],
        "author": "Microsoft Corp.",
        "license": "MIT",
        "typesPublisherContentHash": content_hash,
    }


def write_registry_artifact(
    file_sink: FileSink,
    output_path: Path,
    snapshot: RegistrySnapshot,
    manifest: dict[str, object],
) -> None:
    """Replace the contents of ``output_path`` with a fresh package."""
    file_sink.clear_directory(output_path)
    file_sink.write_document(output_path / MANIFEST_FILENAME, json.dumps(manifest, indent=4))
    file_sink.write_document(output_path / INDEX_FILENAME, snapshot.serialized)
    file_sink.write_document(output_path / README_FILENAME, README)
