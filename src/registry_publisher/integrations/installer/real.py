"""Installer using `npm install` in a scratch project."""

import json
import logging
import shutil
from pathlib import Path

from registry_publisher.integrations.installer.abc import ArtifactInstaller
from registry_publisher.integrations.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

NPM_INSTALL_FLAGS = [
    "--ignore-scripts",
    "--no-shrinkwrap",
    "--no-package-lock",
    "--no-bin-links",
    "--no-save",
]

# npm warns about missing fields unless the scratch project declares them
_PLACEHOLDER_PACKAGE_JSON = {
    "name": "validate",
    "version": "0.0.0",
    "description": "description",
    "readme": "",
    "license": "",
    "repository": {},
}


class RealArtifactInstaller(ArtifactInstaller):
    """Installs into ``validate_dir``, which is cleared before every install."""

    def __init__(self, validate_dir: Path, npm_command: str = "npm") -> None:
        self._validate_dir = validate_dir
        self._npm_command = npm_command

    def install_for_inspection(self, package_name: str, dist_tag: str) -> Path:
        if self._validate_dir.exists():
            shutil.rmtree(self._validate_dir)
        self._validate_dir.mkdir(parents=True)
        (self._validate_dir / "package.json").write_text(
            json.dumps(_PLACEHOLDER_PACKAGE_JSON, indent=4), encoding="utf-8"
        )

        target = f"{package_name}@{dist_tag}"
        result = run_subprocess_with_context(
            [self._npm_command, "install", target, *NPM_INSTALL_FLAGS],
            operation_context=f"install {target} for validation",
            cwd=self._validate_dir,
        )
        stderr = result.stderr.strip()
        if stderr:
            logger.warning("npm install %s: %s", target, stderr)

        return self._validate_dir / "node_modules" / package_name
