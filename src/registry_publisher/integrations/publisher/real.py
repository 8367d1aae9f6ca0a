"""Real publisher using the npm CLI."""

import logging
from pathlib import Path

from registry_publisher.integrations.publisher.abc import DEFAULT_PUBLISH_TAG, ArtifactPublisher
from registry_publisher.integrations.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealArtifactPublisher(ArtifactPublisher):
    """Runs `npm publish` and `npm dist-tag add`.

    Requires an npm CLI authenticated against the target registry.
    """

    def __init__(self, npm_command: str = "npm", default_tag: str = DEFAULT_PUBLISH_TAG) -> None:
        self._npm_command = npm_command
        self._default_tag = default_tag

    def publish(self, directory: Path, manifest: dict[str, object], dry_run: bool) -> None:
        cmd = [self._npm_command, "publish", str(directory), "--tag", self._default_tag]
        if dry_run:
            cmd.append("--dry-run")
        name = f"{manifest.get('name')}@{manifest.get('version')}"
        logger.info("Publishing %s from %s (dry_run=%s)", name, directory, dry_run)
        run_subprocess_with_context(cmd, operation_context=f"publish {name}")

    def tag(self, package_name: str, version: str, tag_name: str) -> None:
        logger.info("Tagging %s@%s as %s", package_name, version, tag_name)
        run_subprocess_with_context(
            [self._npm_command, "dist-tag", "add", f"{package_name}@{version}", tag_name],
            operation_context=f"tag {package_name}@{version} as {tag_name}",
        )
