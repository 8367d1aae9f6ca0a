"""Real metadata source using the npm CLI."""

import json
import logging

from registry_publisher.integrations.metadata_source.abc import PackageMetadataSource
from registry_publisher.integrations.metadata_source.parsing import parse_npm_view_output
from registry_publisher.integrations.metadata_source.types import PublishedMetadata
from registry_publisher.integrations.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealPackageMetadataSource(PackageMetadataSource):
    """Queries the registry with `npm view <package> --json`."""

    def __init__(self, npm_command: str = "npm") -> None:
        self._npm_command = npm_command

    def fetch_live_metadata(self, package_name: str) -> PublishedMetadata:
        result = run_subprocess_with_context(
            [self._npm_command, "view", package_name, "--json"],
            operation_context=f"fetch npm info for {package_name}",
        )
        logger.debug("npm view %s returned %d bytes", package_name, len(result.stdout))
        return parse_npm_view_output(package_name, json.loads(result.stdout))
