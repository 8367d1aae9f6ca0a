"""The publish-registry workflow.

A run fetches the live registry metadata, builds the candidate snapshot,
writes it as a package, then carries out exactly one decision:

- retag-latest: check the stranded version is explained by the candidate,
  then tag it ``latest``
- publish-new: publish under ``next``, wait for propagation, verify the
  installed package against the candidate, then tag it ``latest``
- skip: verify the installed package against the candidate anyway

Nothing is tagged ``latest`` before its verification passes.
"""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from registry_publisher.core.artifact import (
    INDEX_FILENAME,
    generate_package_manifest,
    write_registry_artifact,
)
from registry_publisher.core.context import PublisherContext
from registry_publisher.core.decision import (
    PublishAction,
    PublishDecision,
    decide_publish_action,
    next_registry_version,
)
from registry_publisher.core.document import JsonObject, parse_document
from registry_publisher.core.errors import MonotonicityViolation
from registry_publisher.core.monotonicity import assert_json_newer
from registry_publisher.core.packages import NotNeededPackage, TypingsPackage
from registry_publisher.core.registry import RegistryDocument, build_snapshot
from registry_publisher.core.run_log import RunLog
from registry_publisher.core.subset import validate_is_subset

logger = logging.getLogger(__name__)

LATEST_TAG = "latest"
LOG_FILENAME = "publish-registry.md"


@dataclass(frozen=True)
class PublishResult:
    decision: PublishDecision
    new_content_hash: str
    log: RunLog


def publish_registry(
    ctx: PublisherContext,
    typings: Sequence[TypingsPackage],
    not_needed: Sequence[NotNeededPackage],
) -> PublishResult:
    """Run one publish decision for the registry package.

    Args:
        ctx: Context holding collaborators and configuration
        typings: Packages whose dist-tags make up the registry
        not_needed: Packages exempt from the subset check

    Returns:
        PublishResult with the decision taken and the run log

    Raises:
        PreconditionViolation: Live version outside 0.1.x, or dist-tags missing
        MonotonicityViolation: Candidate regresses below the installed package
        SubsetViolation: Stranded version holds a package the candidate lacks
        RuntimeError: Any collaborator failure, unchanged
    """
    config = ctx.config
    package_name = config.package_name
    log = RunLog(f"Publishing {package_name}")
    log.log(f"=== Publishing {package_name} ===")

    live = ctx.metadata_source.fetch_live_metadata(package_name)
    logger.debug(
        "Live %s: version=%s highest=%s modified=%s",
        package_name,
        live.version,
        live.highest_semver_version,
        live.last_modified.isoformat(),
    )

    snapshot = build_snapshot(typings, ctx.dist_tag_cache)
    decision = decide_publish_action(live, snapshot.content_hash, ctx.time.now(), config.cooldown)

    new_version = next_registry_version(live.version)
    manifest = generate_package_manifest(
        package_name, new_version.version_string, snapshot.content_hash
    )
    write_registry_artifact(ctx.file_sink, config.registry_output_path, snapshot, manifest)

    log.log(decision.description)
    if decision.action is PublishAction.RETAG_LATEST:
        _validate_installed_is_subset(ctx, not_needed)
        ctx.publisher.tag(package_name, live.highest_semver_version.version_string, LATEST_TAG)
    elif decision.action is PublishAction.PUBLISH_NEW:
        _publish(ctx, manifest, new_version.version_string, log)
    else:
        # Just making sure the public package did not drift under us
        _validate_installed_is_not_older(ctx)

    ctx.file_sink.write_document(config.logs_dir / LOG_FILENAME, log.render())
    return PublishResult(decision=decision, new_content_hash=snapshot.content_hash, log=log)


def _publish(
    ctx: PublisherContext, manifest: dict[str, object], version: str, log: RunLog
) -> None:
    config = ctx.config
    ctx.publisher.publish(config.registry_output_path, manifest, ctx.dry_run)
    log.log(f"Waiting {config.propagation_delay_seconds:g}s for the registry to update")
    ctx.time.sleep(config.propagation_delay_seconds)
    _validate_installed_is_not_older(ctx)
    ctx.publisher.tag(config.package_name, version, LATEST_TAG)
    log.log(f"Tagged {config.package_name}@{version} as {LATEST_TAG}")


def _read_local_index(ctx: PublisherContext) -> str:
    return ctx.file_sink.read_document(ctx.config.registry_output_path / INDEX_FILENAME)


def _install_and_read_index(ctx: PublisherContext) -> str:
    config = ctx.config
    installed_path = ctx.installer.install_for_inspection(
        config.package_name, config.inspection_tag
    )
    return ctx.file_sink.read_document(installed_path / INDEX_FILENAME)


def _validate_installed_is_not_older(ctx: PublisherContext) -> None:
    """Require the local candidate to be at least as new as the installed package."""
    installed = parse_document(_install_and_read_index(ctx))
    candidate = parse_document(_read_local_index(ctx))
    if not isinstance(installed, JsonObject) or not isinstance(candidate, JsonObject):
        raise MonotonicityViolation(
            "<root>", None, None, "registry index is not a JSON object"
        )
    assert_json_newer(candidate, installed)


def _validate_installed_is_subset(
    ctx: PublisherContext, not_needed: Sequence[NotNeededPackage]
) -> None:
    actual = RegistryDocument.from_json_data(json.loads(_install_and_read_index(ctx)))
    expected = RegistryDocument.from_json_data(json.loads(_read_local_index(ctx)))
    validate_is_subset(actual, expected, not_needed)
