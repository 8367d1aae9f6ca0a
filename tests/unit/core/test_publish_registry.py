"""Tests for the publish-registry workflow against fake collaborators."""

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from registry_publisher.core.config import PublisherConfig
from registry_publisher.core.context import PublisherContext
from registry_publisher.core.decision import PublishAction, SkipReason
from registry_publisher.core.errors import (
    MonotonicityViolation,
    PreconditionViolation,
    SubsetViolation,
)
from registry_publisher.core.packages import NotNeededPackage, TypingsPackage
from registry_publisher.core.publish_registry import publish_registry
from registry_publisher.core.registry import build_snapshot
from registry_publisher.core.semver import SemanticVersion
from registry_publisher.integrations.dist_tag_cache.fake import FakeDistTagCache
from registry_publisher.integrations.file_sink.fake import FakeFileSink
from registry_publisher.integrations.installer.fake import FakeArtifactInstaller
from registry_publisher.integrations.metadata_source.fake import FakePackageMetadataSource
from registry_publisher.integrations.metadata_source.types import PublishedMetadata
from registry_publisher.integrations.publisher.dry_run import DryRunArtifactPublisher
from registry_publisher.integrations.publisher.fake import FakeArtifactPublisher
from registry_publisher.integrations.time.fake import FakeTime

NOW = datetime(2024, 6, 15, tzinfo=UTC)
CONFIG = PublisherConfig(
    output_dir=Path("/work/output"),
    validate_dir=Path("/work/validate"),
    logs_dir=Path("/work/logs"),
)
INSTALLED = Path("/work/validate/node_modules/types-registry")
OUTPUT = CONFIG.registry_output_path

TYPINGS = [TypingsPackage("react"), TypingsPackage("node")]
CACHE_TAGS = {
    "@types%2freact": {"latest": "18.2.0", "ts4.9": "18.2.0", "ts4.0": "16.9.0"},
    "@types%2fnode": {"latest": "20.1.0"},
}
CANDIDATE_HASH = build_snapshot(TYPINGS, FakeDistTagCache(dist_tags=CACHE_TAGS)).content_hash
OLDER_INSTALLED = {"entries": {"react": {"latest": "18.0.0", "ts4.0": "16.9.0"}}}


def _live(
    version: str = "0.1.40",
    highest: str | None = None,
    content_hash: str | None = "stale-hash",
    days_ago: float = 30,
) -> PublishedMetadata:
    return PublishedMetadata(
        version=SemanticVersion.parse(version),
        highest_semver_version=SemanticVersion.parse(highest or version),
        content_hash=content_hash,
        last_modified=NOW - timedelta(days=days_ago),
    )


def _context(
    live: PublishedMetadata,
    installed: dict | None = None,
    *,
    publisher: FakeArtifactPublisher | None = None,
    dry_run: bool = False,
) -> PublisherContext:
    files = {}
    if installed is not None:
        files[INSTALLED / "index.json"] = json.dumps(installed)
    return PublisherContext.for_test(
        metadata_source=FakePackageMetadataSource(metadata={"types-registry": live}),
        dist_tag_cache=FakeDistTagCache(dist_tags=CACHE_TAGS),
        publisher=publisher or FakeArtifactPublisher(),
        installer=FakeArtifactInstaller(installed_paths={"types-registry": INSTALLED}),
        file_sink=FakeFileSink(files=files),
        time=FakeTime(now=NOW),
        config=CONFIG,
        dry_run=dry_run,
    )


def _publisher(ctx: PublisherContext) -> FakeArtifactPublisher:
    assert isinstance(ctx.publisher, FakeArtifactPublisher)
    return ctx.publisher


def _files(ctx: PublisherContext) -> dict[Path, str]:
    assert isinstance(ctx.file_sink, FakeFileSink)
    return ctx.file_sink.files


def test_publish_new_bumps_patch_and_tags_after_validation() -> None:
    ctx = _context(_live(days_ago=8), installed=OLDER_INSTALLED)

    result = publish_registry(ctx, TYPINGS, [])

    assert result.decision.action is PublishAction.PUBLISH_NEW
    assert result.decision.version == SemanticVersion(0, 1, 41)

    published = _publisher(ctx).published
    assert len(published) == 1
    directory, manifest, dry_run = published[0]
    assert directory == OUTPUT
    assert manifest["version"] == "0.1.41"
    assert manifest["typesPublisherContentHash"] == CANDIDATE_HASH
    assert dry_run is False

    assert _publisher(ctx).tags == [("types-registry", "0.1.41", "latest")]
    assert isinstance(ctx.time, FakeTime)
    assert ctx.time.sleep_calls == [60]
    assert isinstance(ctx.installer, FakeArtifactInstaller)
    assert ctx.installer.installs == [("types-registry", "next")]


def test_publish_new_writes_package_directory() -> None:
    ctx = _context(_live(days_ago=8), installed=OLDER_INSTALLED)

    result = publish_registry(ctx, TYPINGS, [])

    files = _files(ctx)
    index = json.loads(files[OUTPUT / "index.json"])
    assert index == {
        "entries": {
            "node": {"latest": "20.1.0"},
            "react": {"latest": "18.2.0", "ts4.0": "16.9.0"},
        }
    }
    manifest = json.loads(files[OUTPUT / "package.json"])
    assert manifest["name"] == "types-registry"
    assert manifest["license"] == "MIT"
    assert "@types scope" in files[OUTPUT / "README.md"]
    assert result.new_content_hash == CANDIDATE_HASH


def test_publish_new_is_not_tagged_when_installed_is_newer() -> None:
    """Test that a regression found after publishing blocks the latest tag."""
    installed = {"entries": {"react": {"latest": "19.0.0"}}}
    ctx = _context(_live(days_ago=8), installed=installed)

    with pytest.raises(MonotonicityViolation) as exc_info:
        publish_registry(ctx, TYPINGS, [])

    assert exc_info.value.key_path == "entries.react.latest"
    assert len(_publisher(ctx).published) == 1
    assert _publisher(ctx).tags == []


def test_retag_promotes_stranded_version_without_publishing() -> None:
    ctx = _context(_live(version="0.1.40", highest="0.1.41"), installed=OLDER_INSTALLED)

    result = publish_registry(ctx, TYPINGS, [])

    assert result.decision.action is PublishAction.RETAG_LATEST
    assert _publisher(ctx).published == []
    assert _publisher(ctx).tags == [("types-registry", "0.1.41", "latest")]
    assert isinstance(ctx.time, FakeTime)
    assert ctx.time.sleep_calls == []


def test_retag_blocked_by_unexplained_key() -> None:
    installed = {"entries": {"react": {"latest": "18.0.0"}, "removed-pkg": {"latest": "1.0.0"}}}
    ctx = _context(_live(version="0.1.40", highest="0.1.41"), installed=installed)

    with pytest.raises(SubsetViolation) as exc_info:
        publish_registry(ctx, TYPINGS, [])

    assert exc_info.value.key == "removed-pkg"
    assert _publisher(ctx).tags == []


def test_retag_allows_not_needed_packages() -> None:
    installed = {"entries": {"react": {"latest": "18.0.0"}, "removed-pkg": {"latest": "1.0.0"}}}
    ctx = _context(_live(version="0.1.40", highest="0.1.41"), installed=installed)

    publish_registry(ctx, TYPINGS, [NotNeededPackage("removed-pkg")])

    assert _publisher(ctx).tags == [("types-registry", "0.1.41", "latest")]


def test_skip_unmodified_still_validates_installed_package() -> None:
    ctx = _context(_live(content_hash=CANDIDATE_HASH, days_ago=30), installed=OLDER_INSTALLED)

    result = publish_registry(ctx, TYPINGS, [])

    assert result.decision.action is PublishAction.SKIP
    assert result.decision.skip_reason is SkipReason.UNMODIFIED
    assert _publisher(ctx).published == []
    assert _publisher(ctx).tags == []
    assert isinstance(ctx.installer, FakeArtifactInstaller)
    assert ctx.installer.installs == [("types-registry", "next")]


def test_skip_too_recent() -> None:
    ctx = _context(_live(days_ago=2), installed=OLDER_INSTALLED)

    result = publish_registry(ctx, TYPINGS, [])

    assert result.decision.skip_reason is SkipReason.CHANGED_TOO_RECENTLY
    assert _publisher(ctx).published == []


def test_skip_detects_drift_outside_workflow() -> None:
    installed = {"entries": {"node": {"latest": "21.0.0"}}}
    ctx = _context(_live(content_hash=CANDIDATE_HASH), installed=installed)

    with pytest.raises(MonotonicityViolation):
        publish_registry(ctx, TYPINGS, [])


def test_version_outside_scheme_aborts_before_any_write() -> None:
    ctx = _context(_live(version="1.0.0"), installed=OLDER_INSTALLED)

    with pytest.raises(PreconditionViolation):
        publish_registry(ctx, TYPINGS, [])

    assert OUTPUT / "index.json" not in _files(ctx)
    assert _publisher(ctx).published == []


def test_missing_cache_entry_aborts() -> None:
    ctx = _context(_live(days_ago=8), installed=OLDER_INSTALLED)

    with pytest.raises(PreconditionViolation, match="@types%2fvue"):
        publish_registry(ctx, [*TYPINGS, TypingsPackage("vue")], [])


def test_collaborator_failure_propagates_unchanged() -> None:
    ctx = PublisherContext.for_test(config=CONFIG)

    with pytest.raises(RuntimeError, match="404"):
        publish_registry(ctx, TYPINGS, [])


def test_run_log_is_returned_and_written() -> None:
    ctx = _context(_live(days_ago=8), installed=OLDER_INSTALLED)

    result = publish_registry(ctx, TYPINGS, [])

    lines = result.log.lines()
    assert lines[0] == "=== Publishing types-registry ==="
    assert any("publishing 0.1.41" in line for line in lines)
    written = _files(ctx)[CONFIG.logs_dir / "publish-registry.md"]
    assert written == result.log.render()
    assert written.startswith("# Publishing types-registry\n")


def test_dry_run_flag_is_passed_to_publish() -> None:
    ctx = _context(_live(days_ago=8), installed=OLDER_INSTALLED, dry_run=True)

    publish_registry(ctx, TYPINGS, [])

    assert _publisher(ctx).published[0][2] is True


def test_dry_run_wrapper_suppresses_registry_writes() -> None:
    fake = FakeArtifactPublisher()
    ctx = _context(_live(days_ago=8), installed=OLDER_INSTALLED, dry_run=True)
    ctx = PublisherContext(
        metadata_source=ctx.metadata_source,
        dist_tag_cache=ctx.dist_tag_cache,
        publisher=DryRunArtifactPublisher(fake),
        installer=ctx.installer,
        file_sink=ctx.file_sink,
        time=ctx.time,
        config=ctx.config,
        dry_run=True,
    )

    result = publish_registry(ctx, TYPINGS, [])

    assert result.decision.action is PublishAction.PUBLISH_NEW
    assert fake.published == []
    assert fake.tags == []
    assert OUTPUT / "index.json" in _files(ctx)
