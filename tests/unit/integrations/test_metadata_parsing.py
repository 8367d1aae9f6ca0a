"""Tests for decoding `npm view --json` output."""

from datetime import UTC, datetime

import pytest

from registry_publisher.core.errors import PreconditionViolation
from registry_publisher.core.semver import SemanticVersion
from registry_publisher.integrations.metadata_source.parsing import (
    parse_npm_view_output,
    parse_timestamp,
)

NPM_VIEW = {
    "name": "types-registry",
    "dist-tags": {"latest": "0.1.40", "next": "0.1.41"},
    "versions": ["0.1.9", "0.1.10", "0.1.40", "0.1.41", "0.2.0-beta"],
    "time": {"modified": "2024-06-01T10:00:00.000Z", "created": "2017-01-01T00:00:00.000Z"},
    "typesPublisherContentHash": "abc123",
}


def test_parse_full_output() -> None:
    metadata = parse_npm_view_output("types-registry", NPM_VIEW)

    assert metadata.version == SemanticVersion(0, 1, 40)
    assert metadata.highest_semver_version == SemanticVersion(0, 1, 41)
    assert metadata.content_hash == "abc123"
    assert metadata.last_modified == datetime(2024, 6, 1, 10, 0, tzinfo=UTC)


def test_single_version_as_string() -> None:
    data = {**NPM_VIEW, "versions": "0.1.40"}

    metadata = parse_npm_view_output("types-registry", data)

    assert metadata.highest_semver_version == SemanticVersion(0, 1, 40)


def test_missing_content_hash_is_none() -> None:
    data = {key: value for key, value in NPM_VIEW.items() if key != "typesPublisherContentHash"}

    assert parse_npm_view_output("types-registry", data).content_hash is None


def test_non_semver_latest_is_fatal() -> None:
    data = {**NPM_VIEW, "dist-tags": {"latest": "0.1.40-rc.1"}}

    with pytest.raises(PreconditionViolation, match="not a semantic version"):
        parse_npm_view_output("types-registry", data)


def test_missing_latest_tag_is_fatal() -> None:
    with pytest.raises(PreconditionViolation, match="no 'latest' dist-tag"):
        parse_npm_view_output("types-registry", {**NPM_VIEW, "dist-tags": {}})


def test_missing_modified_time_is_fatal() -> None:
    with pytest.raises(PreconditionViolation, match="modification time"):
        parse_npm_view_output("types-registry", {**NPM_VIEW, "time": {}})


def test_naive_timestamp_is_utc() -> None:
    assert parse_timestamp("2024-06-01T10:00:00") == datetime(2024, 6, 1, 10, tzinfo=UTC)
