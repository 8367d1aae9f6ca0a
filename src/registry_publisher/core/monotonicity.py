"""Check that a newer document never regresses below an older one."""

import logging

from registry_publisher.core.document import (
    JsonBoolean,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    describe,
    from_document,
)
from registry_publisher.core.errors import MonotonicityViolation
from registry_publisher.core.semver import SemanticVersion

logger = logging.getLogger(__name__)


def assert_json_newer(newer: JsonObject, older: JsonObject, parent: str = "") -> None:
    """Require every field of ``older`` to be present and non-decreasing in ``newer``.

    Comparison is keyed by ``older``; keys only present in ``newer`` are ignored.

    Ordering per variant:
    - strings: semantic version order when both sides parse, otherwise lexical
    - numbers: numeric
    - booleans: must be equal
    - objects: recurse

    Raises:
        MonotonicityViolation: On the first missing key, changed variant, or
            regressed value, naming the full key path and both values.
    """
    for key, older_value in older.fields.items():
        key_path = f"{parent}.{key}" if parent else key
        if key not in newer.fields:
            raise MonotonicityViolation(
                key_path,
                None,
                from_document(older_value),
                f"{key} in {parent or '<root>'} was not found in newer",
            )
        _assert_value_newer(newer.fields[key], older_value, key_path)


def _assert_value_newer(newer: JsonValue, older: JsonValue, key_path: str) -> None:
    match older, newer:
        case JsonString(value=old), JsonString(value=new):
            newer_version = SemanticVersion.try_parse(new)
            older_version = SemanticVersion.try_parse(old)
            if newer_version is not None and older_version is not None:
                ok = newer_version >= older_version
            else:
                ok = new >= old
            if not ok:
                raise MonotonicityViolation(
                    key_path, new, old, f"newer ({new}) < older ({old})"
                )
        case JsonNumber(value=old), JsonNumber(value=new):
            if not new >= old:
                raise MonotonicityViolation(
                    key_path, new, old, f"newer ({new}) < older ({old})"
                )
        case JsonBoolean(value=old), JsonBoolean(value=new):
            if new != old:
                raise MonotonicityViolation(
                    key_path, new, old, f"newer ({new}) !== older ({old})"
                )
        case JsonObject(), JsonObject():
            logger.debug("Descending into %s", key_path)
            assert_json_newer(newer, older, key_path)
        case _:
            raise MonotonicityViolation(
                key_path,
                from_document(newer),
                from_document(older),
                f"type changed from {describe(older)} to {describe(newer)}",
            )
