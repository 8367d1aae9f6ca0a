"""Tagged document model for JSON values that take part in comparisons.

Decoded JSON is converted into one of four variants up front so the
monotonicity check can dispatch on the variant instead of inspecting raw
Python types at every key.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonNumber:
    value: int | float


@dataclass(frozen=True)
class JsonBoolean:
    value: bool


@dataclass(frozen=True)
class JsonObject:
    fields: Mapping[str, "JsonValue"]


JsonValue = JsonString | JsonNumber | JsonBoolean | JsonObject


def to_document(raw: object, *, path: str = "") -> JsonValue:
    """Convert a decoded JSON value into the tagged model.

    Raises:
        TypeError: If ``raw`` (or anything nested in it) is null, an array, or
            any other shape the model does not cover.
    """
    # bool is a subclass of int, so it has to be checked first
    if isinstance(raw, bool):
        return JsonBoolean(raw)
    if isinstance(raw, str):
        return JsonString(raw)
    if isinstance(raw, int | float):
        return JsonNumber(raw)
    if isinstance(raw, dict):
        return JsonObject(
            {
                str(key): to_document(value, path=_join(path, str(key)))
                for key, value in raw.items()
            }
        )
    location = path or "<root>"
    msg = f"Unsupported JSON value at {location}: {type(raw).__name__}"
    raise TypeError(msg)


def parse_document(text: str) -> JsonValue:
    return to_document(json.loads(text))


def from_document(value: JsonValue) -> object:
    """Convert back into plain Python values."""
    match value:
        case JsonObject(fields=fields):
            return {key: from_document(child) for key, child in fields.items()}
        case JsonString(value=v) | JsonNumber(value=v) | JsonBoolean(value=v):
            return v


def describe(value: JsonValue) -> str:
    match value:
        case JsonString():
            return "string"
        case JsonNumber():
            return "number"
        case JsonBoolean():
            return "boolean"
        case JsonObject():
            return "object"


def _join(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key
