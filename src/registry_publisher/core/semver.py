"""Semantic version parsing and ordering.

Only plain ``major.minor.patch`` identifiers are recognized. Anything else
(prerelease suffixes, ranges, free-form strings) does not parse, and callers
fall back to comparing the raw strings.
"""

import re
from dataclasses import dataclass

_SEMVER_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """Immutable ``major.minor.patch`` version.

    Field order drives the generated comparisons, so ordering is a plain tuple
    comparison of (major, minor, patch).
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            msg = f"Version components must be non-negative: {self.major}.{self.minor}.{self.patch}"
            raise ValueError(msg)

    @staticmethod
    def try_parse(text: str) -> "SemanticVersion | None":
        """Parse ``text`` as a semantic version.

        Returns:
            The parsed version, or None when ``text`` is not exactly three
            dot-separated non-negative integers.
        """
        match = _SEMVER_PATTERN.fullmatch(text)
        if match is None:
            return None
        return SemanticVersion(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    @staticmethod
    def parse(text: str) -> "SemanticVersion":
        """Parse ``text`` or raise ValueError."""
        version = SemanticVersion.try_parse(text)
        if version is None:
            msg = f"Not a semantic version: {text!r}"
            raise ValueError(msg)
        return version

    @property
    def version_string(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump_patch(self) -> "SemanticVersion":
        return SemanticVersion(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        return self.version_string


def compare(a: SemanticVersion, b: SemanticVersion) -> int:
    """Three-way comparison: negative if a < b, zero if equal, positive if a > b."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def greater_than_or_equal(a: SemanticVersion, b: SemanticVersion) -> bool:
    return a >= b


def highest_version(texts: list[str]) -> SemanticVersion | None:
    """Return the highest parseable version among ``texts``, ignoring the rest."""
    parsed = [v for v in (SemanticVersion.try_parse(t) for t in texts) if v is not None]
    if not parsed:
        return None
    return max(parsed)
