"""Fatal conditions that stop a registry publish run.

Collaborator I/O failures are not wrapped here: they surface as the
RuntimeError raised by the integration layer and propagate unchanged.
"""


class RegistryPublishError(Exception):
    """Base class for conditions that must abort a publish run."""


class PreconditionViolation(RegistryPublishError):
    """External state the automation cannot safely reason about.

    Raised when the live package leaves the fixed 0.1.x version scheme or when
    a required dist-tag entry is missing from the cache.
    """


class MonotonicityViolation(RegistryPublishError):
    """A field in the newer document regressed below the older document."""

    def __init__(self, key_path: str, newer: object, older: object, detail: str) -> None:
        self.key_path = key_path
        self.newer = newer
        self.older = older
        super().__init__(f"{key_path}: {detail}")


class SubsetViolation(RegistryPublishError):
    """The live registry contains a key the candidate cannot explain."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Actual registry has unexpected key {key!r}")
