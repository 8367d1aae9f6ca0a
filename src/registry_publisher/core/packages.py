"""Package inputs read from the output of the parse step."""

import json
from dataclasses import dataclass
from pathlib import Path

TYPES_SCOPE = "types"


@dataclass(frozen=True)
class TypingsPackage:
    """A typings package whose latest version belongs in the registry."""

    name: str

    @property
    def mangled_name(self) -> str:
        """Name as it appears under the @types scope.

        Scoped packages cannot nest scopes, so ``@scope/pkg`` becomes ``scope__pkg``.
        """
        if self.name.startswith("@"):
            return self.name[1:].replace("/", "__")
        return self.name

    @property
    def full_npm_name(self) -> str:
        return f"@{TYPES_SCOPE}/{self.mangled_name}"

    @property
    def full_escaped_npm_name(self) -> str:
        """Cache key used by the dist-tag cache (slash percent-encoded)."""
        return f"@{TYPES_SCOPE}%2f{self.mangled_name}"


@dataclass(frozen=True)
class NotNeededPackage:
    """A package intentionally left out of the registry."""

    name: str


def read_latest_typings(data_dir: Path) -> list[TypingsPackage]:
    """Read one package per typings name from ``definitions.json``.

    The file maps each name to its per-major-version entries; only the name is
    needed here, since the dist-tag cache already covers every version.

    Raises:
        FileNotFoundError: If ``definitions.json`` is missing
        ValueError: If the file is not a JSON object
    """
    path = data_dir / "definitions.json"
    if not path.exists():
        raise FileNotFoundError(f"Package definitions not found at {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    names = [name for name, versions in data.items() if versions]
    return [TypingsPackage(name=name) for name in sorted(names)]


def read_not_needed_packages(data_dir: Path) -> list[NotNeededPackage]:
    """Read the exemption list from ``notNeededPackages.json``.

    Raises:
        FileNotFoundError: If the file is missing
        ValueError: If the file has no ``packages`` object
    """
    path = data_dir / "notNeededPackages.json"
    if not path.exists():
        raise FileNotFoundError(f"Not-needed packages not found at {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    packages = data.get("packages") if isinstance(data, dict) else None
    if not isinstance(packages, dict):
        raise ValueError(f"Missing 'packages' object in {path}")
    return [NotNeededPackage(name=name) for name in sorted(packages)]
