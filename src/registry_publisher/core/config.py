"""Publisher configuration data structures and loading.

Provides immutable configuration loaded once at the CLI entry point from an
optional ``registry-publisher.toml``. Every setting has a default, so the
file only needs the values that differ.
"""

import tomllib
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

DEFAULT_CONFIG_FILENAME = "registry-publisher.toml"


@dataclass(frozen=True)
class PublisherConfig:
    """Immutable publisher configuration.

    Loaded once at CLI entry point and stored in PublisherContext.
    """

    package_name: str = "types-registry"
    output_dir: Path = Path("output")
    validate_dir: Path = Path("validate")
    logs_dir: Path = Path("logs")
    cache_path: Path = Path("cache/npmInfo.json")
    data_dir: Path = Path("data")
    cooldown: timedelta = timedelta(days=7)
    propagation_delay_seconds: float = 60
    inspection_tag: str = "next"

    @property
    def registry_output_path(self) -> Path:
        """Directory the generated package is written to."""
        return self.output_dir / self.package_name


_PATH_KEYS = ("output_dir", "validate_dir", "logs_dir", "cache_path", "data_dir")


def load_config(config_path: Path | None) -> PublisherConfig:
    """Load configuration from ``config_path``.

    Args:
        config_path: TOML file to read. None, or a path that does not exist,
            yields the defaults.

    Returns:
        PublisherConfig with file values over defaults. Relative paths resolve
        against the directory containing the file.

    Raises:
        ValueError: If the file contains an unknown key or a value of the wrong type
    """
    if config_path is None or not config_path.exists():
        return PublisherConfig()

    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    base_dir = config_path.parent
    values: dict[str, object] = {}

    for key, raw in data.items():
        if key in _PATH_KEYS:
            if not isinstance(raw, str):
                raise ValueError(f"'{key}' must be a string path in {config_path}")
            path = Path(raw).expanduser()
            values[key] = path if path.is_absolute() else base_dir / path
        elif key in ("package_name", "inspection_tag"):
            if not isinstance(raw, str) or not raw:
                raise ValueError(f"'{key}' must be a non-empty string in {config_path}")
            values[key] = raw
        elif key == "cooldown_days":
            values["cooldown"] = timedelta(days=_non_negative_number(key, raw, config_path))
        elif key == "propagation_delay_seconds":
            values[key] = _non_negative_number(key, raw, config_path)
        else:
            raise ValueError(f"Unknown key '{key}' in {config_path}")

    return PublisherConfig(**values)


def _non_negative_number(key: str, raw: object, config_path: Path) -> float:
    if isinstance(raw, bool) or not isinstance(raw, int | float) or raw < 0:
        raise ValueError(f"'{key}' must be a non-negative number in {config_path}")
    return float(raw)
