"""Configuration loading for theme-builder (.theme-builder.yml)."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

CONFIG_FILENAME = ".theme-builder.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


class TailwindDialect(str, enum.Enum):
    """Which default input template the Tailwind build is seeded with."""

    V3 = "v3"
    V4 = "v4"


@dataclass
class BuilderConfig:
    """Settings consumed by the build orchestrator."""

    watched_roots: List[str] = field(default_factory=lambda: ["_components"])
    tailwind_input_file: str = "./assets/tailwind.css"
    tailwind_output_file: str = "./assets/tailwind-output.css"
    skip_tailwind: bool = False
    tailwind_dialect: TailwindDialect = TailwindDialect.V4
    stimulus_output_file: str = "./assets/controllers.js"
    poll_interval: float = 0.5

    def merged(self, **overrides: Any) -> "BuilderConfig":
        """Return a copy with every non-None override applied."""
        known = {item.name for item in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)


def load_config(config_path: Path) -> BuilderConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return BuilderConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = BuilderConfig()

    roots = data.get("folders")
    if roots is not None:
        config.watched_roots = _as_str_list(roots, key="folders")
        if not config.watched_roots:
            raise ConfigError("folders must name at least one directory to watch")

    tailwind = _as_dict(data.get("tailwind"), key="tailwind")
    if tailwind:
        config.tailwind_input_file = _as_str(tailwind.get("input"), config.tailwind_input_file, key="tailwind.input")
        config.tailwind_output_file = _as_str(
            tailwind.get("output"), config.tailwind_output_file, key="tailwind.output"
        )
        config.skip_tailwind = _as_bool(tailwind.get("skip"), config.skip_tailwind, key="tailwind.skip")
        dialect = tailwind.get("dialect")
        if dialect is not None:
            config.tailwind_dialect = _as_dialect(dialect)

    stimulus = _as_dict(data.get("stimulus"), key="stimulus")
    if stimulus:
        config.stimulus_output_file = _as_str(
            stimulus.get("output"), config.stimulus_output_file, key="stimulus.output"
        )

    watch = _as_dict(data.get("watch"), key="watch")
    if watch:
        config.poll_interval = _as_float(watch.get("poll_interval"), config.poll_interval, key="watch.poll_interval")
        if config.poll_interval <= 0:
            raise ConfigError("watch.poll_interval must be positive")

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any, *, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping")
    return value


def _as_str(value: Any, default: str, *, key: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value


def _as_bool(value: Any, default: bool, *, key: str) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise ConfigError(f"{key} must be true or false")


def _as_float(value: Any, default: float, *, key: str) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number")
    return float(value)


def _as_str_list(value: Any, *, key: str) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        items: List[str] = []
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise ConfigError(f"{key} entries must be non-empty strings")
            items.append(item)
        return items
    raise ConfigError(f"{key} must be a string or a list of strings")


def _as_dialect(value: Any) -> TailwindDialect:
    normalized = str(value).strip().lower()
    if not normalized.startswith("v"):
        normalized = f"v{normalized}"
    try:
        return TailwindDialect(normalized)
    except ValueError as exc:
        choices = ", ".join(item.value for item in TailwindDialect)
        raise ConfigError(f"tailwind.dialect must be one of: {choices}") from exc


__all__ = [
    "BuilderConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "TailwindDialect",
    "load_config",
]
