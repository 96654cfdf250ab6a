"""Configuration loading for reflectdoc (.reflectdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".reflectdoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """How the JSON document is written."""

    indent: Optional[int] = 2
    sort_keys: bool = False


@dataclass
class ClassFilterConfig:
    """Which resolved classes end up in the document."""

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    skip_private: bool = False
    skip_non_exported: bool = False


@dataclass
class ReflectDocConfig:
    """Represents the settings defined in .reflectdoc.yml."""

    root: Path
    output: OutputConfig = field(default_factory=OutputConfig)
    classes: ClassFilterConfig = field(default_factory=ClassFilterConfig)


def load_config(config_path: Path) -> ReflectDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReflectDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        if "indent" in output_data:
            indent = output_data.get("indent")
            if indent is not None and _as_int(indent) is None:
                raise ConfigError("output.indent must be an integer or null")
            output.indent = _as_int(indent)
        output.sort_keys = _as_bool(output_data.get("sort_keys")) or False

    classes = ClassFilterConfig()
    classes_data = _as_dict(data.get("classes"))
    if classes_data:
        classes.include = _as_str_list(classes_data.get("include"))
        classes.exclude = _as_str_list(classes_data.get("exclude"))
        classes.skip_private = _as_bool(classes_data.get("skip_private")) or False
        classes.skip_non_exported = _as_bool(classes_data.get("skip_non_exported")) or False

    return ReflectDocConfig(root=root, output=output, classes=classes)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ClassFilterConfig",
    "ConfigError",
    "OutputConfig",
    "ReflectDocConfig",
    "load_config",
]
