"""Configuration loading for helpdoc (.helpdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".helpdoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class RenderConfig:
    """Default rendering options applied when the caller omits them."""

    dialect: Optional[str] = None
    heading_level: Optional[int] = None
    fill_missing: bool = False


@dataclass
class ParsingConfig:
    """Comment-block parsing settings."""

    comment_marker: str = "#"


@dataclass
class TypesConfig:
    """Type documentation lookup settings."""

    base_uri: Optional[str] = None
    aliases: Dict[str, str] = field(default_factory=dict)


@dataclass
class HelpDocConfig:
    """Represents the settings defined in .helpdoc.yml."""

    root: Path
    render: RenderConfig = field(default_factory=RenderConfig)
    parsing: ParsingConfig = field(default_factory=ParsingConfig)
    types: TypesConfig = field(default_factory=TypesConfig)


def load_config(config_path: Path) -> HelpDocConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return HelpDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    render_data = _as_dict(data.get("render"))
    render = RenderConfig()
    if render_data:
        render.dialect = _as_str(render_data.get("dialect"))
        render.heading_level = _as_int(render_data.get("heading_level"))
        render.fill_missing = _as_bool(render_data.get("fill_missing")) or False

    parsing_data = _as_dict(data.get("parsing"))
    parsing = ParsingConfig()
    if parsing_data:
        marker = _as_str(parsing_data.get("comment_marker"))
        if marker:
            parsing.comment_marker = marker

    types_data = _as_dict(data.get("types"))
    types = TypesConfig()
    if types_data:
        types.base_uri = _as_str(types_data.get("base_uri"))
        types.aliases = _as_str_mapping(types_data.get("aliases"))

    return HelpDocConfig(root=root, render=render, parsing=parsing, types=types)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


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


def _as_str_mapping(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {
        str(key): str(item)
        for key, item in value.items()
        if isinstance(item, (str, int, float)) and not isinstance(item, bool)
    }


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "HelpDocConfig",
    "ParsingConfig",
    "RenderConfig",
    "TypesConfig",
    "load_config",
]
