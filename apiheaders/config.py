"""Configuration loading for apiheaders (.apiheaders.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .routes import DOT_PLACEHOLDER

CONFIG_FILENAME = ".apiheaders.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class Settings:
    """Layout of the documentation tree and the routing scheme applied to it."""

    project_root: Path
    source_root: str = "content"
    api_dir: str = "api"
    route_root: str = "docs"
    index_name: str = "index"
    placeholder: str = DOT_PLACEHOLDER

    @property
    def api_base(self) -> Path:
        return self.project_root / self.source_root / self.api_dir


def load_settings(project_root: Path | str) -> Settings:
    """Load settings for ``project_root``, falling back to defaults."""
    root = Path(project_root).expanduser().resolve()
    config_file = root / CONFIG_FILENAME

    if not config_file.exists():
        return Settings(project_root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    settings = Settings(project_root=root)
    for key in ("source_root", "api_dir", "route_root", "index_name", "placeholder"):
        value = _as_str(data.get(key))
        if value is not None:
            setattr(settings, key, value.strip("/") if key != "placeholder" else value)

    if not settings.placeholder or "." in settings.placeholder:
        raise ConfigError("placeholder must be a non-empty string without dots")
    return settings


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


__all__ = ["CONFIG_FILENAME", "ConfigError", "Settings", "load_settings"]
