"""Settings loading and normalization from ``schemalex.yaml``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from schemalex.config.model import Settings
from schemalex.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_FULL,
    DEFAULT_SETTINGS_LOCALE,
    DEFAULT_SETTINGS_NAMESPACE,
)
from schemalex.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> Settings:
    """Load and validate settings from ``schemalex.yaml`` or an explicit path.

    Relative ``load_paths`` are resolved against the directory holding the
    config file.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, root)
        return Settings()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(str(key) for key in unknown)}")

    full = raw.get("full", DEFAULT_FULL)
    if not isinstance(full, bool):
        raise ConfigError("full must be a boolean")

    load_paths = tuple(
        _resolve_load_path(entry, path.parent)
        for entry in _ensure_string_list(raw.get("load_paths", []), "load_paths")
        if entry.strip()
    )

    return Settings(
        locale=_ensure_identifier(raw.get("locale", DEFAULT_SETTINGS_LOCALE), "locale"),
        full=full,
        default_locale=_ensure_identifier(raw.get("default_locale", DEFAULT_SETTINGS_LOCALE), "default_locale"),
        namespace=_ensure_identifier(raw.get("namespace", DEFAULT_SETTINGS_NAMESPACE), "namespace"),
        load_paths=load_paths,
    )


def _ensure_identifier(value: Any, key_name: str) -> str:
    """Require a non-empty string, raising ConfigError naming the key otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _resolve_load_path(entry: str, base_dir: Path) -> Path:
    candidate = Path(entry.strip()).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    return candidate.resolve()
