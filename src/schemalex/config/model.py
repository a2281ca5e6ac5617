"""Config data model for message compilation."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from schemalex.constants.config import (
    DEFAULT_FULL,
    DEFAULT_SETTINGS_LOCALE,
    DEFAULT_SETTINGS_NAMESPACE,
)
from schemalex.exceptions import ConfigError


@dataclass(frozen=True)
class Configuration:
    """Per-call compilation options.

    ``full`` prefixes each leaf message with the translated rule name.
    """

    locale: str = DEFAULT_SETTINGS_LOCALE
    full: bool = DEFAULT_FULL

    def with_options(self, **changes: Any) -> Configuration:
        """Return a copy with ``changes`` applied. The receiver is left untouched."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ConfigError(f"unknown configuration options: {sorted(unknown)}")
        if "locale" in changes:
            changes["locale"] = _coerce_locale(changes["locale"])
        if "full" in changes and not isinstance(changes["full"], bool):
            raise ConfigError("full must be a boolean")
        return replace(self, **changes)


@dataclass(frozen=True)
class Settings:
    """Resolved settings: how to build the template store plus the default configuration."""

    locale: str = DEFAULT_SETTINGS_LOCALE
    full: bool = DEFAULT_FULL
    default_locale: str = DEFAULT_SETTINGS_LOCALE
    namespace: str = DEFAULT_SETTINGS_NAMESPACE
    load_paths: tuple[Path, ...] = ()

    @property
    def configuration(self) -> Configuration:
        """Default per-call configuration derived from these settings."""
        return Configuration(locale=self.locale, full=self.full)


def _coerce_locale(value: Any) -> str:
    """Accept any non-empty locale identifier and normalize it to ``str``."""
    locale = str(value).strip() if value is not None else ""
    if not locale:
        raise ConfigError("locale must be a non-empty identifier")
    return locale
