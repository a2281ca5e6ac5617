"""Configuration defaults, filenames and allowed keys."""

from __future__ import annotations

from schemalex.constants.locales import DEFAULT_LOCALE, DEFAULT_NAMESPACE

CONFIG_FILENAME: str = "schemalex.yaml"

DEFAULT_FULL: bool = False
DEFAULT_SETTINGS_LOCALE: str = DEFAULT_LOCALE
DEFAULT_SETTINGS_NAMESPACE: str = DEFAULT_NAMESPACE

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "locale",
        "full",
        "default_locale",
        "namespace",
        "load_paths",
    }
)
