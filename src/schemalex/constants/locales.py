"""Locale namespace layout and bundled dictionary locations."""

from __future__ import annotations

from pathlib import Path

DEFAULT_LOCALE: str = "en"
DEFAULT_NAMESPACE: str = "schemalex"

ERRORS_BRANCH: str = "errors"
RULES_BRANCH: str = "rules"
ARG_BRANCH: str = "arg"
VALUE_BRANCH: str = "value"
VALUE_TYPE_BRANCH: str = "value_type"

ARG_VARIANT_DEFAULT: str = "default"
ARG_VARIANT_RANGE: str = "range"

LOCALE_FILE_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})

BUNDLED_LOCALES_DIR: Path = Path(__file__).resolve().parent.parent / "locales"
BUNDLED_LOCALE_FILES: tuple[str, ...] = ("en.yaml",)
