"""Loader for YAML locale dictionaries.

Each file holds a mapping rooted at locale identifiers; the namespace and
``errors``/``rules`` branches below it are interpreted by the template store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from schemalex.constants.locales import BUNDLED_LOCALE_FILES, BUNDLED_LOCALES_DIR, LOCALE_FILE_SUFFIXES
from schemalex.exceptions import LocaleError

logger = logging.getLogger(__name__)


def bundled_locale_paths() -> tuple[Path, ...]:
    """Return the dictionaries shipped with the package, in load order."""
    return tuple(BUNDLED_LOCALES_DIR / name for name in BUNDLED_LOCALE_FILES)


def load_locale_file(path: Path) -> dict[str, Any]:
    """Load and parse a single locale file with safe_load only."""
    if path.suffix not in LOCALE_FILE_SUFFIXES:
        raise LocaleError(f"Locale file {path} must have a .yaml or .yml extension")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise LocaleError(f"Failed to read locale file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise LocaleError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        logger.debug("Locale file %s is empty", path)
        return {}
    if not isinstance(raw, dict):
        raise LocaleError(f"Locale file {path} must contain a mapping")

    logger.debug("Loaded locale file %s (%d locale(s))", path, len(raw))
    return raw


def expand_locale_paths(paths: Iterable[Path]) -> tuple[Path, ...]:
    """Expand directories into their sorted ``*.yaml``/``*.yml`` files.

    Missing paths raise LocaleError so a typo in ``load_paths`` is reported
    instead of silently producing fallback messages.
    """
    expanded: list[Path] = []
    for path in paths:
        if path.is_dir():
            expanded.extend(
                sorted(child for child in path.iterdir() if child.is_file() and child.suffix in LOCALE_FILE_SUFFIXES)
            )
        elif path.exists():
            expanded.append(path)
        else:
            raise LocaleError(f"Locale path does not exist: {path}")
    return tuple(expanded)
