"""Locale dictionary loading and the bundled default dictionaries."""

from .loader import bundled_locale_paths, expand_locale_paths, load_locale_file

__all__ = ["bundled_locale_paths", "expand_locale_paths", "load_locale_file"]
