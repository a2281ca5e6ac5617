"""Locale dictionary exceptions."""

from __future__ import annotations

from schemalex.exceptions.base import SchemalexError


class LocaleError(SchemalexError, ValueError):
    """Raised when a locale dictionary cannot be read or has the wrong shape."""
