"""Configuration-related exceptions."""

from __future__ import annotations

from schemalex.exceptions.base import SchemalexError


class ConfigError(SchemalexError, ValueError):
    """Raised when compiler settings are invalid."""
