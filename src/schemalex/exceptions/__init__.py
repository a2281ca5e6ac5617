"""Shared exception hierarchy for schemalex."""

from __future__ import annotations

from .base import SchemalexError
from .config import ConfigError
from .locale import LocaleError
from .parsing import MalformedNodeError

__all__ = [
    "ConfigError",
    "LocaleError",
    "MalformedNodeError",
    "SchemalexError",
]
