"""Root of the schemalex exception hierarchy."""

from __future__ import annotations


class SchemalexError(Exception):
    """Base class for every error raised by schemalex."""
