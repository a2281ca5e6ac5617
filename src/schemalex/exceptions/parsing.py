"""Error AST parsing exceptions."""

from __future__ import annotations

from schemalex.exceptions.base import SchemalexError


class MalformedNodeError(SchemalexError, ValueError):
    """Raised when an error AST node has an unknown tag or is missing a field."""
