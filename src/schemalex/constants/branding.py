"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "schemalex compiles schema validation error trees into localized, human-readable messages.\n"
    "\n"
    "Example:\n"
    "  schemalex compile -a errors.json -l pl --full\n"
)
