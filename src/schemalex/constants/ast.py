"""Tags of the nested-list error AST wire form."""

from __future__ import annotations

FAILURE_TAG: str = "failure"
KEY_TAG: str = "key"
PREDICATE_TAG: str = "predicate"

SPAN_MARKER: str = "span"
