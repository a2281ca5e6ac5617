"""String helpers for predicate and rule identifiers."""

from __future__ import annotations

from schemalex.constants.naming import PREDICATE_SUFFIX, WORD_SEPARATOR_PATTERN


def humanize_predicate(name: str) -> str:
    """Turn a predicate identifier into readable text: ``uuid_v4?`` becomes ``uuid v4``."""
    stripped = name.strip().removesuffix(PREDICATE_SUFFIX)
    words = WORD_SEPARATOR_PATTERN.sub(" ", stripped).strip()
    return words or name
