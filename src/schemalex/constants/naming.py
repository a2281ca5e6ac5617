"""Patterns used when humanizing identifiers."""

from __future__ import annotations

import re

PREDICATE_SUFFIX: str = "?"
WORD_SEPARATOR_PATTERN: re.Pattern[str] = re.compile(r"[_\s]+")
