"""Placeholder syntax and argument alias tables used during interpolation."""

from __future__ import annotations

import re

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"%\{(\w+)\}")

LIST_SEPARATOR: str = ", "
RANGE_SEPARATOR: str = " - "
FULL_MESSAGE_SEPARATOR: str = " "

# Filled by the first comparator argument, whatever its declared name.
PRIMARY_ALIASES: tuple[str, ...] = ("num", "size", "arg")

# Range bounds are published under every naming convention seen in locale files.
RANGE_LEFT_ALIASES: tuple[str, ...] = ("num", "left", "num_left", "size_left", "arg_left")
RANGE_RIGHT_ALIASES: tuple[str, ...] = ("right", "num_right", "size_right", "arg_right")

NAME_TOKEN: str = "name"
GENERIC_PARAM: str = "arg"

TRUE_LITERAL: str = "true"
FALSE_LITERAL: str = "false"
NONE_LITERAL: str = "nil"

VALUE_TYPE_STRING: str = "string"
VALUE_TYPE_ARRAY: str = "array"
VALUE_TYPE_HASH: str = "hash"

MALFORMED_NODE_PREVIEW_CHARS: int = 80
