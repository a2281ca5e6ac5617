"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Literal

type KeyId = Hashable
type KeyPath = tuple[KeyId, ...]
type ArgVariant = Literal["default", "range"]
type ValueType = Literal["string", "array", "hash"]
type TokenMap = dict[str, str]

type LocaleTree = dict[str, Any]
