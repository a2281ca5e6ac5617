"""Shared type aliases for schemalex."""

from .common import ArgVariant, KeyId, KeyPath, LocaleTree, TokenMap, ValueType

__all__ = [
    "ArgVariant",
    "KeyId",
    "KeyPath",
    "LocaleTree",
    "TokenMap",
    "ValueType",
]
