"""Immutable error AST nodes and compiled message records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from schemalex.types.common import KeyId, KeyPath


@dataclass(frozen=True)
class Span:
    """Inclusive ``low..high`` comparator bound for range-aware predicates."""

    low: Any
    high: Any


@dataclass(frozen=True)
class PredicateApplication:
    """A failed predicate together with its comparator arguments and the validated value."""

    name: str
    args: tuple[Any, ...] = ()
    value: Any = None

    @classmethod
    def of(cls, name: str, *args_and_value: Any) -> PredicateApplication:
        """Build from a flat argument list where the validated value comes last.

        ``PredicateApplication.of("gt?", 18, 12)`` has ``args == (18,)`` and
        ``value == 12``.
        """
        if not args_and_value:
            return cls(name=name)
        *args, value = args_and_value
        return cls(name=name, args=tuple(args), value=value)

    @property
    def arity(self) -> int:
        return len(self.args)


@dataclass(frozen=True)
class Failure:
    """A failing rule for ``key`` wrapping a nested node or a predicate."""

    key: KeyId
    child: ErrorNode


@dataclass(frozen=True)
class Key:
    """Path annotation for failures nested under a named attribute or index."""

    key: KeyId
    child: ErrorNode


type ErrorNode = Failure | Key | PredicateApplication


@dataclass(frozen=True)
class Message:
    """Compiled leaf result: the key path it belongs to and its rendered text."""

    path: KeyPath
    text: str
    predicate: str = ""

    @property
    def root(self) -> KeyId | None:
        """Top-level key used to group this message, or ``None`` for a pathless message."""
        return self.path[0] if self.path else None

    def __str__(self) -> str:
        return self.text
