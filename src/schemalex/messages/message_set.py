"""Ordered, key-grouped result of one compilation run."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from schemalex.model.entities import Message
from schemalex.types.common import KeyId


class MessageSet(Mapping[KeyId, tuple[str, ...]]):
    """Snapshot mapping each top-level key to its rendered messages.

    Keys keep first-seen order and each key's texts keep encounter order.
    Two failures for the same key are both kept, never overwritten.
    """

    __slots__ = ("_groups", "_messages")

    def __init__(self, groups: Mapping[KeyId, tuple[str, ...]], messages: tuple[Message, ...] = ()) -> None:
        self._groups: dict[KeyId, tuple[str, ...]] = dict(groups)
        self._messages = messages

    @classmethod
    def build(cls, messages: Iterable[Message]) -> MessageSet:
        """Group messages by the first segment of their path."""
        grouped: dict[KeyId, list[str]] = {}
        ordered: list[Message] = []
        for message in messages:
            grouped.setdefault(message.root, []).append(message.text)
            ordered.append(message)
        return cls({key: tuple(texts) for key, texts in grouped.items()}, tuple(ordered))

    @property
    def messages(self) -> tuple[Message, ...]:
        """Every compiled message in traversal order, with full paths."""
        return self._messages

    @property
    def empty(self) -> bool:
        return not self._groups

    def to_dict(self) -> dict[KeyId, list[str]]:
        """Plain ``{key: [text, ...]}`` copy for callers that serialize results."""
        return {key: list(texts) for key, texts in self._groups.items()}

    def __getitem__(self, key: KeyId) -> tuple[str, ...]:
        return self._groups[key]

    def __iter__(self) -> Iterator[KeyId]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"MessageSet({self._groups!r})"
