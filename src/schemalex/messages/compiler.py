"""Message compiler: walks an error AST and renders localized messages.

Each leaf resolves a template through the store, interpolates the
predicate's arguments, and is grouped by its top-level key. A malformed
node only loses its own message; its siblings still compile.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from schemalex.config import Configuration, Settings
from schemalex.constants.templates import FULL_MESSAGE_SEPARATOR
from schemalex.exceptions import MalformedNodeError
from schemalex.messages.interpolation import argument_variant, build_tokens, interpolate, value_type
from schemalex.messages.message_set import MessageSet
from schemalex.messages.registry import predicate_spec
from schemalex.messages.store import TemplateStore
from schemalex.model import Failure, Key, Message, PredicateApplication, parse_node
from schemalex.types.common import KeyId, KeyPath

logger = logging.getLogger(__name__)


class MessageCompiler:
    """Compile error ASTs against a shared, read-only template store."""

    def __init__(self, store: TemplateStore, config: Configuration | None = None) -> None:
        self._store = store
        self._config = config or Configuration()

    @classmethod
    def from_settings(cls, settings: Settings) -> MessageCompiler:
        """Build the store described by ``settings`` and a compiler using its defaults."""
        store = TemplateStore.build(
            settings.load_paths,
            namespace=settings.namespace,
            default_locale=settings.default_locale,
        )
        return cls(store, settings.configuration)

    @property
    def store(self) -> TemplateStore:
        return self._store

    @property
    def config(self) -> Configuration:
        return self._config

    def with_options(self, **changes: Any) -> MessageCompiler:
        """Return a compiler sharing this store with an overridden configuration."""
        return MessageCompiler(self._store, self._config.with_options(**changes))

    def __call__(self, ast: Iterable[Any], config: Configuration | None = None) -> MessageSet:
        return self.compile(ast, config)

    def compile(self, ast: Iterable[Any], config: Configuration | None = None) -> MessageSet:
        """Compile a top-level node sequence into a MessageSet grouped by first path segment."""
        if isinstance(ast, (str, bytes, Mapping)) or not isinstance(ast, Iterable):
            raise MalformedNodeError(f"error AST must be a sequence of nodes, got {type(ast).__name__}")

        config = config or self._config
        messages: list[Message] = []
        for index, node in enumerate(ast):
            try:
                message = self.visit_message(node, config)
            except MalformedNodeError as exc:
                logger.warning("Skipping malformed error node #%d: %s", index, exc)
                continue
            if message.root is None:
                logger.warning("Skipping error node #%d: top-level nodes must carry a key", index)
                continue
            messages.append(message)
        return MessageSet.build(messages)

    def visit(self, node: Any, config: Configuration | None = None) -> str:
        """Render a single node to its message text."""
        return self.visit_message(node, config).text

    def visit_message(self, node: Any, config: Configuration | None = None) -> Message:
        """Render a single node, keeping its key path. Raises MalformedNodeError."""
        return self._walk(node, (), None, config or self._config)

    def _walk(
        self,
        node: Any,
        path: KeyPath,
        parent: Failure | Key | None,
        config: Configuration,
    ) -> Message:
        node = parse_node(node)
        if isinstance(node, (Failure, Key)):
            # A failure and a key naming the same attribute denote one location.
            same_location = parent is not None and type(parent) is not type(node) and parent.key == node.key
            next_path = path if same_location else (*path, node.key)
            return self._walk(node.child, next_path, node, config)
        return self._compile_leaf(node, path, config)

    def _compile_leaf(self, predicate: PredicateApplication, path: KeyPath, config: Configuration) -> Message:
        spec = predicate_spec(predicate.name)
        rule = _rule_name(path)
        template = self._store.template(
            config.locale,
            rule,
            predicate.name,
            argument_variant(predicate.args),
            value_type(predicate.value) if spec.value_sensitive else None,
        )

        display_key: KeyId | None = rule if rule is not None else (path[-1] if path else None)
        display = self._store.resolve_rule_name(config.locale, display_key) if display_key is not None else None

        text = interpolate(template, build_tokens(predicate, spec, name=display))
        if config.full and display:
            text = f"{display}{FULL_MESSAGE_SEPARATOR}{text}"
        return Message(path=path, text=text, predicate=predicate.name)


def _rule_name(path: KeyPath) -> str | None:
    """Innermost named key of ``path``; array indexes are skipped."""
    for segment in reversed(path):
        if isinstance(segment, str):
            return segment
    return None
