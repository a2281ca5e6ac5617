"""Decode the nested-list error AST wire form into node objects.

The wire form mirrors what a rule engine emits and survives a JSON round
trip::

    ["failure", ["age", ["predicate", ["gt?", [18], 12]]]]
    ["key", ["address", ["failure", ["city", ["predicate", ["filled?", [], ""]]]]]]

Comparator ranges are written ``{"span": [low, high]}``. Nodes that are
already built are checked with the same rules as decoded ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schemalex.constants.ast import FAILURE_TAG, KEY_TAG, PREDICATE_TAG, SPAN_MARKER
from schemalex.constants.templates import MALFORMED_NODE_PREVIEW_CHARS
from schemalex.exceptions import MalformedNodeError
from schemalex.model.entities import ErrorNode, Failure, Key, PredicateApplication, Span

_NODE_TYPES: tuple[type, ...] = (Failure, Key, PredicateApplication)


def parse_ast(data: Any) -> tuple[ErrorNode, ...]:
    """Decode a whole top-level sequence. Raises on the first malformed node."""
    if not isinstance(data, (list, tuple)):
        raise MalformedNodeError(f"error AST must be a list of nodes, got {type(data).__name__}")
    return tuple(parse_node(item) for item in data)


def parse_node(data: Any) -> ErrorNode:
    """Decode a single node and its descendants."""
    if isinstance(data, _NODE_TYPES):
        _check_built(data)
        return data
    if not isinstance(data, (list, tuple)) or len(data) != 2:
        raise MalformedNodeError(f"expected a [tag, body] pair, got {_preview(data)}")

    tag, body = data
    if tag in (FAILURE_TAG, KEY_TAG):
        if not isinstance(body, (list, tuple)) or len(body) != 2:
            raise MalformedNodeError(f"'{tag}' node needs a [key, child] body, got {_preview(body)}")
        key, child = body
        _check_key(key, tag)
        node_cls = Failure if tag == FAILURE_TAG else Key
        return node_cls(key=key, child=parse_node(child))
    if tag == PREDICATE_TAG:
        return _parse_predicate(body)
    raise MalformedNodeError(f"unknown node tag {tag!r}")


def _parse_predicate(body: Any) -> PredicateApplication:
    if not isinstance(body, (list, tuple)) or len(body) != 3:
        raise MalformedNodeError(f"'predicate' node needs a [name, args, value] body, got {_preview(body)}")
    name, args, value = body
    _check_predicate(name, args, (list, tuple))
    return PredicateApplication(name=name, args=tuple(_decode_arg(arg) for arg in args), value=value)


def _decode_arg(arg: Any) -> Any:
    if isinstance(arg, Mapping) and set(arg) == {SPAN_MARKER}:
        bounds = arg[SPAN_MARKER]
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
            raise MalformedNodeError(f"span needs [low, high] bounds, got {_preview(bounds)}")
        return Span(low=bounds[0], high=bounds[1])
    return arg


def _check_built(node: ErrorNode) -> None:
    """Apply the wire-form rules to a node the caller constructed directly."""
    if isinstance(node, PredicateApplication):
        _check_predicate(node.name, node.args, tuple)
        return
    tag = FAILURE_TAG if isinstance(node, Failure) else KEY_TAG
    _check_key(node.key, tag)
    if node.child is None:
        raise MalformedNodeError(f"'{tag}' node {node.key!r} has no child")
    parse_node(node.child)


def _check_predicate(name: Any, args: Any, args_types: type | tuple[type, ...]) -> None:
    if not isinstance(name, str) or not name:
        raise MalformedNodeError(f"predicate name must be a non-empty string, got {name!r}")
    if not isinstance(args, args_types):
        raise MalformedNodeError(f"predicate '{name}' args must be a list, got {type(args).__name__}")


def _check_key(key: Any, tag: str) -> None:
    if key is None or isinstance(key, bool):
        raise MalformedNodeError(f"'{tag}' node key must be a string or index, got {key!r}")
    try:
        hash(key)
    except TypeError as exc:
        raise MalformedNodeError(f"'{tag}' node key must be a string or index, got {_preview(key)}") from exc


def _preview(data: Any) -> str:
    """Short repr used in error messages so huge payloads stay readable."""
    text = repr(data)
    if len(text) > MALFORMED_NODE_PREVIEW_CHARS:
        return text[: MALFORMED_NODE_PREVIEW_CHARS - 3] + "..."
    return text
