"""Core data models for schemalex."""

from .ast import parse_ast, parse_node
from .entities import ErrorNode, Failure, Key, Message, PredicateApplication, Span

__all__ = [
    "ErrorNode",
    "Failure",
    "Key",
    "Message",
    "PredicateApplication",
    "Span",
    "parse_ast",
    "parse_node",
]
