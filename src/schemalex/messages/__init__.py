"""Template resolution, interpolation and message compilation."""

from .compiler import MessageCompiler
from .message_set import MessageSet
from .registry import PREDICATE_REGISTRY, PredicateSpec, predicate_spec
from .store import TemplateStore

__all__ = [
    "PREDICATE_REGISTRY",
    "MessageCompiler",
    "MessageSet",
    "PredicateSpec",
    "TemplateStore",
    "predicate_spec",
]
