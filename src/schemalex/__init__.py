"""schemalex: compile schema validation error trees into localized messages."""

from __future__ import annotations

from schemalex.config import Configuration, Settings, load_config
from schemalex.exceptions import ConfigError, LocaleError, MalformedNodeError, SchemalexError
from schemalex.messages import MessageCompiler, MessageSet, TemplateStore
from schemalex.model import Failure, Key, Message, PredicateApplication, Span

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Configuration",
    "Failure",
    "Key",
    "LocaleError",
    "MalformedNodeError",
    "Message",
    "MessageCompiler",
    "MessageSet",
    "PredicateApplication",
    "SchemalexError",
    "Settings",
    "Span",
    "TemplateStore",
    "__version__",
    "load_config",
]
