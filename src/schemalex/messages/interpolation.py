"""Argument normalization and ``%{token}`` substitution.

Locale authors name the same comparator differently (``%{num}``,
``%{size}``, ``%{left}``, ``%{num_left}``...). Every comparator is therefore
published under its declared parameter name and under a fixed alias table,
so any of those spellings resolves from the same predicate.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sized
from typing import Any

from schemalex.constants.locales import ARG_VARIANT_DEFAULT, ARG_VARIANT_RANGE
from schemalex.constants.templates import (
    FALSE_LITERAL,
    LIST_SEPARATOR,
    NAME_TOKEN,
    NONE_LITERAL,
    PLACEHOLDER_PATTERN,
    PRIMARY_ALIASES,
    RANGE_LEFT_ALIASES,
    RANGE_RIGHT_ALIASES,
    RANGE_SEPARATOR,
    TRUE_LITERAL,
    VALUE_TYPE_ARRAY,
    VALUE_TYPE_HASH,
    VALUE_TYPE_STRING,
)
from schemalex.messages.registry import PredicateSpec, param_name
from schemalex.model.entities import PredicateApplication, Span
from schemalex.types.common import ArgVariant, TokenMap, ValueType

logger = logging.getLogger(__name__)


def is_range(arg: Any) -> bool:
    """True for ``Span`` bounds and non-empty step-1 ``range`` objects."""
    if isinstance(arg, Span):
        return True
    return isinstance(arg, range) and arg.step == 1 and len(arg) > 0


def range_bounds(arg: Span | range) -> tuple[Any, Any]:
    """Inclusive ``(low, high)`` of a range argument; ``range(3, 5)`` gives ``(3, 4)``."""
    if isinstance(arg, Span):
        return arg.low, arg.high
    return arg.start, arg[-1]


def argument_variant(args: tuple[Any, ...]) -> ArgVariant:
    """Template variant selected by the shape of the first comparator."""
    if args and is_range(args[0]):
        return ARG_VARIANT_RANGE
    return ARG_VARIANT_DEFAULT


def value_type(value: Any) -> ValueType | None:
    """Coarse runtime shape of the validated value, used to pick size vs length wording."""
    if isinstance(value, (str, bytes)):
        return VALUE_TYPE_STRING
    if isinstance(value, Mapping):
        return VALUE_TYPE_HASH
    if isinstance(value, Sized) and isinstance(value, Iterable):
        return VALUE_TYPE_ARRAY
    return None


def render_value(value: Any) -> str:
    """Render a comparator the way it should read inside a message."""
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if value is None:
        return NONE_LITERAL
    if isinstance(value, str):
        return value
    if isinstance(value, type):
        return value.__name__
    if isinstance(value, re.Pattern):
        return str(value.pattern)
    if is_range(value):
        low, high = range_bounds(value)
        return f"{render_value(low)}{RANGE_SEPARATOR}{render_value(high)}"
    if isinstance(value, (set, frozenset)):
        return LIST_SEPARATOR.join(sorted(render_value(item) for item in value))
    if isinstance(value, (list, tuple, range)):
        return LIST_SEPARATOR.join(render_value(item) for item in value)
    return str(value)


def build_tokens(
    predicate: PredicateApplication,
    spec: PredicateSpec,
    *,
    name: str | None = None,
) -> TokenMap:
    """Build the placeholder dictionary for one predicate failure.

    Aliases are filled first and declared parameter names last, so a
    declared name always wins over an alias spelled the same way.
    """
    tokens: TokenMap = {}
    if predicate.args:
        primary = predicate.args[0]
        rendered = render_value(primary)
        for alias in PRIMARY_ALIASES:
            tokens[alias] = rendered
        if is_range(primary):
            low, high = (render_value(bound) for bound in range_bounds(primary))
            for alias in RANGE_LEFT_ALIASES:
                tokens[alias] = low
            for alias in RANGE_RIGHT_ALIASES:
                tokens[alias] = high

    for index, arg in enumerate(predicate.args):
        param = param_name(spec, index)
        tokens[param] = render_value(arg)
        if is_range(arg):
            low, high = range_bounds(arg)
            tokens[f"{param}_left"] = render_value(low)
            tokens[f"{param}_right"] = render_value(high)

    if spec.exposes_name and name is not None:
        tokens[NAME_TOKEN] = name
    return tokens


def interpolate(template: str, tokens: Mapping[str, str]) -> str:
    """Replace ``%{token}`` occurrences. Unknown tokens are left verbatim."""
    missing: list[str] = []

    def _substitute(match: re.Match[str]) -> str:
        token = match.group(1)
        if token in tokens:
            return tokens[token]
        missing.append(token)
        return match.group(0)

    text = PLACEHOLDER_PATTERN.sub(_substitute, template)
    if missing:
        logger.debug("Unresolved placeholders %s in template %r", sorted(set(missing)), template)
    return text
