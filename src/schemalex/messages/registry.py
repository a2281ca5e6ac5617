"""Central predicate registry for message compilation.

Maps predicate names to the shape of their comparator arguments. Adding a
predicate means adding one entry here; the compiler and interpolator never
branch on predicate names.
"""

from __future__ import annotations

from dataclasses import dataclass

from schemalex.constants.templates import GENERIC_PARAM


@dataclass(frozen=True)
class PredicateSpec:
    """Declared comparator parameters and template-selection flags of one predicate."""

    params: tuple[str, ...] = ()
    value_sensitive: bool = False
    exposes_name: bool = False


_NO_ARGS = PredicateSpec()
_NUM = PredicateSpec(params=("num",))
_LEFT = PredicateSpec(params=("left",))
_LIST = PredicateSpec(params=("list",))
_VALUE = PredicateSpec(params=("value",))

PREDICATE_REGISTRY: dict[str, PredicateSpec] = {
    "array?": _NO_ARGS,
    "attr?": PredicateSpec(exposes_name=True),
    "bool?": _NO_ARGS,
    "bytesize?": PredicateSpec(params=("size",)),
    "date?": _NO_ARGS,
    "date_time?": _NO_ARGS,
    "decimal?": _NO_ARGS,
    "empty?": _NO_ARGS,
    "eql?": _LEFT,
    "even?": _NO_ARGS,
    "excluded_from?": _LIST,
    "excludes?": _VALUE,
    "false?": _NO_ARGS,
    "filled?": _NO_ARGS,
    "float?": _NO_ARGS,
    "format?": PredicateSpec(params=("regex",)),
    "gt?": _NUM,
    "gteq?": _NUM,
    "hash?": _NO_ARGS,
    "included_in?": _LIST,
    "includes?": _VALUE,
    "int?": _NO_ARGS,
    "is_eql?": _LEFT,
    "key?": PredicateSpec(exposes_name=True),
    "lt?": _NUM,
    "lteq?": _NUM,
    "max_bytesize?": _NUM,
    "max_size?": PredicateSpec(params=("num",), value_sensitive=True),
    "min_bytesize?": _NUM,
    "min_size?": PredicateSpec(params=("num",), value_sensitive=True),
    "nil?": _NO_ARGS,
    "not_eql?": _LEFT,
    "number?": _NO_ARGS,
    "odd?": _NO_ARGS,
    "size?": PredicateSpec(params=("size",), value_sensitive=True),
    "str?": _NO_ARGS,
    "time?": _NO_ARGS,
    "true?": _NO_ARGS,
    "type?": PredicateSpec(params=("type",)),
    "uri?": _NO_ARGS,
    "uuid_v4?": _NO_ARGS,
}

GENERIC_SPEC: PredicateSpec = PredicateSpec(params=(GENERIC_PARAM,))


def predicate_spec(name: str) -> PredicateSpec:
    """Return the registered spec for ``name``, or the generic one for unknown predicates."""
    return PREDICATE_REGISTRY.get(name, GENERIC_SPEC)


def param_name(spec: PredicateSpec, index: int) -> str:
    """Declared name of the comparator at ``index``; extra positions get ``arg<index>``."""
    if index < len(spec.params):
        return spec.params[index]
    return f"{GENERIC_PARAM}{index}"
