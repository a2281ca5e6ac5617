"""Layered, locale-aware template store.

Built once from one or more locale dictionaries (deep-merged, later ones
winning) and read-only afterwards, so a single store can be shared by any
number of concurrent compilations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from schemalex.constants.locales import (
    ARG_BRANCH,
    ARG_VARIANT_DEFAULT,
    DEFAULT_LOCALE,
    DEFAULT_NAMESPACE,
    ERRORS_BRANCH,
    RULES_BRANCH,
    VALUE_BRANCH,
    VALUE_TYPE_BRANCH,
)
from schemalex.exceptions import LocaleError
from schemalex.locales import bundled_locale_paths, expand_locale_paths, load_locale_file
from schemalex.types.common import ArgVariant, KeyId, LocaleTree, ValueType
from schemalex.utils.naming import humanize_predicate

logger = logging.getLogger(__name__)

type LookupPath = tuple[str, ...]


def candidate_paths(
    rule: str | None,
    predicate: str,
    arg_variant: ArgVariant = ARG_VARIANT_DEFAULT,
    value_type: ValueType | None = None,
) -> tuple[LookupPath, ...]:
    """Template lookup paths below a locale's ``errors`` branch, most specific first."""
    paths: list[LookupPath] = []
    if rule is not None:
        paths.append((RULES_BRANCH, rule, predicate, ARG_BRANCH, arg_variant))
        paths.append((RULES_BRANCH, rule, predicate))
        paths.append((predicate, VALUE_BRANCH, rule))
    if value_type is not None:
        paths.append((predicate, VALUE_TYPE_BRANCH, value_type, ARG_BRANCH, arg_variant))
        paths.append((predicate, VALUE_TYPE_BRANCH, value_type))
    paths.append((predicate, ARG_BRANCH, arg_variant))
    paths.append((predicate,))
    return tuple(paths)


class TemplateStore:
    """Read-only ``locale -> {errors, rules}`` template namespace."""

    def __init__(
        self,
        data: Mapping[Any, Any] | None = None,
        *,
        namespace: str = DEFAULT_NAMESPACE,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        merged = deep_merge({}, data) if data else {}
        self._data: Mapping[str, Any] = MappingProxyType(merged)
        self._namespace = namespace
        self._default_locale = default_locale

    @classmethod
    def build(
        cls,
        load_paths: Iterable[Path] = (),
        *,
        namespace: str = DEFAULT_NAMESPACE,
        default_locale: str = DEFAULT_LOCALE,
        include_bundled: bool = True,
    ) -> TemplateStore:
        """Load the bundled dictionaries, then every ``load_paths`` entry in order.

        Directories contribute their ``*.yaml``/``*.yml`` files sorted by name.
        """
        paths: list[Path] = list(bundled_locale_paths()) if include_bundled else []
        paths.extend(expand_locale_paths(load_paths))

        data: LocaleTree = {}
        for path in paths:
            data = deep_merge(data, load_locale_file(path))
        store = cls(data, namespace=namespace, default_locale=default_locale)
        logger.debug(
            "Built template store from %d file(s), locales: %s",
            len(paths),
            ", ".join(store.locales) or "<none>",
        )
        return store

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        """Locales with a subtree under this store's namespace, in load order."""
        return tuple(
            locale
            for locale, tree in self._data.items()
            if isinstance(tree, Mapping) and isinstance(tree.get(self._namespace), Mapping)
        )

    def merge(self, other: Mapping[Any, Any] | Path | TemplateStore) -> TemplateStore:
        """Return a new store with ``other`` deep-merged on top. ``self`` is unchanged."""
        if isinstance(other, TemplateStore):
            incoming: Mapping[Any, Any] = other._data
        elif isinstance(other, Path):
            incoming = {}
            for path in expand_locale_paths((other,)):
                incoming = deep_merge(dict(incoming), load_locale_file(path))
        elif isinstance(other, Mapping):
            incoming = other
        else:
            raise LocaleError(f"cannot merge {type(other).__name__} into a template store")
        return TemplateStore(
            deep_merge(dict(self._data), incoming),
            namespace=self._namespace,
            default_locale=self._default_locale,
        )

    def locale_chain(self, locale: str) -> tuple[str, ...]:
        """Locales tried for ``locale``: itself, then the default locale."""
        locale = str(locale)
        if locale == self._default_locale:
            return (locale,)
        return (locale, self._default_locale)

    def resolve(
        self,
        locale: str,
        rule: str | None,
        predicate: str,
        arg_variant: ArgVariant = ARG_VARIANT_DEFAULT,
        value_type: ValueType | None = None,
    ) -> str | None:
        """Most specific template for a failure, or ``None`` when no locale has one."""
        paths = candidate_paths(rule, predicate, arg_variant, value_type)
        for index, current in enumerate(self.locale_chain(locale)):
            errors = self._branch(current, ERRORS_BRANCH)
            if errors is None:
                continue
            for path in paths:
                template = _lookup(errors, path)
                if template is not None:
                    if index > 0:
                        logger.debug(
                            "Template for %s in locale %r resolved from fallback locale %r",
                            predicate,
                            str(locale),
                            current,
                        )
                    return template
        return None

    def template(
        self,
        locale: str,
        rule: str | None,
        predicate: str,
        arg_variant: ArgVariant = ARG_VARIANT_DEFAULT,
        value_type: ValueType | None = None,
    ) -> str:
        """Like ``resolve`` but degrades to the humanized predicate name instead of ``None``."""
        template = self.resolve(locale, rule, predicate, arg_variant, value_type)
        if template is not None:
            return template
        logger.warning(
            "No template for predicate %r in locale %r or %r; using its name",
            predicate,
            str(locale),
            self._default_locale,
        )
        return humanize_predicate(predicate)

    def resolve_rule_name(self, locale: str, key: KeyId) -> str:
        """Display name of ``key`` from the ``rules`` branch, falling back to the key itself."""
        name = str(key)
        for current in self.locale_chain(locale):
            rules = self._branch(current, RULES_BRANCH)
            if rules is None:
                continue
            display = rules.get(name)
            if isinstance(display, str):
                return display
        return name

    def _branch(self, locale: str, branch: str) -> Mapping[str, Any] | None:
        tree = self._data.get(locale)
        if not isinstance(tree, Mapping):
            return None
        scoped = tree.get(self._namespace)
        if not isinstance(scoped, Mapping):
            return None
        node = scoped.get(branch)
        return node if isinstance(node, Mapping) else None


def _lookup(root: Mapping[str, Any], path: LookupPath) -> str | None:
    """Walk ``path`` below ``root``; only string leaves count as hits."""
    node: Any = root
    for segment in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(segment)
        if node is None:
            return None
    return node if isinstance(node, str) else None


def deep_merge(base: dict[str, Any], incoming: Mapping[Any, Any]) -> dict[str, Any]:
    """Recursively merge ``incoming`` over ``base`` into a new dict with string keys.

    Nested mappings merge; any other value replaces what was there. Neither
    argument is modified.
    """
    merged: dict[str, Any] = {str(key): value for key, value in base.items()}
    for raw_key, value in incoming.items():
        key = str(raw_key)
        existing = merged.get(key)
        if isinstance(value, Mapping):
            seed = existing if isinstance(existing, Mapping) else {}
            merged[key] = deep_merge(dict(seed), value)
        else:
            merged[key] = value
    return merged
