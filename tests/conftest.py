"""Shared pytest fixtures for message compilation tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from schemalex.messages import MessageCompiler, TemplateStore

OVERRIDE_MESSAGES: dict[str, Any] = {
    "en": {
        "schemalex": {
            "errors": {
                "key?": {
                    "arg": {"default": "+%{name}+ key is missing in the hash"},
                    "value": {"gender": "Please provide your gender"},
                },
                "rules": {
                    "address": {"filled?": "Please provide your address"},
                },
            },
        },
    },
    "pl": {
        "schemalex": {
            "rules": {"email": "adres email"},
            "errors": {"email?": "nie jest poprawny"},
        },
    },
}


@pytest.fixture(scope="session")
def bundled_store() -> TemplateStore:
    """Store built from the bundled dictionaries only."""
    return TemplateStore.build()


@pytest.fixture(scope="session")
def store(bundled_store: TemplateStore) -> TemplateStore:
    """Bundled dictionaries with key, rule and Polish overrides merged on top."""
    return bundled_store.merge(OVERRIDE_MESSAGES)


@pytest.fixture
def compiler(store: TemplateStore) -> MessageCompiler:
    return MessageCompiler(store)


@pytest.fixture
def write_locale(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Return a helper that dumps a locale mapping to ``tmp_path/<name>``."""

    def _write(name: str, payload: dict[str, Any]) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(payload, allow_unicode=True, sort_keys=False), encoding="utf-8")
        return path

    return _write
