"""Tests for the configuration model and settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from schemalex.config import Configuration, Settings, load_config
from schemalex.exceptions import ConfigError


def test_configuration_defaults() -> None:
    config = Configuration()

    assert config.locale == "en"
    assert config.full is False


def test_with_options_returns_new_value() -> None:
    original = Configuration()

    changed = original.with_options(locale="pl", full=True)

    assert changed == Configuration(locale="pl", full=True)
    assert original == Configuration()


def test_with_options_normalizes_locale() -> None:
    assert Configuration().with_options(locale=" pl ").locale == "pl"


@pytest.mark.parametrize(
    ("changes", "expected_match"),
    [
        ({"colour": True}, "unknown configuration options"),
        ({"full": "yes"}, "full must be a boolean"),
        ({"locale": ""}, "locale must be a non-empty"),
        ({"locale": None}, "locale must be a non-empty"),
    ],
    ids=["unknown", "non_bool_full", "empty_locale", "none_locale"],
)
def test_with_options_rejects_invalid_changes(changes: dict[str, object], expected_match: str) -> None:
    with pytest.raises(ConfigError, match=expected_match):
        Configuration().with_options(**changes)


def test_configuration_is_frozen() -> None:
    with pytest.raises(AttributeError):
        Configuration().locale = "pl"  # type: ignore[misc]


def test_settings_expose_default_configuration() -> None:
    settings = Settings(locale="pl", full=True)

    assert settings.configuration == Configuration(locale="pl", full=True)


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path) == Settings()


def test_load_config_reads_all_keys(tmp_path: Path) -> None:
    (tmp_path / "locales").mkdir()
    (tmp_path / "schemalex.yaml").write_text(
        "locale: pl\n"
        "full: true\n"
        "default_locale: en\n"
        "namespace: my_app\n"
        "load_paths:\n"
        "  - locales\n",
        encoding="utf-8",
    )

    settings = load_config(tmp_path)

    assert settings.locale == "pl"
    assert settings.full is True
    assert settings.namespace == "my_app"
    assert settings.load_paths == ((tmp_path / "locales").resolve(),)


def test_load_config_resolves_load_paths_against_config_dir(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    config_path = config_dir / "custom.yaml"
    config_path.write_text("load_paths: [pl.yaml, /abs/de.yaml]\n", encoding="utf-8")

    settings = load_config(tmp_path, config_path)

    assert settings.load_paths == ((config_dir / "pl.yaml").resolve(), Path("/abs/de.yaml").resolve())


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "schemalex.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == Settings()


def test_load_config_explicit_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("locale: [pl\n", "Invalid YAML"),
        ("- locale\n", "must be a YAML mapping"),
        ("colour: red\n", "Unknown config keys"),
        ("full: maybe\n", "full must be a boolean"),
        ("locale: ''\n", "locale"),
        ("namespace: 3\n", "namespace"),
        ("load_paths: locales\n", "load_paths"),
    ],
    ids=["invalid_yaml", "non_mapping", "unknown_key", "non_bool_full", "empty_locale", "int_namespace", "str_paths"],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "schemalex.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)
