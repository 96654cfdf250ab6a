"""Tests for reflectdoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from reflectdoc.config import (
    ClassFilterConfig,
    ConfigError,
    OutputConfig,
    ReflectDocConfig,
    load_config,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ReflectDocConfig)
    assert config.root == tmp_path.resolve()
    assert config.output == OutputConfig()
    assert config.output.indent == 2
    assert config.classes == ClassFilterConfig()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".reflectdoc.yml"
    config_file.write_text(
        """
output:
  indent: 4
  sort_keys: true
classes:
  include: ["Client*", Guild]
  exclude:
    - "*Manager"
  skip_private: yes
  skip_non_exported: true
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.output.indent == 4
    assert config.output.sort_keys is True
    assert config.classes.include == ["Client*", "Guild"]
    assert config.classes.exclude == ["*Manager"]
    assert config.classes.skip_private is True
    assert config.classes.skip_non_exported is True


def test_load_config_allows_compact_output(tmp_path: Path) -> None:
    (tmp_path / ".reflectdoc.yml").write_text("output:\n  indent: null\n", encoding="utf-8")

    assert load_config(tmp_path).output.indent is None


def test_load_config_treats_blank_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".reflectdoc.yml").write_text("\n\n", encoding="utf-8")

    assert load_config(tmp_path).classes.include == []


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".reflectdoc.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".reflectdoc.yml").write_text("output: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_non_integer_indent(tmp_path: Path) -> None:
    (tmp_path / ".reflectdoc.yml").write_text("output:\n  indent: wide\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
