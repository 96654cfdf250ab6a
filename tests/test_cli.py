"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from reflectdoc.cli import _build_parser, main
from tests._fixtures.reflection_builder import ReflectionBuilder


def _write_project(tmp_path: Path, builder: ReflectionBuilder, *classes: dict) -> Path:
    path = tmp_path / "typedoc.json"
    payload = builder.node("lib", "Project", children=list(classes))
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "build", "docs.json"])
    assert args.verbose is True
    assert args.command == "build"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["classes", "docs.json", "--verbose"])
    assert args.verbose is True
    assert args.quiet is False
    assert args.command == "classes"


def test_cli_build_accepts_output_and_config() -> None:
    parser = _build_parser()
    args = parser.parse_args(["build", "docs.json", "-o", "out.json", "-c", "cfg.yml"])
    assert args.output == "out.json"
    assert args.config == "cfg.yml"


def test_cli_build_writes_document(tmp_path: Path, builder: ReflectionBuilder, capsys) -> None:
    source = _write_project(tmp_path, builder, builder.klass("Client", builder.prop("token")))
    output = tmp_path / "dist" / "classes.json"

    main(["build", str(source), "--output", str(output), "--quiet"])

    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["meta"]["generator"] == "reflectdoc"
    assert [entry["name"] for entry in document["classes"]] == ["Client"]
    assert "Documentation written to" in capsys.readouterr().out


def test_cli_build_prints_to_stdout(tmp_path: Path, builder: ReflectionBuilder, capsys) -> None:
    source = _write_project(tmp_path, builder, builder.klass("Client"))

    main(["build", str(source), "-q"])

    document = json.loads(capsys.readouterr().out)
    assert document["classes"] == [{"name": "Client"}]


def test_cli_classes_honours_config(tmp_path: Path, builder: ReflectionBuilder, capsys) -> None:
    source = _write_project(
        tmp_path,
        builder,
        builder.klass("Client"),
        builder.klass("UserManager"),
    )
    (tmp_path / ".reflectdoc.yml").write_text(
        "classes:\n  exclude: ['*Manager']\n", encoding="utf-8"
    )

    main(["classes", str(source), "-q"])

    assert capsys.readouterr().out.splitlines() == ["Client"]


def test_cli_reports_missing_input(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(tmp_path / "missing.json"), "-q"])

    assert excinfo.value.code == 1
    assert "Reflection file not found" in capsys.readouterr().err


def test_cli_reports_invalid_input(tmp_path: Path, capsys) -> None:
    source = tmp_path / "typedoc.json"
    source.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["classes", str(source), "-q"])

    assert excinfo.value.code == 1
    assert "JSON object" in capsys.readouterr().err
