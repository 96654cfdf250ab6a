"""CLI entrypoints for reflectdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, ReflectDocConfig, load_config
from .logging import configure_logging
from .project import (
    ReflectionLoadError,
    build_document,
    document_project,
    dump_document,
    load_reflection,
    write_document,
)
from .resolvers import ResolutionError


def _add_verbosity_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default: object = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log resolver decisions for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    _add_verbosity_options(parser, suppress_default=True)
    parser.add_argument(
        "input",
        help="Path to the TypeDoc JSON export.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to .reflectdoc.yml (defaults to the one beside the input file).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reflectdoc",
        description="Normalize TypeDoc reflection output into class documentation records.",
    )
    _add_verbosity_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Resolve every class and write the documentation JSON.",
    )
    _add_common_arguments(build_parser)
    build_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Where to write the document (defaults to stdout).",
    )

    classes_parser = subparsers.add_parser(
        "classes",
        help="List the classes that would be documented.",
    )
    _add_common_arguments(classes_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for reflectdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    input_path = Path(args.input)
    try:
        config = _load_config(args.config, input_path)
        root = load_reflection(input_path)
        records = document_project(root, config.classes)
    except FileNotFoundError as exc:
        parser.exit(1, f"Reflection file not found: {exc.filename or input_path}\n")
    except (ConfigError, ReflectionLoadError) as exc:
        parser.exit(1, f"{exc}\n")
    except ResolutionError as exc:
        parser.exit(1, f"reflectdoc {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    if args.command == "build":
        document = build_document(records)
        if args.output:
            output_path = Path(args.output)
            write_document(output_path, document, config.output)
            print(f"Documentation written to {_relativize(output_path)}")
        else:
            sys.stdout.write(dump_document(document, config.output))
    elif args.command == "classes":
        for record in records:
            print(record.name)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _load_config(config_arg: str | None, input_path: Path) -> ReflectDocConfig:
    if config_arg is not None:
        return load_config(Path(config_arg))
    return load_config(input_path.expanduser().resolve().parent)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
