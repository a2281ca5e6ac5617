"""CLI entrypoint for schemalex."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from schemalex import __version__
from schemalex.config import Settings, load_config
from schemalex.constants.branding import CLI_DESCRIPTION
from schemalex.exceptions import ConfigError, LocaleError, MalformedNodeError, SchemalexError
from schemalex.locales import expand_locale_paths, load_locale_file
from schemalex.messages import MessageCompiler


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="schemalex",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_cmd = subparsers.add_parser("compile", help="Compile an error AST (JSON) into messages")
    compile_cmd.add_argument("-a", "--ast", type=Path, required=True, help="JSON file holding the error AST")
    compile_cmd.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding schemalex.yaml")
    compile_cmd.add_argument("-c", "--config", type=Path, help="Explicit config file")
    compile_cmd.add_argument("-l", "--locale", default=None, help="Locale to render messages in")
    compile_cmd.add_argument(
        "--full",
        action="store_true",
        default=None,
        help="Prefix every message with the translated key name",
    )
    compile_cmd.add_argument(
        "-L",
        "--load-path",
        type=Path,
        action="append",
        default=[],
        help="Extra locale file or directory merged after configured load paths (repeatable)",
    )
    compile_cmd.add_argument("-v", "--verbose", action="store_true", help="Show template resolution diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate settings and locale files")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding schemalex.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "compile":
        parser.error(f"Unsupported command: {args.command}")

    try:
        settings = _settings_from_args(args)
        compiler = MessageCompiler.from_settings(settings)
        ast = _load_ast(args.ast)
        result = compiler.compile(ast)
    except (ConfigError, LocaleError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except MalformedNodeError as exc:
        print(f"Invalid error AST: {exc}", file=sys.stderr)
        return 2
    except SchemalexError as exc:
        print(f"Compilation error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps({str(key): texts for key, texts in result.to_dict().items()}, ensure_ascii=False, indent=2))
    return 0


def _settings_from_args(args: argparse.Namespace) -> Settings:
    """Load settings and apply command-line overrides on top."""
    settings = load_config(args.root, args.config)
    overrides: dict[str, Any] = {}
    if args.locale is not None:
        overrides["locale"] = args.locale
    if args.full is not None:
        overrides["full"] = args.full
    if args.load_path:
        overrides["load_paths"] = (*settings.load_paths, *(path.resolve() for path in args.load_path))
    return replace(settings, **overrides)


def _load_ast(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read AST file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise MalformedNodeError(f"AST file {path} is not valid JSON: {exc}") from exc


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Load settings and every locale file they reference, then report."""
    try:
        settings = load_config(args.root, args.config)
        for path in expand_locale_paths(settings.load_paths):
            load_locale_file(path)
    except (ConfigError, LocaleError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
