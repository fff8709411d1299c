#!/usr/bin/env python3
"""CLI for scaffolding new pi-cubed packages."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml  # type: ignore[import-not-found]
from pydantic import ValidationError

from picreate.core import (
    CommandError,
    CreateOptions,
    FetchError,
    ManifestValidationError,
    ManifestValidator,
    ProjectExistsError,
    build_manifest,
    handle,
    merge_option_layers,
    render_manifest,
)
from picreate.core.options import PARSER_KEYS
from picreate.observability import configure_logging

logger = logging.getLogger("picreate.cli")

MIN_POSITIONALS = 1
MAX_POSITIONALS = 1

SCALAR_FLAGS: tuple[str, ...] = (
    "version",
    "license",
    "description",
    "author",
    "homepage",
    "bugs",
    "repository",
)
MAPPING_FLAGS: tuple[tuple[str, str], ...] = (
    ("dependency", "dependencies"),
    ("dev_dependency", "devDependencies"),
    ("script", "scripts"),
    ("engine", "engines"),
)

HANDLED_ERRORS = (
    ProjectExistsError,
    ManifestValidationError,
    CommandError,
    FetchError,
    ValidationError,
    json.JSONDecodeError,
    yaml.YAMLError,
    OSError,
)


class ParseError(ValueError):
    """Raised for invalid command lines when the parser must not exit."""


class CreateArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        if not self.exit_on_error:
            raise ParseError(message)
        super().error(message)


def _key_value(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    return key.strip(), value


def _load_config(path: str | None) -> dict[str, Any]:
    if not path:
        return {}
    config_path = Path(path)
    text = config_path.read_text(encoding="utf-8")
    if config_path.suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if isinstance(data, dict):
        return data
    raise SystemExit("Config file must contain a JSON or YAML object.")


def build_parser(exit_on_error: bool = True) -> argparse.ArgumentParser:
    parser = CreateArgumentParser(
        prog="picreate", description=__doc__, exit_on_error=exit_on_error
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser(
        "create",
        help="Create a new package directory",
        exit_on_error=exit_on_error,
    )
    create.set_defaults(_parser=create)
    create.add_argument(
        "-i",
        "--install",
        action="store_true",
        default=None,
        help="Install dependencies after scaffolding",
    )
    create.add_argument(
        "-d",
        "--dependency",
        action="append",
        type=_key_value,
        metavar="PKG=RANGE",
        help="Extra dependency (repeatable)",
    )
    create.add_argument(
        "-D",
        "--dev-dependency",
        action="append",
        type=_key_value,
        dest="dev_dependency",
        metavar="PKG=RANGE",
        help="Extra dev dependency (repeatable)",
    )
    create.add_argument(
        "-s",
        "--script",
        action="append",
        type=_key_value,
        metavar="NAME=CMD",
        help="Extra package script (repeatable)",
    )
    create.add_argument(
        "-e",
        "--engine",
        action="append",
        type=_key_value,
        metavar="NAME=RANGE",
        help="Engine constraint (repeatable)",
    )
    create.add_argument("--version", help="Initial package version")
    create.add_argument("--license", help="License identifier")
    create.add_argument("--description", help="Package description")
    create.add_argument("--author", help="Author name")
    create.add_argument("--homepage", help="Homepage URL")
    create.add_argument("--bugs", help="Issue tracker URL")
    create.add_argument("--repository", help="Git repository URL")
    create.add_argument(
        "--field",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        help="Custom package.json field (repeatable)",
    )
    create.add_argument(
        "--config",
        help="Path to a JSON or YAML file with option overrides",
    )
    create.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated package.json without creating anything",
    )
    create.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def parse_args(
    argv: Sequence[str] | None = None, *, exit_on_error: bool = True
) -> argparse.Namespace:
    """Parse ``argv``, enforcing exactly one project name for ``create``.

    With ``exit_on_error=False`` every failure raises :class:`ParseError`
    instead of printing usage and exiting.
    """
    parser = build_parser(exit_on_error=exit_on_error)
    try:
        # Non-option arguments come back as extras so they are counted the
        # same way wherever they appear between options.
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as exc:
        raise ParseError(str(exc)) from exc

    unknown = [arg for arg in extras if arg.startswith("-") and arg != "-"]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    args.name = [arg for arg in extras if arg not in unknown]

    if args.command == "create":
        count = len(args.name)
        if count < MIN_POSITIONALS:
            args._parser.error(
                f"Not enough non-option arguments: got {count}, "
                f"need at least {MIN_POSITIONALS}"
            )
        if count > MAX_POSITIONALS:
            args._parser.error(
                f"Too many non-option arguments: got {count}, "
                f"maximum of {MAX_POSITIONALS}"
            )
    return args


def options_from_args(args: argparse.Namespace) -> CreateOptions:
    """Build create options explicitly so no parser state leaks through."""

    flags: dict[str, Any] = {"name": args.name[0]}
    if args.install is not None:
        flags["install"] = args.install
    for attr, key in MAPPING_FLAGS:
        pairs = getattr(args, attr)
        if pairs:
            flags[key] = dict(pairs)
    for key in SCALAR_FLAGS:
        value = getattr(args, key)
        if value is not None:
            flags[key] = value
    reserved = set(CreateOptions.model_fields) | PARSER_KEYS
    for key, value in args.field or []:
        if key in reserved:
            args._parser.error(
                f"--field cannot set '{key}'; use the dedicated option instead"
            )
        flags[key] = value

    return CreateOptions.from_mapping(
        merge_option_layers(_load_config(args.config), flags)
    )


def create_project(args: argparse.Namespace) -> int:
    """Run the create command with CLI parameters."""

    try:
        options = options_from_args(args)
        if args.dry_run:
            manifest = build_manifest(options)
            ManifestValidator().validate(manifest)
            sys.stdout.write(render_manifest(manifest))
            return 0
        result = asyncio.run(handle(options))
    except HANDLED_ERRORS as exc:
        logger.debug("create failed", exc_info=True)
        print(f"[picreate] {exc}", file=sys.stderr)
        return 1

    print(f"[picreate] Created {result['name']} at {result['path']}")
    for generated in result["generated_files"]:
        print("  ·", generated)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=getattr(args, "verbose", False))

    if args.command == "create":
        return create_project(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
