"""Interface for ``python -m dict_kit``."""

from __future__ import annotations

import json
import logging
from argparse import ArgumentParser
from typing import TYPE_CHECKING, Any

from ._version import version
from .config import load_config_file
from .paths import flatten_paths, get_path


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="dict_kit", description="Read values from YAML, JSON or TOML config files.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--debug", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command")

    get_parser = commands.add_parser("get", help="print the value at a dot path")
    _ = get_parser.add_argument("file")
    _ = get_parser.add_argument("path")
    _ = get_parser.add_argument("--default", default=None, help="value printed when the path is missing")

    flatten_parser = commands.add_parser("flatten", help="print every leaf as a dot path")
    _ = flatten_parser.add_argument("file")
    return parser


def _emit(value: Any) -> None:
    print(json.dumps(value, indent=2, default=str))  # noqa: T201


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = _build_parser()
    options = parser.parse_args(args)
    if options.debug:
        logging.basicConfig(level=logging.DEBUG)

    if options.command == "get":
        _emit(get_path(load_config_file(options.file), options.path, options.default))
    elif options.command == "flatten":
        _emit(flatten_paths(load_config_file(options.file)))


if __name__ == "__main__":
    main()
