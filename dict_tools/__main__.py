"""Interface for ``python -m dict_tools``."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from ._version import version
from .deep_path import DEFAULT_SEPARATOR, deep_fetch
from .errors import IndexOutOfBoundsError, KeyNotFoundError, NotIndexableError
from .serialization import dumps


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="dict_tools")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    subcommands = parser.add_subparsers(dest="command")

    fetch = subcommands.add_parser("fetch", help="print values at paths inside a JSON document")
    _ = fetch.add_argument("paths", nargs="+", metavar="PATH")
    _ = fetch.add_argument("-f", "--file", type=Path, help="JSON document (default: stdin)")
    _ = fetch.add_argument("-s", "--separator", default=DEFAULT_SEPARATOR)
    _ = fetch.add_argument("-d", "--default", help="JSON value printed for paths that are not found")
    return parser


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = _build_parser()
    options = parser.parse_args(args)
    if options.command != "fetch":
        parser.print_help()
        return 0

    if options.file is None:
        document = json.load(sys.stdin)
    else:
        with options.file.open(encoding="utf-8") as handle:
            document = json.load(handle)

    default_factory = None if options.default is None else partial(json.loads, options.default)

    for path in options.paths:
        try:
            value = deep_fetch(document, path, options.separator, default_factory)
        except (KeyNotFoundError, IndexOutOfBoundsError, NotIndexableError) as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            return 1
        print(dumps(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
