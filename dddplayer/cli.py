"""Command line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from dddplayer.browser import open_diagram
from dddplayer.version import build_version_string


def run_open(path: str) -> None:
    """Open a saved dot diagram in the viewer."""
    if not path:
        raise ValueError("please specify a target arch diagram path")
    if not os.path.exists(path):
        raise FileNotFoundError(f"file {path} does not exist")
    with open(path, encoding="utf-8") as fh:
        open_diagram(fh.read())


def run_version() -> None:
    """Print the version banner."""
    print(build_version_string())


def _parser() -> tuple[argparse.ArgumentParser, argparse.ArgumentParser]:
    parser = argparse.ArgumentParser(prog="dddplayer")
    commands = parser.add_subparsers(dest="command", required=True)
    open_parser = commands.add_parser("open", help="open a saved arch diagram")
    open_parser.add_argument(
        "-p", dest="path", default="",
        help="[required] target arch diagram path (e.g. dddplayer/arch.dot)",
    )
    commands.add_parser("version", help="print the version")
    return parser, open_parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    parser, open_parser = _parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "open":
            if not args.path:
                open_parser.print_usage(sys.stderr)
            run_open(args.path)
        else:
            run_version()
    except (OSError, ValueError) as err:
        print(f"\nError: {err}", file=sys.stderr)
        return 1
    return 0