"""Command-line entry point: a greeting and a line echo."""

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

GREETING = "Hello World"
PROMPT = "Please enter your line of text and hit <enter>:\n> "
ECHO_PREFIX = "Your text was: "


def _greet(out: TextIO) -> None:
    out.write(GREETING)
    out.flush()


def _echo(source: TextIO, out: TextIO) -> None:
    out.write(PROMPT)
    out.flush()
    line = source.readline()
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    out.write(ECHO_PREFIX + line)
    out.flush()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classicalgos",
        description="Print a greeting or echo back a line of text.",
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("hello", help=f"print {GREETING!r} (the default)")
    commands.add_parser("echo", help="read one line from standard input and echo it")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv``; greet when none is given."""
    args = _parser().parse_args(argv)
    if args.command == "echo":
        _echo(sys.stdin, sys.stdout)
    else:
        _greet(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())