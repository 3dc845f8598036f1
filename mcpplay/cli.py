"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from .scaffold import ScaffoldError, scaffold_command
from .server import McpServer

DEFAULT_PORT = 8080
SCAFFOLD_ABOUT = "Scaffolding command for quickly generating new files in your project"
COMMAND_ABOUT = "Meta scaffolding command for creating new commands"


def basic_command() -> str:
    """Print and return the greeting of the top-level basic command."""
    message = "Running the basic command from the top level"
    print(message)
    return message


def example_fn(arg1: str | None = None, arg2: str | None = None) -> str:
    """Print and return the example message; the arguments are not used."""
    message = "This is an example function"
    print(message)
    return message


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid port: {text!r}") from exc
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range 0-65535: {value}")
    return value


def _nested(prog: str, rest: list[str], commands: dict[str, list[str]]) -> argparse.Namespace | None:
    """Parse trailing words as a nested subcommand, or accept one free argument."""
    parser = argparse.ArgumentParser(prog=f"mcpplay {prog}")
    sub = parser.add_subparsers(dest="subcommand")
    for name, positionals in commands.items():
        command = sub.add_parser(name)
        for positional in positionals:
            command.add_argument(positional, nargs="?", type=_port if positional == "port" else str)
    if not rest or (len(rest) == 1 and rest[0] not in commands and not rest[0].startswith("-")):
        return None
    if rest[0] not in commands:
        parser.error(f"unexpected arguments: {' '.join(rest)}")
    return parser.parse_args(rest)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="mcpplay", description="A simple project to play with mcp servers"
    )
    parser.add_argument("--version", action="version", version="MCP Playground 0.1.0")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("basic", help="Basic command that does things and stuff")
    sub.add_parser("example").add_argument("rest", nargs=argparse.REMAINDER)

    scaffold = sub.add_parser("scaffold", help=SCAFFOLD_ABOUT, description=SCAFFOLD_ABOUT)
    scaffold_sub = scaffold.add_subparsers(dest="subcommand")
    scaffold_sub.add_parser("command", help=COMMAND_ABOUT, description=COMMAND_ABOUT).add_argument(
        "name"
    )
    scaffold.set_defaults(_help=scaffold)

    sub.add_parser("server").add_argument("rest", nargs=argparse.REMAINDER)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the chosen command."""
    args = build_parser().parse_args(argv)

    if args.command == "basic":
        basic_command()
    elif args.command == "example":
        nested = _nested("example", args.rest, {"example": ["arg1", "arg2"], "example-no-args": []})
        if nested is not None and nested.subcommand == "example":
            example_fn(nested.arg1, nested.arg2)
        else:
            example_fn(None, None)
    elif args.command == "scaffold":
        if args.subcommand is None:
            args._help.print_help(sys.stderr)
            return 2
        try:
            scaffold_command(args.name)
        except ScaffoldError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    elif args.command == "server":
        nested = _nested("server", args.rest, {"start": ["port"]})
        if nested is not None:
            asyncio.run(McpServer().start(DEFAULT_PORT if nested.port is None else nested.port))
        else:
            example_fn(None, None)
    return 0


if __name__ == "__main__":
    sys.exit(main())