"""Command parser for REPL input."""

import shlex

from cli.constants import CONFIG_KEYS
from cli.models import CommandRequest, ConfigCommand, JoinCommand, SplitCommand


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Split/Join/Config)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "split":
        return _parse_split(tokens[1:])
    elif command_name == "join":
        return _parse_join(tokens[1:])
    elif command_name == "config":
        return _parse_config(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_split(args: list[str]) -> SplitCommand:
    """Parse 'split <file> [size]' command.

    The size may be given as several tokens, e.g. 'split big.iso 700 MB'.
    """
    if not args:
        raise ParseError("split requires a file: split <file> [size]")

    size = " ".join(args[1:]) or None
    return SplitCommand(path=args[0], size=size)


def _parse_join(args: list[str]) -> JoinCommand:
    """Parse 'join <path> [path ...]' command."""
    if not args:
        raise ParseError("join requires at least one chunk file or a split directory")

    return JoinCommand(paths=tuple(args))


def _parse_config(args: list[str]) -> ConfigCommand:
    """Parse 'config [key [value]]' command."""
    if not args:
        return ConfigCommand()

    key = args[0]
    if key not in CONFIG_KEYS:
        raise ParseError(f"Unknown config key: {key} (expected one of: {', '.join(CONFIG_KEYS)})")

    value = " ".join(args[1:]) or None
    return ConfigCommand(key=key, value=value)
