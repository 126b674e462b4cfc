"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from chunking.exceptions import SplitterException
from cli.commands import handle_config, handle_join, handle_split
from cli.completer import SplitterCompleter
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    SPLIT_SIZE_PROMPT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import ConfigCommand, JoinCommand, SplitCommand
from cli.parser import ParseError, parse_command
from cli.utils import SizeParseError, format_file_size, parse_size


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_logo() -> None:
    """Display splitter logo with ANSI colors."""
    print(LOGO)


def prompt_split_size(
    file_len: int,
    default: Optional[str] = None,
    read_line: Optional[Callable[[str], str]] = None,
) -> int:
    """
    Ask for a split size until a valid one is entered.

    Args:
        file_len: Length of the file being split, shown to the user
        default: Size text used when the answer is empty
        read_line: Called with the prompt text, returns the answer
            (defaults to a prompt_toolkit prompt)

    Returns:
        Split size in bytes (> 0)

    Raises:
        EOFError, KeyboardInterrupt: If the user aborts the prompt
    """
    if read_line is None:
        session: PromptSession = PromptSession(style=STYLE)
        read_line = lambda text: session.prompt([("class:prompt", text)])

    print(f"File length: {file_len} ({format_file_size(file_len)})")
    prompt_text = SPLIT_SIZE_PROMPT if not default else f"Split size [{default}]:  "

    while True:
        answer = read_line(prompt_text)
        if not answer.strip() and default:
            answer = default
        try:
            size = parse_size(answer)
        except SizeParseError as e:
            print(f"{e}. Please try again.", file=sys.stderr)
            continue
        if size == 0:
            print("Split size must be greater than zero. Please try again.", file=sys.stderr)
            continue
        return size


def dispatch_command(cmd_obj) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, SplitCommand):
        return handle_split(cmd_obj)
    elif isinstance(cmd_obj, JoinCommand):
        return handle_join(cmd_obj)
    elif isinstance(cmd_obj, ConfigCommand):
        return handle_config(cmd_obj)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def execute_line(user_input: str) -> str:
    """
    Parse and run one REPL command line.

    Ctrl-D at a nested prompt (e.g. the split size) cancels only this command.

    Raises:
        ParseError, SplitterException: If the command is invalid or fails
    """
    cmd_obj = parse_command(user_input)
    try:
        return dispatch_command(cmd_obj)
    except EOFError:
        return "\nCancelled."


def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=SplitterCompleter(), history=history, style=STYLE
    )

    clear_screen()
    show_logo()
    print(WELCOME_TITLE)
    print(WELCOME_HELP)

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                print("Goodbye!")
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_logo()
                print(WELCOME_TITLE)
                print(WELCOME_HELP)
                continue

            print(execute_line(user_input))

        except (ParseError, SplitterException) as e:
            print(f"Error: {e}")
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
