"""CLI entry point."""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from chunking.exceptions import NotFoundError, SplitterException
from cli.commands import get_config, handle_join, handle_split
from cli.models import JoinCommand, SplitCommand
from common.logging_config import setup_logging


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splitter",
        description=(
            "Split a file into chunks, or join chunks back together. "
            "One file is split, one directory or several files are joined. "
            "Without paths an interactive prompt is started."
        ),
    )
    parser.add_argument("paths", nargs="*", help="file to split, or chunk files / split directory to join")
    parser.add_argument("-s", "--size", help="split size, e.g. 4096, 10MB, 64KiB (asked if omitted)")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def run(paths: list[str], size: Optional[str] = None) -> str:
    """
    Run one split or join for the given command-line paths.

    Returns:
        Success message

    Raises:
        SplitterException: If the operation fails
    """
    if len(paths) > 1:
        return handle_join(JoinCommand(paths=tuple(paths)))

    path = Path(paths[0])
    if path.is_dir():
        return handle_join(JoinCommand(paths=(paths[0],)))
    if path.is_file():
        return handle_split(SplitCommand(path=paths[0], size=size))
    raise NotFoundError(f"File or directory not found: {paths[0]}")


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    if args.debug:
        log_level = 'DEBUG'
    else:
        log_level = os.getenv('LOG_LEVEL') or get_config().get_log_level()

    logger = setup_logging('cli', log_level=log_level)
    setup_logging('chunking', log_level=log_level)

    if args.debug:
        logger.info("Debug logging enabled")

    if not args.paths:
        from cli.repl import repl_loop

        logger.info("CLI starting...")
        try:
            repl_loop()
        except Exception as e:
            logger.error(f"CLI error: {e}", exc_info=True)
            raise
        finally:
            logger.info("CLI exiting")
        return 0

    try:
        message = run(args.paths, args.size)
    except SplitterException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise

    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
