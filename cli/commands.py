"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Callable, Optional

from chunking.exceptions import InvalidInputError, NotFoundError, error_from_os
from chunking.joiner import join, list_chunk_dir
from chunking.splitter import split
from cli.config import Config, default_config_path
from cli.models import ConfigCommand, JoinCommand, SplitCommand
from cli.utils import format_file_size, parse_size
from common.logging_config import get_logger

logger = get_logger(__name__)

SizeAsker = Callable[[int, Optional[str]], int]

_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get or create global Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        logger.debug("Loading configuration")
        _config = Config(default_config_path())
    return _config


def resolve_split_size(size_text: str) -> int:
    """
    Parse a split size given on the command line or in the REPL.

    Raises:
        InvalidInputError: If the size is unparsable or zero
    """
    size = parse_size(size_text)
    if size == 0:
        raise InvalidInputError("Split size must be greater than zero")
    return size


def handle_split(
    cmd: SplitCommand,
    ask_size: Optional[SizeAsker] = None,
    config: Optional[Config] = None,
) -> str:
    """
    Handle 'split' command.

    Args:
        cmd: SplitCommand with path and optional size text
        ask_size: Called with (file length, default size text) when cmd has
            no size; returns the split size in bytes
        config: Optional Config for dependency injection (testing)

    Returns:
        Success message

    Raises:
        SplitterException: If the split fails
    """
    logger.info(f"Executing split command: path={cmd.path} size={cmd.size}")
    path = Path(cmd.path)
    if not path.exists():
        raise NotFoundError(f"File or directory not found: {cmd.path}")
    if not path.is_file():
        raise InvalidInputError("Given entry is not a file and cannot be split.")

    if cmd.size is not None:
        limit = resolve_split_size(cmd.size)
    else:
        if config is None:
            config = get_config()
        if ask_size is None:
            from cli.repl import prompt_split_size
            ask_size = prompt_split_size
        try:
            file_len = path.stat().st_size
        except OSError as e:
            raise error_from_os(e) from e
        limit = ask_size(file_len, config.get_default_split_size())

    return split(path, limit)


def expand_join_paths(paths: tuple[str, ...]) -> list[Path]:
    """
    Turn join arguments into chunk paths.

    A single directory argument stands for every entry in it.
    """
    if len(paths) == 1 and Path(paths[0]).is_dir():
        return list_chunk_dir(Path(paths[0]))
    return [Path(p) for p in paths]


def handle_join(cmd: JoinCommand, config: Optional[Config] = None) -> str:
    """
    Handle 'join' command.

    Args:
        cmd: JoinCommand with chunk paths or one split directory
        config: Optional Config for dependency injection (testing)

    Returns:
        Success message

    Raises:
        SplitterException: If the join fails
    """
    logger.info(f"Executing join command: {len(cmd.paths)} path(s)")
    if config is None:
        config = get_config()
    paths = expand_join_paths(cmd.paths)
    return join(paths, output_dir=config.get_join_output_dir())


def handle_config(cmd: ConfigCommand, config: Optional[Config] = None) -> str:
    """
    Handle 'config' command.

    Args:
        cmd: ConfigCommand, empty to show all values
        config: Optional Config for dependency injection (testing)

    Returns:
        Configuration listing or confirmation message

    Raises:
        InvalidInputError: If a new split size is unparsable
    """
    if config is None:
        config = get_config()

    if cmd.key == "split-size" and cmd.value is not None:
        if cmd.value.lower() == "none":
            config.set_default_split_size(None)
            return "Default split size cleared"
        size = resolve_split_size(cmd.value)
        config.set_default_split_size(cmd.value)
        return f"Default split size set to {cmd.value} ({format_file_size(size)})"

    if cmd.key == "join-dir" and cmd.value is not None:
        config.set_join_output_dir(cmd.value)
        return f"Joined files will be written to {cmd.value}"

    split_size = config.get_default_split_size() or "(ask every time)"
    lines = {
        "split-size": f"split-size: {split_size}",
        "join-dir": f"join-dir:   {config.get_join_output_dir()}",
    }
    if cmd.key is not None:
        return lines[cmd.key]
    return "\n".join([f"Config file: {config.config_path}", *lines.values()])
