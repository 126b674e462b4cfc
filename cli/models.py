"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class SplitCommand:
    """Split one file into chunks."""

    path: str
    size: Optional[str] = None
    command: Literal["split"] = "split"


@dataclass(frozen=True)
class JoinCommand:
    """Join chunk files (or the entries of one split directory)."""

    paths: tuple[str, ...]
    command: Literal["join"] = "join"


@dataclass(frozen=True)
class ConfigCommand:
    """Show configuration, or set one key."""

    key: Optional[str] = None
    value: Optional[str] = None
    command: Literal["config"] = "config"


CommandRequest = SplitCommand | JoinCommand | ConfigCommand
