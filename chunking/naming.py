"""Naming scheme shared by split and join.

A file ``report.csv`` is split into the directory ``report.csv-split``
holding ``report.csv-split-1`` ... ``report.csv-split-N``. Joining strips
the two trailing segments again to recover ``report.csv``.
"""

import re
from pathlib import Path

from chunking.exceptions import InvalidInputError
from common.constants import JOINED_PREFIX, SEPARATOR, SPLIT_DIR_SUFFIX

_INDEX_PATTERN = re.compile(r"[0-9]+")


def file_name_of(path: Path) -> str:
    """
    Return the final component of a path as valid text.

    Raises:
        InvalidInputError: If the name has no text representation
    """
    name = Path(path).name
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidInputError("Invalid UTF-8")
    return name


def split_dir_name(base_name: str) -> str:
    """Name of the directory holding the chunks of base_name."""
    return f"{base_name}{SEPARATOR}{SPLIT_DIR_SUFFIX}"


def split_dir_for(source_path: Path) -> Path:
    """Sibling split directory for a source file."""
    source_path = Path(source_path)
    return source_path.with_name(split_dir_name(file_name_of(source_path)))


def chunk_file_name(dir_name: str, index: int) -> str:
    """Name of chunk number index (1-based) inside the directory dir_name."""
    return f"{dir_name}{SEPARATOR}{index}"


def joined_file_name(base_name: str) -> str:
    """Name of the file a chunk set of base_name is joined into."""
    return f"{JOINED_PREFIX}{base_name}"


def decode_index(name: str) -> int:
    """
    Extract the trailing sequence number of a chunk file name.

    Args:
        name: Chunk file name, e.g. "report.csv-split-3"

    Returns:
        The number after the last separator

    Raises:
        InvalidInputError: If there is no separator or the suffix is not a
            non-negative integer
    """
    head, sep, trailing = name.rpartition(SEPARATOR)
    if not sep:
        raise InvalidInputError(f"No trailing number found: {name}")
    if not _INDEX_PATTERN.fullmatch(trailing):
        raise InvalidInputError(f"Invalid trailing number: {name}")
    return int(trailing)


def decode_base_name(name: str) -> str:
    """
    Strip the split and index segments off a chunk file name.

    "Cargo.toml-split-0" gives "Cargo.toml". The middle segment is not
    compared against the split suffix.

    Raises:
        InvalidInputError: If fewer than two trailing segments exist
    """
    segments = name.rsplit(SEPARATOR, 2)
    if len(segments) < 3:
        raise InvalidInputError(f"Invalid filename: {name}")
    return segments[0]


def decode(name: str) -> tuple[str, int]:
    """Decode a chunk file name into (base name, sequence index)."""
    return decode_base_name(name), decode_index(name)
