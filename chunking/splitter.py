"""Splits one file into size-bounded chunk files."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from chunking.exceptions import (
    IOFailureError,
    PreconditionFailedError,
    SplitterException,
    error_from_os,
)
from chunking.naming import chunk_file_name, split_dir_for
from chunking.planner import chunk_offsets, plan
from common.logging_config import get_logger

logger = get_logger(__name__)

RENAME_WARNING = (
    "Note that altering the trailing numbers of the filenames may result "
    "in corruption when the files are joined."
)


@dataclass
class SplitResult:
    """Outcome of a successful split."""

    split_dir: Path
    plan: list[int]
    chunk_paths: list[Path] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Successful split. Split folder: {self.split_dir}\n\n{RENAME_WARNING}"


def _read_exact(source: BinaryIO, size: int) -> bytearray:
    """Read exactly size bytes or fail with IOFailureError."""
    buffer = bytearray(size)
    view = memoryview(buffer)
    filled = 0
    while filled < size:
        try:
            count = source.readinto(view[filled:])
        except OSError as e:
            raise IOFailureError("Failed reading file.") from e
        if not count:
            logger.debug(f"Short read: got {filled} of {size} bytes")
            raise IOFailureError("Failed reading file.")
        filled += count
    return buffer


def _create_split_dir(split_dir: Path) -> None:
    try:
        split_dir.mkdir()
    except FileExistsError as e:
        raise PreconditionFailedError(
            f"Folder {split_dir} already exists. Please remove the previous split folder."
        ) from e
    except OSError as e:
        raise error_from_os(e, f"Failed to create split folder {split_dir}.") from e


def _write_chunk(chunk_path: Path, data: bytearray) -> None:
    try:
        out = open(chunk_path, "xb")
    except OSError as e:
        raise error_from_os(e, "Failed to create output file.") from e
    with out:
        try:
            out.write(data)
        except OSError as e:
            raise IOFailureError("Failed to write output.") from e


def split_file(source_path, limit: int) -> SplitResult:
    """
    Split a file into chunks smaller than limit.

    Chunks are written to a new sibling directory named "<name>-split" as
    "<name>-split-1" ... "<name>-split-N", in the order given by plan().
    A failure after the directory was created leaves it on disk.

    Args:
        source_path: Path to an existing regular file
        limit: Split size in bytes; every chunk is strictly smaller

    Returns:
        SplitResult describing the directory and chunks written

    Raises:
        SplitterException: On any failure (see chunking.exceptions)
    """
    source_path = Path(source_path)

    try:
        source = open(source_path, "rb")
    except IsADirectoryError as e:
        raise error_from_os(e, f"{source_path} is not a file") from e
    except OSError as e:
        raise error_from_os(e) from e

    with source:
        try:
            file_len = os.fstat(source.fileno()).st_size
        except OSError as e:
            raise error_from_os(e, "Failed reading file.") from e

        logger.debug(f"Splitting {source_path}: {file_len} bytes, split size {limit}")

        if file_len < limit:
            raise PreconditionFailedError(
                "File length is below split length. Nothing to split."
            )

        parts = plan(file_len, limit)
        logger.debug(f"Planned {len(parts)} chunks")

        split_dir = split_dir_for(source_path)
        _create_split_dir(split_dir)

        result = SplitResult(split_dir=split_dir, plan=parts)
        for index, offset, size in chunk_offsets(parts):
            data = _read_exact(source, size)
            chunk_path = split_dir / chunk_file_name(split_dir.name, index)
            _write_chunk(chunk_path, data)
            result.chunk_paths.append(chunk_path)
            logger.debug(f"Wrote {chunk_path.name}: offset {offset}, {size} bytes")

    logger.info(f"Split {source_path} into {len(parts)} chunks in {split_dir}")
    return result


def split(source_path, limit: int) -> str:
    """
    Split a file and return the message to show the user.

    Raises:
        SplitterException: On any failure
    """
    try:
        return split_file(source_path, limit).message
    except SplitterException as e:
        logger.info(f"Split of {source_path} failed: {e}")
        raise
