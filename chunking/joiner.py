"""Joins a complete chunk set back into one file."""

import os
import stat
from contextlib import ExitStack
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from chunking.exceptions import (
    IOFailureError,
    InvalidInputError,
    PreconditionFailedError,
    SplitterException,
    error_from_os,
)
from chunking.naming import decode_base_name, decode_index, file_name_of, joined_file_name
from common.constants import COPY_BUFFER_SIZE
from common.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChunkDescriptor:
    """One chunk file of a set, with its handle while a join is running."""

    path: Path
    index: int
    size: int
    file: Optional[BinaryIO] = field(default=None, compare=False, repr=False)


@dataclass
class JoinResult:
    """Outcome of a successful join."""

    output_path: Path
    chunks: list[ChunkDescriptor]
    total_size: int

    @property
    def message(self) -> str:
        return f"Successful join. Joined file: {self.output_path.name}"


def _describe(path: Path, stack: ExitStack) -> ChunkDescriptor:
    """
    Open a chunk file, register the handle on stack, and decode its index.

    Every chunk is opened before the output file is created, so an
    unreadable chunk never leaves a partial joined file behind.
    """
    try:
        stat_result = path.stat()
    except OSError as e:
        raise error_from_os(e) from e
    if not stat.S_ISREG(stat_result.st_mode):
        raise InvalidInputError(f"{path} is not a file")
    index = decode_index(file_name_of(path))

    try:
        source = stack.enter_context(open(path, "rb"))
    except IsADirectoryError as e:
        raise InvalidInputError(f"{path} is not a file") from e
    except OSError as e:
        raise error_from_os(e) from e

    try:
        size = os.fstat(source.fileno()).st_size
    except OSError as e:
        raise error_from_os(e) from e
    return ChunkDescriptor(path=path, index=index, size=size, file=source)


def order_chunks(chunks: Iterable[ChunkDescriptor]) -> list[ChunkDescriptor]:
    """
    Sort chunks by sequence index and check the indices are exactly 1..N.

    A duplicate index shifts every later position, so it fails the same
    check as a gap.

    Raises:
        PreconditionFailedError: If the indices are not contiguous from 1
    """
    ordered = sorted(chunks, key=lambda chunk: chunk.index)
    for position, chunk in enumerate(ordered):
        if chunk.index != position + 1:
            logger.debug(f"Expected index {position + 1}, found {chunk.index} ({chunk.path})")
            raise PreconditionFailedError(
                "Trailing number mismatch. Make sure you provided all split files."
            )
    return ordered


def _create_output(output_path: Path):
    try:
        return open(output_path, "xb")
    except FileExistsError as e:
        raise PreconditionFailedError(
            f"Failed to create output file. {output_path.name} already exists."
        ) from e
    except OSError as e:
        raise error_from_os(e, "Failed to create output file.") from e


def _copy_chunk(chunk: ChunkDescriptor, out) -> int:
    """Append one opened chunk file to out, returning the number of bytes copied."""
    copied = 0
    while True:
        try:
            data = chunk.file.read(COPY_BUFFER_SIZE)
        except OSError as e:
            raise IOFailureError(f"Failed reading {chunk.path.name}.") from e
        if not data:
            break
        try:
            out.write(data)
        except OSError as e:
            raise IOFailureError("Failed to write output") from e
        copied += len(data)
    return copied


def join_files(paths, output_dir: Optional[Path] = None) -> JoinResult:
    """
    Join chunk files into "joined-<base name>".

    The base name is taken from the first path. Every path must be a
    regular, readable file whose name ends in a sequence number; the
    numbers must be exactly 1..N. All chunks are opened and checked before
    the output is created, and the output is never overwritten.

    Args:
        paths: Chunk file paths, in any order
        output_dir: Directory for the joined file (default: current directory)

    Returns:
        JoinResult describing the output file

    Raises:
        SplitterException: On any failure (see chunking.exceptions)
    """
    paths = [Path(p) for p in paths]
    if not paths:
        raise InvalidInputError("No files were given.")

    first_path = paths[0]
    if not first_path.is_file():
        raise InvalidInputError(f"{first_path} is not a file")
    first_name = file_name_of(first_path)
    base_name = decode_base_name(first_name)

    with ExitStack() as stack:
        chunks = []
        total_size = 0
        for path in paths:
            chunk = _describe(path, stack)
            total_size += chunk.size
            chunks.append(chunk)

        ordered = order_chunks(chunks)
        logger.debug(f"Joining {len(ordered)} chunks of {base_name}, {total_size} bytes")

        output_dir = Path(output_dir) if output_dir is not None else Path(os.getcwd())
        output_path = output_dir / joined_file_name(base_name)

        with _create_output(output_path) as out:
            written = 0
            for chunk in ordered:
                written += _copy_chunk(chunk, out)

    if written != total_size:
        raise IOFailureError(
            f"Joined {written} bytes but the chunks total {total_size} bytes. "
            "A chunk file changed while joining."
        )

    logger.info(f"Joined {len(ordered)} chunks into {output_path}")
    chunks = [replace(chunk, file=None) for chunk in ordered]
    return JoinResult(output_path=output_path, chunks=chunks, total_size=total_size)


def join(paths, output_dir: Optional[Path] = None) -> str:
    """
    Join chunk files and return the message to show the user.

    Raises:
        SplitterException: On any failure
    """
    try:
        return join_files(paths, output_dir).message
    except SplitterException as e:
        logger.info(f"Join failed: {e}")
        raise


def list_chunk_dir(directory: Path) -> list[Path]:
    """
    List the entries of a split directory for joining.

    Raises:
        SplitterException: If the directory cannot be read
    """
    try:
        return sorted(Path(directory).iterdir())
    except OSError as e:
        raise error_from_os(e) from e
