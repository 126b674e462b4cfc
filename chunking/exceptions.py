"""Exception hierarchy for split and join operations."""

import errno
from typing import Optional


class SplitterException(Exception):
    """
    Base exception class for all split/join errors.

    The string form is the message shown to the user.
    """
    pass


class NotFoundError(SplitterException):
    """
    Raised when a path does not exist.
    """
    pass


class PermissionDeniedError(SplitterException):
    """
    Raised when there are insufficient rights to open or create a path.
    """
    pass


class InvalidInputError(SplitterException):
    """
    Raised when a path is not valid text, a filename does not follow the
    chunk naming scheme, or a size cannot be parsed.
    """
    pass


class PreconditionFailedError(SplitterException):
    """
    Raised when a file is too small to split, a chunk set is incomplete,
    or an output path already exists.
    """
    pass


class IOFailureError(SplitterException):
    """
    Raised for read/write failures not otherwise classified.
    """
    pass


def error_from_os(err: OSError, message: Optional[str] = None) -> SplitterException:
    """
    Map an OSError onto the split/join error taxonomy.

    Args:
        err: The operating system error
        message: Optional message replacing the default one for the kind

    Returns:
        SplitterException subclass instance (not raised)
    """
    if isinstance(err, FileNotFoundError) or err.errno == errno.ENOENT:
        return NotFoundError(message or "File not found.")
    if isinstance(err, PermissionError):
        return PermissionDeniedError(message or "Permission denied.")
    if isinstance(err, FileExistsError):
        return PreconditionFailedError(message or "Path already exists.")
    if isinstance(err, (IsADirectoryError, NotADirectoryError)):
        return InvalidInputError(message or "Not a file.")
    return IOFailureError(message or "Unknown error.")
