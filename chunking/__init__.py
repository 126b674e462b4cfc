"""File chunking: plan, split, and join."""

from chunking.exceptions import (
    IOFailureError,
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
    PreconditionFailedError,
    SplitterException,
)
from chunking.joiner import JoinResult, join, join_files
from chunking.planner import plan
from chunking.splitter import SplitResult, split, split_file

__all__ = [
    "IOFailureError",
    "InvalidInputError",
    "JoinResult",
    "NotFoundError",
    "PermissionDeniedError",
    "PreconditionFailedError",
    "SplitResult",
    "SplitterException",
    "join",
    "join_files",
    "plan",
    "split",
    "split_file",
]
