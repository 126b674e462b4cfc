"""Utility functions for CLI operations: size parsing and formatting."""

import re
from decimal import Decimal, InvalidOperation

from chunking.exceptions import InvalidInputError
from common.constants import MAX_SPLIT_SIZE

_SIZE_PATTERN = re.compile(
    r"^(?P<number>[0-9][0-9_,]*(?:\.[0-9]*)?|\.[0-9]+)\s*(?P<unit>[a-z]*)$",
    re.IGNORECASE,
)

_PREFIXES = "kmgtpe"

UNIT_MULTIPLIERS = {"": 1, "b": 1}
for _power, _prefix in enumerate(_PREFIXES, start=1):
    UNIT_MULTIPLIERS[_prefix] = 1000 ** _power
    UNIT_MULTIPLIERS[f"{_prefix}b"] = 1000 ** _power
    UNIT_MULTIPLIERS[f"{_prefix}i"] = 1024 ** _power
    UNIT_MULTIPLIERS[f"{_prefix}ib"] = 1024 ** _power


class SizeParseError(InvalidInputError):
    """Raised when a size string cannot be parsed."""

    pass


def parse_size(text: str) -> int:
    """
    Parse a human-readable size into bytes.

    Accepts plain byte counts ("4096"), decimal units ("10 MB", "1.5G") and
    binary units ("64KiB"). Units are case-insensitive; fractions of a byte
    are truncated.

    Args:
        text: Size text

    Returns:
        Size in bytes

    Raises:
        SizeParseError: "No input", "Size too big" or "Invalid input"
    """
    text = text.strip()
    if not text:
        raise SizeParseError("No input")

    match = _SIZE_PATTERN.match(text)
    if match is None:
        raise SizeParseError("Invalid input")

    multiplier = UNIT_MULTIPLIERS.get(match.group("unit").lower())
    if multiplier is None:
        raise SizeParseError("Invalid input")

    number = match.group("number").replace("_", "").replace(",", "")
    try:
        value = int(Decimal(number) * multiplier)
    except InvalidOperation:
        raise SizeParseError("Invalid input")

    if value > MAX_SPLIT_SIZE:
        raise SizeParseError("Size too big")
    return value


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
