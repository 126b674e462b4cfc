"""Plans the byte lengths of the chunks a file is split into."""

from typing import Iterator

from chunking.exceptions import InvalidInputError


def plan(total: int, limit: int) -> list[int]:
    """
    Halve parts until every part is below the split limit.

    Each pass only visits the parts present when the pass started; halves
    appended during a pass wait for the next one. The result is therefore
    not sorted and not uniform, e.g. plan(10, 3) == [2, 2, 1, 1, 2, 2].

    Args:
        total: Total number of bytes (>= 0)
        limit: Maximum chunk size in bytes, exclusive (>= 1)

    Returns:
        Ordered list of chunk lengths summing to total

    Raises:
        InvalidInputError: If total is negative, limit is not positive, or
            limit is 1 for a non-empty total (no part could hold a byte)
    """
    if not isinstance(total, int) or not isinstance(limit, int):
        raise InvalidInputError("Sizes must be whole numbers of bytes")
    if total < 0:
        raise InvalidInputError(f"Invalid total size: {total}")
    if limit < 1:
        raise InvalidInputError("Split size must be greater than zero")
    if limit == 1 and total > 0:
        # Halving a one-byte part yields 0 and 1 again forever.
        raise InvalidInputError("Split size must be at least 2 bytes")

    parts = [total]

    while not all(part < limit for part in parts):
        for index in range(len(parts)):
            part = parts[index]
            if part >= limit:
                half = part // 2
                parts[index] = half
                parts.append(part - half)

    assert sum(parts) == total
    return parts


def chunk_offsets(parts: list[int]) -> Iterator[tuple[int, int, int]]:
    """Yield (1-based index, start offset, size) for each planned chunk."""
    offset = 0
    for index, size in enumerate(parts, start=1):
        yield index, offset, size
        offset += size
