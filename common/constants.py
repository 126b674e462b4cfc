"""Project-wide constants (naming scheme pieces, buffer sizes)."""

SEPARATOR: str = "-"
SPLIT_DIR_SUFFIX: str = "split"
JOINED_PREFIX: str = "joined-"

COPY_BUFFER_SIZE: int = 1024 * 1024  # 1 MiB read size while joining
MAX_SPLIT_SIZE: int = 2**64 - 1
