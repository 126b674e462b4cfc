import logging
import os
import re
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class PathRedactionFilter(logging.Filter):
    """Filter that shortens the user's home directory to '~' in log records."""

    def __init__(self, home: Optional[str] = None):
        super().__init__()
        self.home = home if home is not None else str(Path.home())
        # Only whole path components: /root/x matches, /rootfs/x does not.
        self._pattern = re.compile(re.escape(self.home) + r"(?=[\\/]|$)")

    def filter(self, record: logging.LogRecord) -> bool:
        """Replace the home directory prefix in the message and its args."""
        if not self.home or self.home == os.sep:
            return True

        if isinstance(record.msg, str):
            record.msg = self._redact(record.msg)

        if hasattr(record, 'args') and record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._redact_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact_value(arg) for arg in record.args)

        return True

    def _redact(self, text: str) -> str:
        return self._pattern.sub("~", text)

    def _redact_value(self, value):
        """Redact str and Path arguments, leave everything else alone."""
        if isinstance(value, Path):
            value = str(value)
        if isinstance(value, str):
            return self._redact(value)
        return value


def resolve_log_level(log_level: Optional[str] = None) -> int:
    """
    Turn a level name into a logging level.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR). Defaults to
            the LOG_LEVEL env var or WARNING

    Returns:
        Numeric logging level, WARNING for unknown names
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'WARNING')
    level = getattr(logging, str(log_level).upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Log records go to stderr so they never mix with command results on stdout.
    Calling this again for the same component only updates the level.

    Args:
        component_name: Top-level package name (e.g., 'cli', 'chunking')
        log_level: Log level name. Defaults to LOG_LEVEL env var or WARNING

    Returns:
        Configured logger instance
    """
    level = resolve_log_level(log_level)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(PathRedactionFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
