"""Configuration management for the splitter CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger

logger = get_logger(__name__)

CONFIG_DIR_NAME = '.splitter'
CONFIG_FILE_NAME = 'config.json'


def default_config_path() -> Path:
    """
    Location of the config file.

    Returns:
        $SPLITTER_CONFIG_DIR/config.json, or ~/.splitter/config.json
    """
    config_dir = os.environ.get('SPLITTER_CONFIG_DIR')
    if config_dir:
        return Path(config_dir) / CONFIG_FILE_NAME
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "default_split_size": os.environ.get("SPLITTER_DEFAULT_SPLIT_SIZE"),
        "join_output_dir": os.environ.get("SPLITTER_JOIN_OUTPUT_DIR", "."),
        "log_level": "WARNING",
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.splitter/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / CONFIG_DIR_NAME / CONFIG_FILE_NAME
            logger.warning(f"Config directory not writable, using {self.config_path}")
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("config root is not an object")
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (ValueError, OSError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Unreadable config {self.config_path} ({e}), backing up to {backup_path}")
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Config backup failed: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except OSError as e:
                logger.warning(f"Could not write default config: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not save config: {e}")

    def get_default_split_size(self) -> Optional[str]:
        """
        Get the stored default split size.

        Returns:
            Size text (e.g. "10MiB") or None if not set
        """
        return self.data.get('default_split_size') or None

    def set_default_split_size(self, size_text: Optional[str]) -> None:
        """
        Set the default split size and save to file.

        Args:
            size_text: Size in human-readable notation, None to clear
        """
        self.data['default_split_size'] = size_text
        self.save()

    def get_join_output_dir(self) -> Path:
        """
        Get the directory joined files are written to.

        Returns:
            Directory path (relative paths resolve against the working directory)
        """
        return Path(self.data.get('join_output_dir') or '.')

    def get_log_level(self) -> str:
        """
        Get configured log level name.

        Returns:
            Level name, e.g. "WARNING"
        """
        return str(self.data.get('log_level') or 'WARNING').upper()

    def set_join_output_dir(self, directory: str) -> None:
        """
        Set the directory joined files are written to and save to file.

        Args:
            directory: Directory path
        """
        self.data['join_output_dir'] = directory
        self.save()
