"""Shared pytest fixtures for all tests."""

import logging

import pytest

import cli.commands
from cli.config import Config


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Keep tests away from the real ~/.splitter config and the global logger setup.

    Args:
        tmp_path: pytest tmp_path fixture
        monkeypatch: pytest monkeypatch fixture
    """
    monkeypatch.setenv('SPLITTER_CONFIG_DIR', str(tmp_path / '.splitter-env'))
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    monkeypatch.setattr(cli.commands, '_config', None)
    yield
    for name in ('cli', 'chunking'):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .splitter directory
    """
    config_dir = tmp_path / '.splitter'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """
    Run the test inside an empty working directory.

    Joined files are created in the current directory, so every test that
    joins uses this fixture.

    Returns:
        Path to the working directory
    """
    work = tmp_path / 'work'
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def make_file(tmp_path):
    """
    Factory creating a binary file with deterministic, non-repeating content.

    Returns:
        Callable (name, size) -> Path
    """
    def _make(name: str, size: int):
        path = tmp_path / name
        path.write_bytes(bytes((i * 7 + i // 256) % 251 for i in range(size)))
        return path

    return _make


@pytest.fixture
def sample_file(make_file):
    """
    Create a 10-byte sample file for splitting.

    Returns:
        Path to sample file
    """
    return make_file('report.csv', 10)
