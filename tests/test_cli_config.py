"""Tests for CLI configuration module."""

import json
from pathlib import Path

from cli.config import Config, default_config_path


def test_config_creates_default_file(tmp_path):
    """Test that config file is created with defaults if missing."""
    config_path = tmp_path / '.splitter' / 'config.json'
    config = Config(config_path)

    assert config_path.exists()

    assert config.data['default_split_size'] is None
    assert config.data['join_output_dir'] == '.'
    assert config.data['log_level'] == 'WARNING'


def test_config_loads_existing_file(tmp_path):
    """Test loading existing config file."""
    config_path = tmp_path / '.splitter' / 'config.json'
    config_path.parent.mkdir(parents=True)

    existing_data = {
        'default_split_size': '10MiB',
        'join_output_dir': '/srv/joined',
    }
    with open(config_path, 'w') as f:
        json.dump(existing_data, f)

    config = Config(config_path)

    assert config.get_default_split_size() == '10MiB'
    assert config.get_join_output_dir() == Path('/srv/joined')

    assert config.data['log_level'] == 'WARNING'


def test_config_save_and_get_default_split_size(temp_config):
    """Test saving and retrieving the default split size."""
    assert temp_config.get_default_split_size() is None

    temp_config.set_default_split_size('700MB')

    assert temp_config.get_default_split_size() == '700MB'

    with open(temp_config.config_path, 'r') as f:
        data = json.load(f)
    assert data['default_split_size'] == '700MB'


def test_config_clear_default_split_size(temp_config):
    temp_config.set_default_split_size('1KB')
    temp_config.set_default_split_size(None)

    assert temp_config.get_default_split_size() is None


def test_config_set_join_output_dir(temp_config):
    temp_config.set_join_output_dir('joined')

    assert temp_config.get_join_output_dir() == Path('joined')
    reloaded = Config(temp_config.config_path)
    assert reloaded.get_join_output_dir() == Path('joined')


def test_config_handles_corrupted_file(tmp_path):
    """Test recovery from corrupted config file."""
    config_path = tmp_path / '.splitter' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        f.write('{ invalid json content')

    config = Config(config_path)
    assert config.get_default_split_size() is None
    assert config.get_join_output_dir() == Path('.')

    backup_path = config_path.with_suffix('.json.bak')
    assert backup_path.exists()


def test_config_non_object_root_is_treated_as_corrupted(tmp_path):
    config_path = tmp_path / '.splitter' / 'config.json'
    config_path.parent.mkdir(parents=True)
    config_path.write_text('[1, 2, 3]')

    config = Config(config_path)

    assert config.data == Config.DEFAULT_CONFIG


def test_config_get_log_level(temp_config):
    """Test log level retrieval."""
    assert temp_config.get_log_level() == 'WARNING'

    temp_config.data['log_level'] = 'debug'
    assert temp_config.get_log_level() == 'DEBUG'


def test_config_directory_created_if_missing(tmp_path):
    """Test that config directory is created if it doesn't exist."""
    config_path = tmp_path / 'nested' / 'deep' / '.splitter' / 'config.json'

    assert not config_path.parent.exists()

    config = Config(config_path)
    assert config_path.parent.exists()
    assert config_path.exists()


def test_default_config_path_honours_env(tmp_path, monkeypatch):
    monkeypatch.setenv('SPLITTER_CONFIG_DIR', str(tmp_path / 'cfg'))

    assert default_config_path() == tmp_path / 'cfg' / 'config.json'


def test_default_config_path_in_home(monkeypatch):
    monkeypatch.delenv('SPLITTER_CONFIG_DIR', raising=False)

    assert default_config_path() == Path.home() / '.splitter' / 'config.json'
