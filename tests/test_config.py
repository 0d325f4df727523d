"""Tests for configuration loading and storage."""

import json
import stat

import pytest

from core.config import (
    get_config_file,
    load_config,
    load_credentials,
    require_credentials,
    save_config,
    update_config,
)
from core.errors import ConfigurationError


class TestConfigFile:
    """Test cases for the config file."""

    def test_missing_file_gives_defaults(self, config_dir):
        assert load_config() == {'base_url': '', 'token': ''}

    def test_save_and_load(self, config_dir):
        save_config({'base_url': 'http://hub:8123', 'token': 'abc'})

        assert get_config_file() == config_dir / 'config.json'
        assert json.loads((config_dir / 'config.json').read_text()) == {
            'base_url': 'http://hub:8123', 'token': 'abc'
        }
        assert load_config() == {'base_url': 'http://hub:8123', 'token': 'abc'}

    def test_update_keeps_other_value(self, config_dir):
        save_config({'base_url': 'http://hub:8123', 'token': 'abc'})

        update_config(token='new')
        assert load_config() == {'base_url': 'http://hub:8123', 'token': 'new'}

        update_config(base_url='http://other:8123')
        assert load_config() == {'base_url': 'http://other:8123', 'token': 'new'}

    def test_corrupt_file(self, config_dir):
        (config_dir / 'config.json').write_text('{not json')
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()
        assert 'Failed to load the config file' in str(exc_info.value)

    def test_non_object_file(self, config_dir):
        (config_dir / 'config.json').write_text('[]')
        with pytest.raises(ConfigurationError):
            load_config()


class TestCredentials:
    """Test cases for credential lookup and checks."""

    def test_environment_takes_priority(self, config_dir, monkeypatch):
        save_config({'base_url': 'http://file:8123', 'token': 'file'})
        monkeypatch.setenv('HACL_BASE_URL', 'http://env:8123')
        monkeypatch.setenv('HACL_TOKEN', 'env')

        assert load_credentials() == {'base_url': 'http://env:8123', 'token': 'env'}

    def test_partial_environment_ignored(self, config_dir, monkeypatch):
        save_config({'base_url': 'http://file:8123', 'token': 'file'})
        monkeypatch.setenv('HACL_BASE_URL', 'http://env:8123')

        assert load_credentials() == {'base_url': 'http://file:8123', 'token': 'file'}

    @pytest.mark.parametrize('credentials, message', [
        ({'base_url': '', 'token': 'x'}, 'No base url was found'),
        ({'base_url': 'http://hub', 'token': ''}, 'No api token was found'),
    ])
    def test_require_credentials(self, credentials, message):
        with pytest.raises(ConfigurationError) as exc_info:
            require_credentials(credentials)
        assert str(exc_info.value) == message
        assert 'hacl config' in exc_info.value.hint


class TestConfigFilePermissions:
    """The stored token is only readable by its owner."""

    def test_new_file_is_private(self, config_dir):
        save_config({'base_url': 'http://hub:8123', 'token': 'abc'})
        assert stat.S_IMODE((config_dir / 'config.json').stat().st_mode) == 0o600

    def test_existing_file_is_made_private(self, config_dir):
        config_file = config_dir / 'config.json'
        config_file.write_text('{}')
        config_file.chmod(0o644)

        save_config({'base_url': 'http://hub:8123', 'token': 'abc'})
        assert stat.S_IMODE(config_file.stat().st_mode) == 0o600
        assert load_config() == {'base_url': 'http://hub:8123', 'token': 'abc'}
