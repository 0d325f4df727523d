"""Configuration management.

This module handles:
- Loading/saving the config file (base URL and API token)
- Reading credentials from environment variables
"""

import json
import os
from pathlib import Path

from core.errors import ConfigurationError
from models.types import Credentials

CONFIG_DIR_ENV = 'HACL_CONFIG_DIR'
BASE_URL_ENV = 'HACL_BASE_URL'
TOKEN_ENV = 'HACL_TOKEN'

# Configuration file path
DEFAULT_CONFIG_DIR = Path.home() / '.config' / 'hacl'
CONFIG_FILENAME = 'config.json'


def get_config_file() -> Path:
    """Return the config file path, honouring HACL_CONFIG_DIR."""
    config_dir = os.getenv(CONFIG_DIR_ENV)
    if config_dir:
        return Path(config_dir) / CONFIG_FILENAME
    return DEFAULT_CONFIG_DIR / CONFIG_FILENAME


def load_config() -> Credentials:
    """Load configuration from the config file.

    Returns:
        Dict with 'base_url' and 'token' keys (empty strings if not stored)
    """
    config_file = get_config_file()
    config: Credentials = {'base_url': '', 'token': ''}
    if not config_file.exists():
        return config

    try:
        with open(config_file, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(
            f"Failed to load the config file {config_file}: {e}",
            hint=f"Fix or delete {config_file}, then run `hacl config` again."
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Failed to load the config file {config_file}: expected a JSON object",
            hint=f"Fix or delete {config_file}, then run `hacl config` again."
        )

    config['base_url'] = str(data.get('base_url') or '')
    config['token'] = str(data.get('token') or '')
    return config


def save_config(config: Credentials):
    """Save configuration to file.

    Args:
        config: Credentials dict to save
    """
    config_file = get_config_file()
    try:
        # Create config directory if it doesn't exist
        config_file.parent.mkdir(parents=True, exist_ok=True)
        # The token is a secret, so the file is created owner-only
        fd = os.open(config_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # An existing file keeps its old mode on open
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, 'w') as f:
            json.dump({'base_url': config['base_url'], 'token': config['token']}, f, indent=2)
    except OSError as e:
        raise ConfigurationError(f"Failed to write the config file {config_file}: {e}", hint=None) from e


def update_config(base_url: str | None = None, token: str | None = None) -> Credentials:
    """Store new settings, keeping stored values for anything not given.

    Returns:
        The configuration that was written
    """
    config = load_config()
    if base_url is not None:
        config['base_url'] = base_url
    if token is not None:
        config['token'] = token
    save_config(config)
    return config


def load_auth_from_environment() -> Credentials | None:
    """Load base URL and API token from environment variables.

    Checks for HACL_BASE_URL and HACL_TOKEN.

    Returns:
        Credentials, or None unless both are set
    """
    base_url = os.getenv(BASE_URL_ENV)
    token = os.getenv(TOKEN_ENV)

    if base_url and token:
        return {
            'base_url': base_url,
            'token': token
        }

    return None


def load_credentials() -> Credentials:
    """Get credentials using priority system.

    Priority order:
    1. Environment variables (HACL_BASE_URL, HACL_TOKEN)
    2. Config file
    """
    return load_auth_from_environment() or load_config()


def require_credentials(credentials: Credentials) -> Credentials:
    """Fail with ConfigurationError unless both base URL and token are set."""
    if not credentials.get('base_url'):
        raise ConfigurationError("No base url was found")
    if not credentials.get('token'):
        raise ConfigurationError("No api token was found")
    return credentials
