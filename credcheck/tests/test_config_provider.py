"""
Unit tests for configuration providers.
"""

import os
from unittest.mock import patch

import pytest

from credcheck.config.provider import (
    DEFAULT_LICENSE_MARKER,
    AuthClientConfig,
    EnvConfigProvider,
    StaticConfigProvider,
)


def test_env_defaults():
    """Test defaults apply when no variables are set."""
    config = EnvConfigProvider(environ={}).get_auth_client_config()

    assert config == AuthClientConfig()
    assert config.timeout == 30.0
    assert config.follow_redirects is True
    assert config.raise_for_status is False
    assert config.machine_uuid is None
    assert config.license_marker == DEFAULT_LICENSE_MARKER


def test_env_values_parsed():
    """Test every supported variable is read."""
    provider = EnvConfigProvider(environ={
        "CREDCHECK_TIMEOUT": "2.5",
        "CREDCHECK_FOLLOW_REDIRECTS": "no",
        "CREDCHECK_RAISE_FOR_STATUS": "TRUE",
        "CREDCHECK_MACHINE_UUID": "machine-1",
        "CREDCHECK_LICENSE_MARKER": "license exceeded",
        "CREDCHECK_LOG_LEVEL": "debug",
    })

    config = provider.get_auth_client_config()

    assert config.timeout == 2.5
    assert config.follow_redirects is False
    assert config.raise_for_status is True
    assert config.machine_uuid == "machine-1"
    assert config.license_marker == "license exceeded"
    assert provider.get_log_level() == "DEBUG"


def test_env_timeout_none_disables_timeout():
    """Test 'none' disables the transport timeout."""
    config = EnvConfigProvider(environ={"CREDCHECK_TIMEOUT": "none"}).get_auth_client_config()

    assert config.timeout is None


@pytest.mark.parametrize("value", ["soon", "-1", "0"])
def test_env_invalid_timeout(value):
    """Test bad timeouts raise ValueError."""
    with pytest.raises(ValueError, match="CREDCHECK_TIMEOUT"):
        EnvConfigProvider(environ={"CREDCHECK_TIMEOUT": value}).get_auth_client_config()


def test_env_invalid_boolean():
    """Test bad booleans raise ValueError naming the variable."""
    with pytest.raises(ValueError, match="CREDCHECK_RAISE_FOR_STATUS"):
        EnvConfigProvider(
            environ={"CREDCHECK_RAISE_FOR_STATUS": "maybe"}
        ).get_auth_client_config()


def test_env_reads_process_environment():
    """Test the provider falls back to os.environ."""
    with patch.dict(os.environ, {"CREDCHECK_MACHINE_UUID": "from-env"}, clear=False):
        config = EnvConfigProvider().get_auth_client_config()

    assert config.machine_uuid == "from-env"


def test_static_provider():
    """Test the static provider returns what it was given."""
    config = AuthClientConfig(timeout=1.0)
    provider = StaticConfigProvider(config, log_level="warning")

    assert provider.get_auth_client_config() is config
    assert provider.get_log_level() == "WARNING"
    assert StaticConfigProvider().get_auth_client_config() == AuthClientConfig()
