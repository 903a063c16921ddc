"""
Unit tests for logging configuration.
"""

import logging
import os
from unittest.mock import patch

from credcheck.logging_config import (
    CredentialRedactionFilter,
    configure_logging,
    get_logging_config,
)


def make_record(msg, args=None):
    return logging.LogRecord("credcheck", logging.INFO, __file__, 1, msg, args, None)


def test_redaction_masks_basic_token():
    """Test Basic credentials are replaced in the rendered message."""
    record = make_record("sending Authorization: %s", ("Basic dXNlcjpodW50ZXIy",))

    assert CredentialRedactionFilter().filter(record) is True
    assert record.getMessage() == "sending Authorization: Basic ***"


def test_redaction_leaves_other_messages():
    """Test unrelated records are untouched."""
    record = make_record("Authenticated %r", ("alice",))

    assert CredentialRedactionFilter().filter(record) is True
    assert record.getMessage() == "Authenticated 'alice'"
    assert record.args == ("alice",)


def test_logging_config_levels():
    """Test the credcheck logger follows the requested level and httpx stays quiet."""
    config = get_logging_config("debug")

    assert config["loggers"]["credcheck"]["level"] == "DEBUG"
    assert config["loggers"]["httpx"]["level"] == "WARNING"
    assert config["handlers"]["default"]["filters"] == ["credential_redaction"]


def test_configure_logging_reads_environment():
    """Test configure_logging picks the level from CREDCHECK_LOG_LEVEL."""
    with patch.dict(os.environ, {"CREDCHECK_LOG_LEVEL": "warning"}, clear=False):
        with patch("credcheck.logging_config.logging.config.dictConfig") as dict_config:
            configure_logging()

    applied = dict_config.call_args.args[0]
    assert applied["loggers"]["credcheck"]["level"] == "WARNING"
