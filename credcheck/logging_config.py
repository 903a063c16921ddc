"""
Logging configuration that keeps credentials out of log output
"""

import logging
import logging.config
import re
from typing import Any, Dict, Optional

_BASIC_CREDENTIALS = re.compile(r"(Basic\s+)[A-Za-z0-9+/=]+", re.IGNORECASE)


class CredentialRedactionFilter(logging.Filter):
    """Filter that masks Basic auth credentials in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record message with any Basic token replaced."""
        message = record.getMessage()
        redacted = _BASIC_CREDENTIALS.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with credential redaction."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "credential_redaction": {
                "()": CredentialRedactionFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["credential_redaction"]
            }
        },
        "loggers": {
            "credcheck": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            },
            "httpcore": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the logging configuration, reading the level from the environment if not given."""
    if level is None:
        from .config.provider import EnvConfigProvider
        level = EnvConfigProvider().get_log_level()
    logging.config.dictConfig(get_logging_config(level))
