"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol

DEFAULT_LICENSE_MARKER = "license number doesn't allow you to connect"
DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


@dataclass
class AuthClientConfig:
    """Authentication client configuration."""
    timeout: Optional[float] = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    raise_for_status: bool = False
    machine_uuid: Optional[str] = None
    license_marker: str = DEFAULT_LICENSE_MARKER
    default_headers: Dict[str, str] = field(default_factory=dict)


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_auth_client_config(self) -> AuthClientConfig:
        """Get authentication client configuration."""
        ...

    def get_log_level(self) -> str:
        """Get the log level name."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get_auth_client_config(self) -> AuthClientConfig:
        """Get authentication client configuration from environment variables."""
        env = self._environ

        timeout_env = env.get("CREDCHECK_TIMEOUT", str(DEFAULT_TIMEOUT)).strip()
        if timeout_env.lower() in ("", "none"):
            timeout = None
        else:
            try:
                timeout = float(timeout_env)
            except ValueError:
                raise ValueError(
                    f"CREDCHECK_TIMEOUT must be a number of seconds, got {timeout_env!r}"
                )
            if timeout <= 0:
                raise ValueError(f"CREDCHECK_TIMEOUT must be positive, got {timeout_env!r}")

        return AuthClientConfig(
            timeout=timeout,
            follow_redirects=_parse_bool(env, "CREDCHECK_FOLLOW_REDIRECTS", True),
            raise_for_status=_parse_bool(env, "CREDCHECK_RAISE_FOR_STATUS", False),
            machine_uuid=env.get("CREDCHECK_MACHINE_UUID") or None,
            license_marker=env.get("CREDCHECK_LICENSE_MARKER") or DEFAULT_LICENSE_MARKER,
        )

    def get_log_level(self) -> str:
        """Get the log level from environment variables."""
        return self._environ.get("CREDCHECK_LOG_LEVEL", "INFO").upper()


class StaticConfigProvider:
    """Provider returning fixed configuration values."""

    def __init__(self, config: Optional[AuthClientConfig] = None, log_level: str = "INFO"):
        self._config = config or AuthClientConfig()
        self._log_level = log_level.upper()

    def get_auth_client_config(self) -> AuthClientConfig:
        return self._config

    def get_log_level(self) -> str:
        return self._log_level


def _parse_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None or not value.strip():
        return default

    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {value!r}")
