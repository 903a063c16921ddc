"""Configuration for the credcheck client."""

from .provider import (
    DEFAULT_LICENSE_MARKER,
    AuthClientConfig,
    ConfigProvider,
    EnvConfigProvider,
    StaticConfigProvider,
)

__all__ = [
    "DEFAULT_LICENSE_MARKER",
    "AuthClientConfig",
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
]
