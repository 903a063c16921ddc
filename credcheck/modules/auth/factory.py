"""
Authentication Factory following Black Box Design principles.

This factory:
- Constructs the Authenticator based on configuration
- Wires the transport and URL validator together
- Returns only the Authenticator (hiding implementation)
"""

import logging
from typing import Optional

from .authenticator import Authenticator
from .interfaces import Transport
from .transport import HttpxTransport
from .validation import is_valid_web_uri
from ...config.provider import AuthClientConfig, ConfigProvider

logger = logging.getLogger(__name__)


class AuthFactory:
    """
    Factory for building the authentication stack.

    This is the composition root that:
    - Creates the transport from configuration
    - Injects it into the Authenticator
    """

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        transport: Optional[Transport] = None
    ) -> Authenticator:
        """
        Build an Authenticator from a configuration provider.

        Args:
            config_provider: Configuration provider
            transport: Optional transport overriding the httpx default

        Returns:
            Configured Authenticator
        """
        config = config_provider.get_auth_client_config()

        if transport is None:
            logger.info(
                f"Building authenticator with httpx transport "
                f"(timeout={config.timeout}, follow_redirects={config.follow_redirects})"
            )
            transport = HttpxTransport(
                timeout=config.timeout,
                follow_redirects=config.follow_redirects,
                raise_for_status=config.raise_for_status
            )
        else:
            logger.info(f"Building authenticator with injected transport {type(transport).__name__}")

        return Authenticator(
            transport=transport,
            url_validator=is_valid_web_uri,
            config=config
        )

    @staticmethod
    def build_for_testing(
        transport: Transport,
        config: Optional[AuthClientConfig] = None
    ) -> Authenticator:
        """
        Build an Authenticator for testing without reading the environment.

        Args:
            transport: Mock transport
            config: Optional configuration (defaults apply otherwise)

        Returns:
            Authenticator for testing
        """
        from ...config.provider import StaticConfigProvider

        return AuthFactory.build(StaticConfigProvider(config), transport=transport)
