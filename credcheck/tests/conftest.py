"""
Shared pytest fixtures for credcheck tests.

This module provides:
- FakeTransport: records requests and returns canned responses
- Fixtures building Authenticators around it
"""

from typing import Any, List, Mapping, Optional, Tuple

import pytest

from credcheck.config.provider import AuthClientConfig
from credcheck.modules.auth.authenticator import Authenticator
from credcheck.modules.auth.interfaces import TransportResponse

AUTH_URL = "https://auth.example.com/api/auth"
LICENSE_PAGE = (
    "<html><body><p>Sorry, your license number doesn't allow you to connect "
    "to this server.</p></body></html>"
)


class FakeTransport:
    """
    Transport double returning a canned body or raising a canned error.

    Usage:
        transport = FakeTransport(text='{"token": "abc"}')
        result = await Authenticator(transport=transport).authenticate(...)
        assert transport.calls[0][0] == AUTH_URL
    """

    def __init__(
        self,
        text: str = "{}",
        status_code: int = 200,
        error: Optional[BaseException] = None
    ):
        self.text = text
        self.status_code = status_code
        self.error = error
        self.calls: List[Tuple[str, Mapping[str, str]]] = []

    async def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        self.calls.append((url, headers))
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, text=self.text)

    @property
    def last_headers(self) -> Any:
        return self.calls[-1][1]


@pytest.fixture
def fake_transport():
    """Transport returning an empty JSON object."""
    return FakeTransport()


@pytest.fixture
def auth_config():
    """Default client configuration."""
    return AuthClientConfig()


@pytest.fixture
def authenticator(fake_transport, auth_config):
    """Authenticator wired to the fake transport."""
    return Authenticator(transport=fake_transport, config=auth_config)
