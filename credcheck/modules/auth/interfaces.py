"""Authentication interfaces following Black Box Design principles."""
from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response as seen by the Authenticator."""
    status_code: int
    text: str


class Transport(Protocol):
    """Protocol for the HTTP transport - allows swappable implementations."""

    async def get(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        """
        Issue a GET request.

        Args:
            url: Absolute URL to request
            headers: Request headers

        Returns:
            TransportResponse with status and body text

        Raises:
            Any exception on connectivity failure
        """
        ...


class UrlValidator(Protocol):
    """Protocol for URL syntax validation."""

    def __call__(self, url: str) -> bool:
        ...
