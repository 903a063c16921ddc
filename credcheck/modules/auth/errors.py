"""
Authentication error taxonomy.

Every failure reported by the auth module carries exactly one of the
messages defined here, or a message supplied verbatim by the server.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class AuthErrorCode(str, Enum):
    """Closed set of locally known failure categories."""

    CONNECTION_FAILURE = "Unable to connect"
    INVALID_URL = "Invalid URL"
    INVALID_PASSWORD = "Invalid username or password"
    MISSING_CREDENTIALS = "Missing username and/or password"
    PARSING_ERROR = "Unable to parse server response"
    LICENSE_ERROR = "The server reported a license error"


# Symbolic name -> human readable message, exported for callers to match against
AUTH_ERROR_CODES: Mapping[str, str] = MappingProxyType(
    {code.name: code.value for code in AuthErrorCode}
)


@dataclass(frozen=True)
class AuthFailure:
    """
    A single authentication failure.

    ``code`` is None when the message was reported by the server and
    passed through unchanged.
    """
    message: str
    code: Optional[AuthErrorCode] = None

    @classmethod
    def from_code(cls, code: AuthErrorCode) -> "AuthFailure":
        return cls(message=code.value, code=code)

    @classmethod
    def from_server(cls, message: str) -> "AuthFailure":
        return cls(message=message, code=None)

    @property
    def is_server_message(self) -> bool:
        return self.code is None

    def matches(self, code: AuthErrorCode) -> bool:
        """Check whether this failure carries the message of ``code``."""
        return self.message == code.value


class AuthenticationError(Exception):
    """Raised when an authentication attempt fails."""

    def __init__(self, failure: AuthFailure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def code(self) -> Optional[AuthErrorCode]:
        return self.failure.code

    @property
    def message(self) -> str:
        return self.failure.message
