"""
Authentication result returned by the Authenticator.

A result is either a success carrying the server payload or a failure
carrying an AuthFailure. Callers that prefer exceptions use unwrap().
"""

from dataclasses import dataclass
from typing import Any, Optional

from .errors import AuthFailure, AuthenticationError


@dataclass(frozen=True)
class AuthResult:
    """Standardized authentication result."""
    ok: bool
    payload: Any = None
    failure: Optional[AuthFailure] = None

    @classmethod
    def success(cls, payload: Any) -> "AuthResult":
        return cls(ok=True, payload=payload)

    @classmethod
    def failed(cls, failure: AuthFailure) -> "AuthResult":
        return cls(ok=False, failure=failure)

    @property
    def error(self) -> Optional[str]:
        """Failure message, or None for a successful result."""
        return self.failure.message if self.failure else None

    def unwrap(self) -> Any:
        """
        Return the payload of a successful result.

        Raises:
            AuthenticationError: if the result is a failure
        """
        if not self.ok:
            raise AuthenticationError(self.failure)
        return self.payload
