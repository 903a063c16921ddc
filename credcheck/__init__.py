"""
credcheck - Remote credential verification

Checks a username and password against an authentication endpoint using
HTTP Basic auth, and hashes passwords for local comparison.

Architecture:
- Each module is self-contained with clear interfaces
- The HTTP transport is injected and replaceable
- Failures are reported through a closed error taxonomy

Modules:
- modules.auth: Header building, hashing, authentication
- config: Client configuration providers
- logging_config: Logging setup with credential redaction
"""

from .modules.auth import (
    AUTH_ERROR_CODES,
    AuthErrorCode,
    AuthenticationError,
    Authenticator,
    authenticate_async,
    build_auth_header,
    hash_password,
)

__version__ = "1.0.0"

__all__ = [
    "AUTH_ERROR_CODES",
    "AuthErrorCode",
    "AuthenticationError",
    "Authenticator",
    "authenticate_async",
    "build_auth_header",
    "hash_password",
]
