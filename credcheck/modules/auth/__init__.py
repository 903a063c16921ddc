"""
Authentication Module - Black Box Interface

Purpose: Verify a username/password pair against a remote endpoint
Interface: authenticate_async(), Authenticator, build_auth_header(), hash_password()
Hidden: Header merging, transport details, response interpretation

The transport and URL validator are injected, so this module can be
driven by any HTTP implementation without affecting callers.
"""

from .authenticator import MACHINE_UUID_HEADER, AuthRequest, Authenticator, authenticate_async
from .credentials import Credentials, build_auth_header, hash_password
from .errors import AUTH_ERROR_CODES, AuthErrorCode, AuthFailure, AuthenticationError
from .factory import AuthFactory
from .interfaces import Transport, TransportResponse, UrlValidator
from .result import AuthResult
from .transport import HttpxTransport
from .validation import is_valid_web_uri

__all__ = [
    "AUTH_ERROR_CODES",
    "MACHINE_UUID_HEADER",
    "AuthErrorCode",
    "AuthFactory",
    "AuthFailure",
    "AuthRequest",
    "AuthResult",
    "AuthenticationError",
    "Authenticator",
    "Credentials",
    "HttpxTransport",
    "Transport",
    "TransportResponse",
    "UrlValidator",
    "authenticate_async",
    "build_auth_header",
    "hash_password",
    "is_valid_web_uri",
]
