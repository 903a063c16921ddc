"""Credential helpers: Basic auth header construction and password hashing."""

import base64
import hashlib
from dataclasses import dataclass, field


def build_auth_header(username: str, password: str) -> str:
    """
    Build a Basic auth header value for the given username and password.

    No validation is performed here; empty values produce a valid header.
    """
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def hash_password(password: str, salt: str = "") -> str:
    """Hash a password with an optional salt using SHA-256 (lowercase hex)."""
    return hashlib.sha256(f"{password}{salt}".encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class Credentials:
    """Username/password pair for a single authentication attempt."""
    username: str
    password: str = field(repr=False)

    @property
    def is_complete(self) -> bool:
        return bool(self.username) and bool(self.password)

    @property
    def auth_header(self) -> str:
        return build_auth_header(self.username, self.password)
