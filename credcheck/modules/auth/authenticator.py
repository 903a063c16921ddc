"""
Credential verification against a remote authentication endpoint.

This module follows Black Box Design principles:
- Accepts the transport and URL validator via constructor injection
- Performs exactly one request per authentication attempt
- Reports every failure as an AuthFailure, never as a raw exception
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import httpx

from ...config.provider import AuthClientConfig
from .credentials import Credentials
from .errors import AuthErrorCode, AuthFailure
from .interfaces import Transport, UrlValidator
from .result import AuthResult
from .transport import HttpxTransport
from .validation import is_valid_web_uri

logger = logging.getLogger(__name__)

MACHINE_UUID_HEADER = "machineUUID"


@dataclass(frozen=True)
class AuthRequest:
    """Everything needed for a single authentication attempt."""
    url: str
    credentials: Credentials
    extra_headers: Mapping[str, str] = field(default_factory=dict)
    machine_uuid: Optional[str] = None


class Authenticator:
    """
    Verifies a username and password against an authentication URL.

    This class is a black box that:
    - Validates the URL and credentials before any network I/O
    - Sends a single GET request with a Basic Authorization header
    - Interprets the response body (license marker, JSON, error field)
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        url_validator: Optional[UrlValidator] = None,
        config: Optional[AuthClientConfig] = None
    ):
        """
        Initialize with injected dependencies.

        Args:
            transport: HTTP transport (defaults to HttpxTransport built from config)
            url_validator: URL syntax check (defaults to is_valid_web_uri)
            config: Client configuration
        """
        self.config = config or AuthClientConfig()
        self.transport = transport or HttpxTransport(
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
            raise_for_status=self.config.raise_for_status
        )
        self.url_validator = url_validator or is_valid_web_uri

    async def authenticate(
        self,
        url: str,
        username: str,
        password: str,
        extra_headers: Optional[Mapping[str, str]] = None,
        machine_uuid: Optional[str] = None
    ) -> AuthResult:
        """
        Check whether the username and password are valid for ``url``.

        Args:
            url: The URL to authenticate against
            username: The username to test
            password: The password to test
            extra_headers: Extra headers, applied last so they win on collision
            machine_uuid: Optional value for the machineUUID header

        Returns:
            AuthResult with the parsed JSON payload or the failure
        """
        return await self.authenticate_request(
            AuthRequest(
                url=url,
                credentials=Credentials(username, password),
                extra_headers=extra_headers or {},
                machine_uuid=machine_uuid
            )
        )

    async def authenticate_request(self, request: AuthRequest) -> AuthResult:
        """Run one authentication attempt described by ``request``."""
        if not self.url_validator(request.url):
            return self._fail(AuthErrorCode.INVALID_URL, request)

        if not request.credentials.is_complete:
            return self._fail(AuthErrorCode.MISSING_CREDENTIALS, request)

        try:
            headers = self.build_headers(request)
            response = await self.transport.get(request.url, headers)
        except Exception as e:
            logger.warning(f"Authentication request to {request.url} failed: {type(e).__name__}: {e}")
            return AuthResult.failed(AuthFailure.from_code(AuthErrorCode.CONNECTION_FAILURE))

        body = response.text or ""

        # License rejections come back as a non-JSON page
        if self.config.license_marker and self.config.license_marker in body:
            return self._fail(AuthErrorCode.LICENSE_ERROR, request)

        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            logger.debug(f"Unparseable response from {request.url} (status {response.status_code})")
            return self._fail(AuthErrorCode.PARSING_ERROR, request)

        server_error = _extract_error(payload)
        if server_error is not None:
            logger.info(
                f"Server rejected credentials for {request.credentials.username!r}: {server_error}"
            )
            return AuthResult.failed(AuthFailure.from_server(server_error))

        logger.info(f"Authenticated {request.credentials.username!r} against {request.url}")
        return AuthResult.success(payload)

    def build_headers(self, request: AuthRequest) -> httpx.Headers:
        """
        Merge request headers. Later writes replace earlier ones regardless of case:
        Authorization, configured defaults, machineUUID, caller extra headers.
        """
        headers = httpx.Headers({"Authorization": request.credentials.auth_header})
        headers.update(self.config.default_headers)

        machine_uuid = request.machine_uuid or self.config.machine_uuid
        if machine_uuid:
            headers[MACHINE_UUID_HEADER] = machine_uuid

        headers.update(request.extra_headers)
        return headers

    def _fail(self, code: AuthErrorCode, request: AuthRequest) -> AuthResult:
        logger.debug(f"Authentication against {request.url!r} failed: {code.value}")
        return AuthResult.failed(AuthFailure.from_code(code))


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def _extract_error(payload: Any) -> Optional[str]:
    if not isinstance(payload, Mapping):
        return None
    error = payload.get("error")
    if not error:
        return None
    return error if isinstance(error, str) else json.dumps(error)


async def authenticate_async(
    url: str,
    username: str,
    password: str,
    extra_headers: Optional[Mapping[str, str]] = None,
    *,
    machine_uuid: Optional[str] = None,
    transport: Optional[Transport] = None,
    config: Optional[AuthClientConfig] = None
) -> Any:
    """
    Authenticate and return the server's JSON payload.

    Raises:
        AuthenticationError: carrying one of the AUTH_ERROR_CODES messages,
            or the error message reported by the server
    """
    authenticator = Authenticator(transport=transport, config=config)
    result = await authenticator.authenticate(
        url, username, password, extra_headers, machine_uuid=machine_uuid
    )
    return result.unwrap()
