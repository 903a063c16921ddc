"""
URL validation for authentication endpoints.

Only absolute http/https URIs with a host are accepted.
"""

import re

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

_http_url_adapter = TypeAdapter(AnyHttpUrl)

# pydantic silently encodes anything outside the RFC 3986 character set
_URI_CHARS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_valid_web_uri(url: object) -> bool:
    """Check whether ``url`` is a well-formed absolute http(s) URI."""
    if not isinstance(url, str) or not url:
        return False
    if not _URI_CHARS.fullmatch(url) or _BAD_PERCENT_ESCAPE.search(url):
        return False
    if not url.lower().startswith(("http://", "https://")):
        return False

    try:
        parsed = _http_url_adapter.validate_python(url)
    except ValidationError:
        return False

    return parsed.scheme in ("http", "https") and bool(parsed.host)
