"""Credential sources backed by starlette's request objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starlette.datastructures import Headers
from starlette.requests import HTTPConnection

from token_strategy._types import Credentials
from token_strategy.auth.protocol import CredentialSource
from token_strategy.constants import (
    DEFAULT_IDENTITY_FIELD,
    DEFAULT_IDENTITY_HEADER,
    DEFAULT_TOKEN_FIELD,
    DEFAULT_TOKEN_HEADER,
)


_ASGI_SCOPE_TYPES = ("http", "websocket")


def _request_part(request: Any, name: str) -> Any:
    """Return the request's ``cookies`` or ``headers``, or ``None`` if it has none.

    A raw ASGI scope is wrapped in ``HTTPConnection`` so the values come
    pre-parsed. Any other mapping is read by key, anything else by attribute.
    """
    if isinstance(request, HTTPConnection):
        return getattr(request, name)
    if isinstance(request, Mapping):
        if request.get("type") in _ASGI_SCOPE_TYPES:
            return getattr(HTTPConnection(request), name)
        return request.get(name)
    return getattr(request, name, None)


def _credentials(identity: Any, token: Any) -> Credentials | None:
    if not identity or not token:
        return None
    return Credentials(identity=str(identity), token=str(token))


class CookieCredentialSource:
    """Reads the identity and token from request cookies.

    Args:
        identity_field: Cookie holding the identity.
        token_field: Cookie holding the token.
    """

    def __init__(
        self,
        identity_field: str = DEFAULT_IDENTITY_FIELD,
        token_field: str = DEFAULT_TOKEN_FIELD,
    ) -> None:
        self.identity_field = identity_field
        self.token_field = token_field

    def extract(self, request: Any) -> Credentials | None:
        cookies = _request_part(request, "cookies") or {}
        return _credentials(cookies.get(self.identity_field), cookies.get(self.token_field))


class HeaderCredentialSource:
    """Reads the identity and token from request headers (case-insensitive)."""

    def __init__(
        self,
        identity_header: str = DEFAULT_IDENTITY_HEADER,
        token_header: str = DEFAULT_TOKEN_HEADER,
    ) -> None:
        self.identity_header = identity_header.lower()
        self.token_header = token_header.lower()

    def extract(self, request: Any) -> Credentials | None:
        headers = _request_part(request, "headers")
        if headers is None:
            return None
        if not isinstance(headers, Headers):
            headers = {str(k).lower(): v for k, v in headers.items()}
        return _credentials(headers.get(self.identity_header), headers.get(self.token_header))


# Verify protocol compliance at import time
assert isinstance(CookieCredentialSource(), CredentialSource)
assert isinstance(HeaderCredentialSource(), CredentialSource)
