"""Shared test fixtures for token-strategy tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

# ---------------------------------------------------------------------------
# Request builders
# ---------------------------------------------------------------------------


def build_scope(
    cookies: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
    path: str = "/login",
) -> dict[str, Any]:
    """Build an ASGI HTTP scope carrying the given cookies and headers."""
    raw_headers: list[tuple[bytes, bytes]] = []
    if cookies:
        cookie_header = "; ".join(f"{k}={v}" for k, v in cookies.items())
        raw_headers.append((b"cookie", cookie_header.encode("latin-1")))
    for key, value in (headers or {}).items():
        raw_headers.append((key.lower().encode("latin-1"), value.encode("latin-1")))
    return {"type": "http", "method": "GET", "path": path, "headers": raw_headers}


def build_request(
    cookies: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
) -> Request:
    return Request(build_scope(cookies=cookies, headers=headers))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def alice_request() -> Request:
    """A request carrying identity "alice" and token "t1" as cookies."""
    return build_request(cookies={"username": "alice", "token": "t1"})


@pytest.fixture
def anonymous_request() -> Request:
    """A request with no credentials at all."""
    return build_request()


@pytest.fixture
def alice() -> dict[str, Any]:
    return {"id": 1, "name": "alice"}
