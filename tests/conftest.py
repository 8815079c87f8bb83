"""Shared test fixtures for the key server helpers."""

from __future__ import annotations

from typing import Callable

import pytest
from fastapi import Request

from keyserver.core.http import RequestContext


def _build_request(
    scheme: str = "http",
    host: str = "keys.example.org",
    headers: dict[str, str] | None = None,
    path: str = "/",
    query: str = "",
) -> Request:
    """Build a bare Starlette request from an ASGI scope."""
    raw_headers = [(b"host", host.encode())] if host else []
    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode(), value.encode()))
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": scheme,
        "path": path,
        "query_string": query.encode(),
        "headers": raw_headers,
        "server": (host or "localhost", 443 if scheme == "https" else 80),
    }
    return Request(scope)


@pytest.fixture
def host() -> str:
    return "keys.example.org"


@pytest.fixture
def plain_ctx(host: str) -> RequestContext:
    """Direct plaintext connection, no proxy headers."""
    return RequestContext(secure=False, protocol="http", host=host)


@pytest.fixture
def secure_ctx(host: str) -> RequestContext:
    """Direct TLS connection."""
    return RequestContext(secure=True, protocol="https", host=host)


@pytest.fixture
def proxied_https_ctx(host: str) -> RequestContext:
    """Plaintext hop from a load balancer that terminated TLS."""
    return RequestContext(
        secure=False,
        protocol="http",
        host=host,
        headers={"X-Forwarded-Proto": "https"},
    )


@pytest.fixture
def proxied_http_ctx(host: str) -> RequestContext:
    """Plaintext hop from a load balancer the client reached over http."""
    return RequestContext(
        secure=False,
        protocol="http",
        host=host,
        headers={"X-Forwarded-Proto": "http"},
    )


@pytest.fixture
def make_request() -> Callable[..., Request]:
    return _build_request
