"""Shared test fixtures for workos.

Provides client configuration, mock-transport client factories and canned
response bodies.  HTTP traffic never leaves the process: every client is
built on :class:`httpx.MockTransport` with a handler defined by the test.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from workos.client import AsyncWorkOs, WorkOs
from workos.models import ClientConfig
from workos.output import reset_output

API_KEY = "sk_example_123456789"
CLIENT_ID = "client_123456789"
BASE_URL = "https://api.workos.test"

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager keeps references to sys.stdout/sys.stderr; CliRunner
    swaps those streams per invocation, so a stale manager would write to a
    closed file.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _clear_workos_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep WORKOS_* variables from the developer's shell out of the tests."""
    for var in ["WORKOS_API_KEY", "WORKOS_CLIENT_ID", "WORKOS_BASE_URL", "WORKOS_TIMEOUT"]:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> ClientConfig:
    """Configuration with a client ID, pointing at a fake host."""
    return ClientConfig(api_key=API_KEY, client_id=CLIENT_ID, base_url=BASE_URL)


@pytest.fixture
def config_without_client_id() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, base_url=BASE_URL)


# ---------------------------------------------------------------------------
# Client factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_client(config: ClientConfig) -> Callable[..., WorkOs]:
    """Return a factory building a :class:`WorkOs` on a mock transport.

    Usage::

        client = make_client(handler)
        client = make_client(handler, config=other_config)
    """
    created: list[WorkOs] = []

    def _make(handler: Handler, config: ClientConfig = config) -> WorkOs:
        client = WorkOs(config, transport=httpx.MockTransport(handler))
        created.append(client)
        return client

    yield _make
    for client in created:
        client.close()


@pytest.fixture
def make_async_client(config: ClientConfig) -> Callable[..., AsyncWorkOs]:
    """Return a factory building an :class:`AsyncWorkOs` on a mock transport.

    *handler* may be a plain function or a coroutine function.
    """

    def _make(handler: Callable[[httpx.Request], Any], config: ClientConfig = config) -> AsyncWorkOs:
        return AsyncWorkOs(config, transport=httpx.MockTransport(handler))

    return _make


# ---------------------------------------------------------------------------
# Canned bodies
# ---------------------------------------------------------------------------


def event_body(event_id: str, name: str = "dsync.group.user_added") -> dict[str, Any]:
    return {
        "object": "event",
        "id": event_id,
        "event": name,
        "data": {
            "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
            "user": {
                "id": "directory_user_01E1X56GH84T3FB41SD6PZGDBX",
                "first_name": "Eric",
                "last_name": "Schneider",
                "email": "eric@example.com",
                "state": "active",
            },
        },
        "created_at": "2023-06-09T18:12:01.837Z",
    }


def list_body(data: list[dict[str, Any]], after: str | None = None, before: str | None = None) -> dict[str, Any]:
    return {
        "object": "list",
        "data": data,
        "list_metadata": {"after": after, "before": before},
    }


@pytest.fixture
def jwks_document() -> dict[str, Any]:
    return {
        "keys": [
            {
                "alg": "RS256",
                "kty": "RSA",
                "use": "sig",
                "n": "0vx7agoebGcQSuuPiLJXZptN9nndrQmbXEps2aiAFbWhM78LhWx4cbbfAAtVT86zwu1RK7aPFFxuhDR1L6tSoc_BJECPebWKRXjBZCiFV4n3oknjhMstn64tZ_2W-5JsGY4Hc5n9yBXArwl93lqt7_RN5w6Cf0h4QyQ5v-65YGjQR0_FDW2QvzqY368QQMicAtaSqzs8KJZgnYb9c7d0zgdAZHzu6qMQvRL5hajrn1n91CbOpbISD08qNLyrdkt-bFTWhAI4vMQFh6WeZu0fM4lFd2NcRwr3XPksINHaQ-G_xBniIqbw0Ls1jF44-csFCur-kEgU8awapJzKnqDKgw",
                "e": "AQAB",
                "kid": "sso_oidc_key_pair_01H2GNQD5D7ZE06FDDS75NFPHY",
                "x5c": ["MIIDQjCCAiqgAwIBAgIGATz/FuLiMA0GCSqGSIb3DQEBBQUAMGIxCzAJB"],
                "x5t#S256": "ZjQzYjE0ZDAtZDNlZi00YzNjLWE1YjEtMzg5ZjQ2MzM4NmZi",
            }
        ]
    }
