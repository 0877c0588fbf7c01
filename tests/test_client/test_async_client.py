"""Tests for the asynchronous WorkOS client."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from conftest import API_KEY, BASE_URL
from workos.client import AsyncWorkOs
from workos.exceptions import ApiError, ConnectionError_, DeserializationError, UnauthorizedError
from workos.keyset import AsyncKeySetSlot
from workos.models import ClientConfig


class TestAsyncClient:
    @pytest.mark.asyncio
    async def test_context_manager_and_accessors(self, config: ClientConfig) -> None:
        async with AsyncWorkOs(config) as workos:
            assert workos.base_url == BASE_URL
            assert workos.client_id == "client_123456789"
            assert isinstance(workos.jwks_cache, AsyncKeySetSlot)

    @pytest.mark.asyncio
    async def test_get_json_sends_bearer(
        self, make_async_client: Callable[..., AsyncWorkOs]
    ) -> None:
        seen: list[httpx.Request] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with make_async_client(handler) as workos:
            assert await workos.get_json("/ping") == {"ok": True}
        assert seen[0].headers["Authorization"] == f"Bearer {API_KEY}"
        assert seen[0].headers["User-Agent"].startswith("workos-python/")

    @pytest.mark.asyncio
    async def test_unauthenticated_request(
        self, make_async_client: Callable[..., AsyncWorkOs]
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        async with make_async_client(handler) as workos:
            await workos.get_json("/public", authenticated=False)
        assert "Authorization" not in seen[0].headers


class TestAsyncErrorMapping:
    @pytest.mark.asyncio
    async def test_401(self, make_async_client: Callable[..., AsyncWorkOs]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"message": "Unauthorized"})

        async with make_async_client(handler) as workos:
            with pytest.raises(UnauthorizedError):
                await workos.get_json("/events")

    @pytest.mark.asyncio
    async def test_500(self, make_async_client: Callable[..., AsyncWorkOs]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "boom"})

        async with make_async_client(handler) as workos:
            with pytest.raises(ApiError) as exc_info:
                await workos.get_json("/events")
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_connect_error(self, make_async_client: Callable[..., AsyncWorkOs]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        async with make_async_client(handler) as workos:
            with pytest.raises(ConnectionError_):
                await workos.get_json("/events")

    @pytest.mark.asyncio
    async def test_malformed_json(self, make_async_client: Callable[..., AsyncWorkOs]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>")

        async with make_async_client(handler) as workos:
            with pytest.raises(DeserializationError):
                await workos.get_json("/events")
