"""Asynchronous WorkOS client -- mirrors :class:`~workos.client.sync_client.WorkOs`.

This module provides :class:`AsyncWorkOs`, the non-blocking counterpart to
:class:`~workos.client.sync_client.WorkOs`.  It wraps
:class:`httpx.AsyncClient` and offers the same feature set -- bearer auth,
error mapping and resource handles -- with ``await``-able operations.

Its JWKS slot is an :class:`~workos.keyset.AsyncKeySetSlot`: a cache-miss
fetch holds an :class:`asyncio.Lock`, so other tasks asking for the key set
wait for that single fetch while unrelated tasks keep running.

See Also:
    :class:`~workos.client.sync_client.WorkOs` for the blocking equivalent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import httpx

from workos.client.response import decode_json, raise_for_status
from workos.client.sync_client import USER_AGENT
from workos.exceptions import ConnectionError_
from workos.keyset import AsyncKeySetSlot
from workos.models import ClientConfig

if TYPE_CHECKING:
    from workos.events import AsyncEvents
    from workos.organizations import AsyncOrganizations
    from workos.user_management import AsyncUserManagement

logger = logging.getLogger(__name__)


class AsyncWorkOs:
    """Asynchronous client for the WorkOS API.

    May be shared between tasks of one event loop.  Close it with
    :meth:`aclose`, or use it as an async context manager.

    Args:
        config: Validated connection settings.
        transport: Optional httpx async transport, mainly for tests.

    Example::

        async with AsyncWorkOs(config) as workos:
            page = await workos.events().list_events(ListEventsParams())
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._jwks_slot = AsyncKeySetSlot()
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            verify=config.verify_ssl,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncWorkOs:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def client_id(self) -> Optional[str]:
        return self._config.client_id

    @property
    def jwks_cache(self) -> AsyncKeySetSlot:
        return self._jwks_slot

    def events(self) -> AsyncEvents:
        from workos.events import AsyncEvents

        return AsyncEvents(self)

    def organizations(self) -> AsyncOrganizations:
        from workos.organizations import AsyncOrganizations

        return AsyncOrganizations(self)

    def user_management(self) -> AsyncUserManagement:
        from workos.user_management import AsyncUserManagement

        return AsyncUserManagement(self)

    # ------------------------------------------------------------------ #
    # Requests
    # ------------------------------------------------------------------ #

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Any] = None,
        json_body: Optional[Any] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Send one HTTP request and map error statuses to exceptions.

        Behaves identically to
        :meth:`~workos.client.sync_client.WorkOs.request` but is
        non-blocking.

        Raises:
            UnauthorizedError: On 401.
            ApiError: On any other status of 400 or above.
            ConnectionError_: On network / timeout errors.
        """
        headers = self._auth_headers() if authenticated else {}
        logger.debug("%s %s", method.upper(), path)
        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                json=json_body,
                headers=headers,
            )
        except httpx.TransportError as exc:
            raise ConnectionError_(f"Request to {path} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method.upper(), path, response.status_code)
        raise_for_status(response)
        return response

    async def get_json(
        self,
        path: str,
        params: Optional[Any] = None,
        authenticated: bool = True,
    ) -> Any:
        """Send a GET request and return the decoded JSON body."""
        response = await self.request(
            "GET", path, params=params, authenticated=authenticated
        )
        return decode_json(response)

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._config.api_key}"}
