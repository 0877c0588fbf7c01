"""Synchronous WorkOS client.

This module provides :class:`WorkOs`, the blocking entry point of the
library.  It wraps :class:`httpx.Client` and layers on:

- **Bearer auth** -- the API key from :class:`~workos.models.ClientConfig`
  is attached verbatim as ``Authorization: Bearer <key>``.
- **Error mapping** -- HTTP errors become
  :class:`~workos.exceptions.UnauthorizedError` or
  :class:`~workos.exceptions.ApiError`; network failures become
  :class:`~workos.exceptions.ConnectionError_`.
- **Resource handles** -- :meth:`WorkOs.events`,
  :meth:`WorkOs.organizations` and :meth:`WorkOs.user_management` return
  lightweight objects bound to this client.
- **Shared JWKS slot** -- one :class:`~workos.keyset.KeySetSlot` per
  client, shared by every handle created from it.

Requests are not retried.  Connection pooling and TLS are left to httpx.

See Also:
    :class:`~workos.client.async_client.AsyncWorkOs` for the non-blocking
    equivalent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import httpx

from workos import __version__
from workos.client.response import decode_json, raise_for_status
from workos.exceptions import ConnectionError_
from workos.keyset import KeySetSlot
from workos.models import ClientConfig

if TYPE_CHECKING:
    from workos.events import Events
    from workos.organizations import Organizations
    from workos.user_management import UserManagement

logger = logging.getLogger(__name__)

USER_AGENT = f"workos-python/{__version__}"


class WorkOs:
    """Synchronous client for the WorkOS API.

    The client may be shared between threads.  Close it when done, or use it
    as a context manager.

    Args:
        config: Validated connection settings.
        transport: Optional httpx transport, mainly for tests
            (:class:`httpx.MockTransport`).

    Example::

        with WorkOs(ClientConfig(api_key="sk_example_123456789")) as workos:
            page = workos.events().list_events(ListEventsParams())
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._jwks_slot = KeySetSlot()
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            verify=config.verify_ssl,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> WorkOs:
        """Build a client from ``WORKOS_*`` environment variables.

        Keyword arguments override the environment; see
        :func:`workos.config.load_config`.
        """
        from workos.config import load_config

        return cls(load_config(**overrides))

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> WorkOs:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

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
    def jwks_cache(self) -> KeySetSlot:
        """The key-set slot shared by every handle of this client."""
        return self._jwks_slot

    def events(self) -> Events:
        """Return an :class:`~workos.events.Events` handle."""
        from workos.events import Events

        return Events(self)

    def organizations(self) -> Organizations:
        """Return an :class:`~workos.organizations.Organizations` handle."""
        from workos.organizations import Organizations

        return Organizations(self)

    def user_management(self) -> UserManagement:
        """Return a :class:`~workos.user_management.UserManagement` handle."""
        from workos.user_management import UserManagement

        return UserManagement(self)

    # ------------------------------------------------------------------ #
    # Requests
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Any] = None,
        json_body: Optional[Any] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """Send one HTTP request and map error statuses to exceptions.

        Args:
            method: HTTP method.
            path: URL path relative to ``base_url``, or an absolute URL.
            params: Query parameters; a list of ``(key, value)`` pairs keeps
                repeated keys and their order.
            json_body: JSON-serialisable request body.
            authenticated: Attach the bearer token (default ``True``).

        Returns:
            The successful :class:`httpx.Response`.

        Raises:
            UnauthorizedError: On 401.
            ApiError: On any other status of 400 or above.
            ConnectionError_: On network / timeout errors.
        """
        headers = self._auth_headers() if authenticated else {}
        logger.debug("%s %s", method.upper(), path)
        try:
            response = self._client.request(
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

    def get_json(
        self,
        path: str,
        params: Optional[Any] = None,
        authenticated: bool = True,
    ) -> Any:
        """Send a GET request and return the decoded JSON body.

        Raises:
            DeserializationError: If the body is not valid JSON.
        """
        response = self.request("GET", path, params=params, authenticated=authenticated)
        return decode_json(response)

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._config.api_key}"}
