"""JWKS access for User Management.

Access tokens issued by AuthKit are signed with keys published at
``{base_url}/sso/jwks/{client_id}``.  :meth:`UserManagement.jwks` returns
that key set, fetching it at most once per client: every handle created from
the same client shares the client's key-set slot, and concurrent first-time
callers wait for a single fetch instead of issuing their own.

Token verification itself is left to a JWT library; this module only
supplies the key material.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from workos.exceptions import ConfigError, WorkOsError
from workos.keyset import KeySet, jwks_url, parse_key_set

if TYPE_CHECKING:
    from workos.client import AsyncWorkOs, WorkOs

logger = logging.getLogger(__name__)


def _require_client_id(client_id: str | None) -> str:
    if client_id is None:
        raise ConfigError(
            "Missing client ID: set ClientConfig.client_id (or WORKOS_CLIENT_ID) "
            "to fetch the JWKS"
        )
    return client_id


class UserManagement:
    """User Management API handle bound to a :class:`~workos.client.WorkOs` client.

    `WorkOS Docs: User Management <https://workos.com/docs/user-management>`_
    """

    def __init__(self, workos: WorkOs) -> None:
        self._workos = workos
        self._jwks = workos.jwks_cache

    def get_jwks_url(self) -> str:
        """Return the JWKS URL for the configured client ID.

        Raises:
            ConfigError: If no client ID is configured.
        """
        client_id = _require_client_id(self._workos.client_id)
        return jwks_url(self._workos.base_url, client_id)

    def jwks(self) -> KeySet:
        """Return the remote JSON Web Key Set, fetching it on first use.

        Returns:
            The cached :class:`~workos.keyset.KeySet`.

        Raises:
            ConfigError: If no client ID is configured.  Raised before any
                lock acquisition or network call.
            KeySetLockError: If the key-set slot is poisoned.
            ApiError: If the JWKS endpoint answers with an error status.
            ConnectionError_: On network failure.
            DeserializationError: If the body is not a JWKS document.
        """
        client_id = _require_client_id(self._workos.client_id)
        url = jwks_url(self._workos.base_url, client_id)

        def fetch() -> KeySet:
            try:
                document = self._workos.get_json(url, authenticated=False)
                key_set = parse_key_set(client_id, url, document)
            except WorkOsError as exc:
                logger.warning("Failed to fetch JWKS from %s: %s", url, exc)
                raise
            logger.info("Fetched JWKS for client %s (%d keys)", client_id, len(key_set.keys))
            return key_set

        return self._jwks.get_or_fetch(fetch)


class AsyncUserManagement:
    """User Management API handle bound to an :class:`~workos.client.AsyncWorkOs` client."""

    def __init__(self, workos: AsyncWorkOs) -> None:
        self._workos = workos
        self._jwks = workos.jwks_cache

    def get_jwks_url(self) -> str:
        client_id = _require_client_id(self._workos.client_id)
        return jwks_url(self._workos.base_url, client_id)

    async def jwks(self) -> KeySet:
        """Return the remote JSON Web Key Set.  See :meth:`UserManagement.jwks`."""
        client_id = _require_client_id(self._workos.client_id)
        url = jwks_url(self._workos.base_url, client_id)

        async def fetch() -> KeySet:
            try:
                document = await self._workos.get_json(url, authenticated=False)
                key_set = parse_key_set(client_id, url, document)
            except WorkOsError as exc:
                logger.warning("Failed to fetch JWKS from %s: %s", url, exc)
                raise
            logger.info("Fetched JWKS for client %s (%d keys)", client_id, len(key_set.keys))
            return key_set

        return await self._jwks.get_or_fetch(fetch)
