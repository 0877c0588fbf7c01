"""JSON Web Key Set models and the shared, lazily populated key-set slot.

Session tokens issued by WorkOS are verified against the JWKS published at
``{base_url}/sso/jwks/{client_id}``.  Fetching that document on every
verification would be wasteful, so each client owns exactly one slot that
is populated on first demand and then reused for the lifetime of the
client.

The slot guarantees *single-flight* population: the lock is held for the
whole duration of a cache-miss fetch, so N concurrent first-time callers
trigger exactly one HTTP request and all of them observe the same
:class:`KeySet`.  The price is that concurrent first accesses are serialised
behind the slowest fetch, and a stalled fetch blocks every other lookup on
the same client.  There is no expiry, refresh or invalidation: once
populated, the slot never reverts to empty.

Failure handling:

* An ``Exception`` raised by the fetch propagates unchanged and leaves the
  slot empty, so a later call retries the fetch.
* A ``BaseException`` that is not an ``Exception`` (``KeyboardInterrupt``,
  ``SystemExit``) aborting the fetch *poisons* the slot.  Every later
  acquisition raises :class:`~workos.exceptions.KeySetLockError` instead of
  blocking or crashing.

:class:`KeySetSlot` serves :class:`~workos.client.WorkOs` (threads);
:class:`AsyncKeySetSlot` serves :class:`~workos.client.AsyncWorkOs` and uses
an :class:`asyncio.Lock` so a pending fetch does not block unrelated tasks.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import Any, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, ValidationError

from workos.exceptions import DeserializationError, KeySetLockError

logger = logging.getLogger(__name__)


# --- Models ---


class Jwk(BaseModel):
    """A single key record from a JWKS document (RFC 7517).

    Only the members a verifier commonly needs are declared; any other
    member is preserved in ``model_extra``.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    kty: str
    kid: Optional[str] = None
    use: Optional[str] = None
    alg: Optional[str] = None
    n: Optional[str] = None
    e: Optional[str] = None
    x5c: tuple[str, ...] = ()


class KeySet(BaseModel):
    """Immutable snapshot of the remote key material for one client ID.

    Safe to share between threads and tasks: it is never mutated after
    construction.

    Args:
        client_id: The client ID the JWKS URL was derived from.
        url: The URL the document was fetched from.
        keys: The key records, in document order.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str
    url: str
    keys: tuple[Jwk, ...] = ()

    def find(self, kid: str) -> Optional[Jwk]:
        """Return the key whose ``kid`` matches, or ``None``."""
        for key in self.keys:
            if key.kid == kid:
                return key
        return None

    @property
    def key_ids(self) -> list[str]:
        """The ``kid`` of every key that declares one."""
        return [key.kid for key in self.keys if key.kid is not None]


def jwks_url(base_url: str, client_id: str) -> str:
    """Derive the JWKS endpoint for *client_id*."""
    return f"{base_url.rstrip('/')}/sso/jwks/{quote(client_id, safe='')}"


def parse_key_set(client_id: str, url: str, document: Any) -> KeySet:
    """Build a :class:`KeySet` from a decoded JWKS document.

    Raises:
        DeserializationError: If *document* is not a JWKS object.
    """
    if not isinstance(document, dict) or not isinstance(document.get("keys"), list):
        raise DeserializationError(f"JWKS document from {url} has no 'keys' array")
    try:
        return KeySet(client_id=client_id, url=url, keys=document["keys"])
    except ValidationError as exc:
        raise DeserializationError(f"Invalid JWKS document from {url}: {exc}") from exc


# --- Slots ---


class KeySetSlot:
    """Thread-safe, fetch-once holder for a :class:`KeySet`.

    Shared by every handle created from the owning
    :class:`~workos.client.WorkOs` client.

    Example::

        slot = KeySetSlot()
        key_set = slot.get_or_fetch(lambda: fetch_from_network())
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[KeySet] = None
        self._poisoned: Optional[str] = None

    @property
    def value(self) -> Optional[KeySet]:
        """The stored key set, or ``None`` if not yet populated."""
        return self._value

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned is not None

    def get_or_fetch(self, fetch: Callable[[], KeySet]) -> KeySet:
        """Return the stored key set, calling *fetch* under the lock on a miss.

        Args:
            fetch: Zero-argument callable that performs the network fetch.

        Returns:
            The stored (or freshly fetched) :class:`KeySet`.

        Raises:
            KeySetLockError: If the slot was poisoned by an aborted fetch.
            Exception: Whatever *fetch* raises; the slot stays empty.
        """
        with self._locked():
            if self._value is not None:
                logger.debug("JWKS cache hit for client %s", self._value.client_id)
                return self._value
            try:
                key_set = fetch()
            except BaseException as exc:
                if not isinstance(exc, Exception):
                    self._poisoned = f"fetch aborted by {type(exc).__name__}"
                raise
            self._value = key_set
            return key_set

    @contextmanager
    def _locked(self) -> Iterator[None]:
        self._lock.acquire()
        try:
            if self._poisoned is not None:
                raise KeySetLockError(f"JWKS cache lock poisoned: {self._poisoned}")
            yield
        finally:
            self._lock.release()


class AsyncKeySetSlot:
    """Task-safe, fetch-once holder for a :class:`KeySet`.

    The asyncio counterpart of :class:`KeySetSlot`.  Task cancellation while
    fetching releases the lock and leaves the slot empty without poisoning
    it, so callers may bound latency with :func:`asyncio.wait_for`.  The slot
    is bound to the event loop that first uses it; using it from another
    loop raises :class:`~workos.exceptions.KeySetLockError`.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._value: Optional[KeySet] = None
        self._poisoned: Optional[str] = None

    @property
    def value(self) -> Optional[KeySet]:
        return self._value

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned is not None

    async def get_or_fetch(self, fetch: Callable[[], Awaitable[KeySet]]) -> KeySet:
        """Return the stored key set, awaiting *fetch* under the lock on a miss.

        Raises:
            KeySetLockError: If the slot is poisoned or its lock belongs to
                a different event loop.
            Exception: Whatever *fetch* raises; the slot stays empty.
        """
        try:
            await self._lock.acquire()
        except RuntimeError as exc:
            raise KeySetLockError(f"Cannot acquire JWKS cache lock: {exc}") from exc
        try:
            if self._poisoned is not None:
                raise KeySetLockError(f"JWKS cache lock poisoned: {self._poisoned}")
            if self._value is not None:
                logger.debug("JWKS cache hit for client %s", self._value.client_id)
                return self._value
            try:
                key_set = await fetch()
            except asyncio.CancelledError:
                raise
            except BaseException as exc:
                if not isinstance(exc, Exception):
                    self._poisoned = f"fetch aborted by {type(exc).__name__}"
                raise
            self._value = key_set
            return key_set
        finally:
            self._lock.release()
