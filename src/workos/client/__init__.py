"""HTTP client module for workos.

Provides synchronous and asynchronous clients that wrap :mod:`httpx` with
bearer-token auth, error mapping and per-client JWKS caching.

Classes:
    :class:`WorkOs` -- blocking client backed by :class:`httpx.Client`.
    :class:`AsyncWorkOs` -- non-blocking client backed by :class:`httpx.AsyncClient`.

Example::

    from workos.client import WorkOs

    with WorkOs(config) as workos:
        key_set = workos.user_management().jwks()
"""

from workos.client.async_client import AsyncWorkOs
from workos.client.sync_client import WorkOs

__all__ = ["WorkOs", "AsyncWorkOs"]
