"""workos -- Python client for the WorkOS API.

The package builds authenticated requests against the WorkOS HTTP API,
serialises typed listing parameters into query strings, and deserialises
cursor-paginated JSON responses.  It also keeps a per-client cache of the
remote JSON Web Key Set used to verify session tokens.

Typical usage::

    from workos import ClientConfig, WorkOs
    from workos.events import EventName, ListEventsParams

    with WorkOs(ClientConfig(api_key="sk_example_123456789")) as workos:
        page = workos.events().list_events(
            ListEventsParams(events=[EventName.DSYNC_USER_CREATED])
        )

Modules:
    client: Synchronous and asynchronous API clients.
    models: Pydantic models shared across the package.
    keyset: JWKS models and the shared, lock-guarded key-set slot.
    query: Listing parameter to query-string composition.
    exceptions: Exception hierarchy with exit-code mapping.
"""

__version__ = "0.3.0"

from workos.client import AsyncWorkOs, WorkOs  # noqa: E402
from workos.known_or_unknown import KnownOrUnknown  # noqa: E402
from workos.models import (  # noqa: E402
    ClientConfig,
    ListMetadata,
    Order,
    PaginatedList,
    PaginationParams,
)

__all__ = [
    "AsyncWorkOs",
    "ClientConfig",
    "KnownOrUnknown",
    "ListMetadata",
    "Order",
    "PaginatedList",
    "PaginationParams",
    "WorkOs",
    "__version__",
]
