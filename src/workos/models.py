"""Canonical Pydantic models shared across the workos package.

Resource-specific models (events, organizations, key sets) live next to the
operations that use them; this module holds the shapes every resource
shares:

**Client configuration** -- :class:`ClientConfig`, validated once when a
client is constructed.

**Pagination protocol** -- :class:`Order`, :class:`PaginationParams`,
:class:`ListMetadata` and :class:`PaginatedList`.  Every list operation takes
a :class:`PaginationParams` and returns one :class:`PaginatedList` page.
Cursors are opaque: the client only echoes back what a previous page
returned in ``list_metadata``.

All models use Pydantic v2.  Response models use ``extra="allow"`` so that
fields added by the API later are preserved in ``model_extra``.
"""

from __future__ import annotations

import enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://api.workos.com"

T = TypeVar("T")


# --- Client Config ---


class ClientConfig(BaseModel):
    """Connection settings for a :class:`~workos.client.WorkOs` client.

    Validated once at construction; operations never re-check it.  The
    ``client_id`` is optional for the client as a whole but required by
    operations that derive URLs from it (the JWKS endpoint), which raise
    :class:`~workos.exceptions.ConfigError` when it is missing.

    Example::

        ClientConfig(
            api_key="sk_example_123456789",
            client_id="client_123456789",
        )
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(description="Secret API key, sent as a bearer token")
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Root URL of the WorkOS API"
    )
    client_id: Optional[str] = Field(
        default=None, description="Client ID used to locate the JWKS endpoint"
    )
    timeout: float = Field(default=30, gt=0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _base_url_is_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("client_id")
    @classmethod
    def _blank_client_id_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


# --- Pagination ---


class Order(str, enum.Enum):
    """Sort order of a list operation, applied to ``created_at``."""

    ASC = "asc"
    DESC = "desc"


class PaginationParams(BaseModel):
    """Pagination parameters accepted by every list operation.

    ``after`` and ``before`` are cursors copied from a previous page's
    :class:`ListMetadata`.  Leave both unset to start from the beginning of
    the stream.
    """

    order: Order = Order.DESC
    limit: Optional[int] = Field(
        default=None, ge=1, le=100, description="Maximum number of items per page"
    )
    after: Optional[str] = Field(
        default=None, description="Return items after this cursor"
    )
    before: Optional[str] = Field(
        default=None, description="Return items before this cursor"
    )


class ListMetadata(BaseModel):
    """Cursors returned alongside a page of results."""

    model_config = ConfigDict(extra="allow")

    after: Optional[str] = None
    before: Optional[str] = None


class PaginatedList(BaseModel, Generic[T]):
    """One page of a list operation.

    ``data`` keeps the order the server returned.  Pass :attr:`next_cursor`
    as ``PaginationParams.after`` to request the following page; ``None``
    means the stream is exhausted.
    """

    model_config = ConfigDict(extra="allow")

    object: str = "list"
    data: list[T] = Field(default_factory=list)
    list_metadata: ListMetadata = Field(default_factory=ListMetadata)

    @property
    def next_cursor(self) -> Optional[str]:
        """Cursor for the next page, or ``None`` at the end of the stream."""
        return self.list_metadata.after

    @property
    def previous_cursor(self) -> Optional[str]:
        """Cursor for the previous page, or ``None`` at the start of the stream."""
        return self.list_metadata.before
