"""Caller-driven iteration over cursor-paginated list operations.

List operations return exactly one page per call and never advance on
their own.  The helpers here are thin loops on top of that contract: they
call the operation, yield the page, and call it again with
``pagination.after`` set to the page's ``next_cursor`` until the cursor is
``None``.  The only state they keep is the current cursor, so a caller that
stops early can resume later from the last cursor it saw.

Example::

    events = workos.events()
    for page in iterate_pages(events.list_events, ListEventsParams()):
        handle(page.data)
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import Optional, Protocol, TypeVar

from workos.models import PaginatedList, PaginationParams

T = TypeVar("T")
P = TypeVar("P", bound="Paginated")


class Paginated(Protocol):
    """Any ``List*Params`` model: it carries a ``pagination`` field."""

    pagination: PaginationParams

    def model_copy(self: P, *, update: Optional[dict] = None, deep: bool = False) -> P: ...


def with_cursor(params: P, after: Optional[str]) -> P:
    """Return a copy of *params* resuming after *after*.

    *params* itself is left untouched.
    """
    pagination = params.pagination.model_copy(update={"after": after})
    return params.model_copy(update={"pagination": pagination})


def iterate_pages(
    operation: Callable[[P], PaginatedList[T]],
    params: P,
    max_pages: Optional[int] = None,
) -> Iterator[PaginatedList[T]]:
    """Yield successive pages of *operation*, starting from *params*.

    Args:
        operation: A bound list operation such as ``Events.list_events``.
        params: Parameters of the first request.
        max_pages: Stop after this many pages (default: until exhausted).
    """
    fetched = 0
    while True:
        page = operation(params)
        fetched += 1
        yield page
        if page.next_cursor is None:
            return
        if max_pages is not None and fetched >= max_pages:
            return
        params = with_cursor(params, page.next_cursor)


def iterate_items(
    operation: Callable[[P], PaginatedList[T]],
    params: P,
) -> Iterator[T]:
    """Yield every item of every page, in server order."""
    for page in iterate_pages(operation, params):
        yield from page.data


async def aiterate_pages(
    operation: Callable[[P], Awaitable[PaginatedList[T]]],
    params: P,
    max_pages: Optional[int] = None,
) -> AsyncIterator[PaginatedList[T]]:
    """Async counterpart of :func:`iterate_pages`."""
    fetched = 0
    while True:
        page = await operation(params)
        fetched += 1
        yield page
        if page.next_cursor is None:
            return
        if max_pages is not None and fetched >= max_pages:
            return
        params = with_cursor(params, page.next_cursor)


async def aiterate_items(
    operation: Callable[[P], Awaitable[PaginatedList[T]]],
    params: P,
) -> AsyncIterator[T]:
    """Async counterpart of :func:`iterate_items`."""
    async for page in aiterate_pages(operation, params):
        for item in page.data:
            yield item
