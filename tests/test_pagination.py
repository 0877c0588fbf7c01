"""Tests for the cursor iteration helpers."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from conftest import event_body, list_body
from workos.client import AsyncWorkOs, WorkOs
from workos.events import ListEventsParams
from workos.models import PaginationParams
from workos.pagination import (
    aiterate_items,
    aiterate_pages,
    iterate_items,
    iterate_pages,
    with_cursor,
)

# Three pages keyed by the incoming ``after`` cursor.
PAGES = {
    None: list_body([event_body("event_1"), event_body("event_2")], after="event_2"),
    "event_2": list_body([event_body("event_3"), event_body("event_4")], after="event_4"),
    "event_4": list_body([event_body("event_5")], after=None),
}


def _paged_handler(seen: list[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=PAGES[request.url.params.get("after")])

    return handler


class TestWithCursor:
    def test_copy_leaves_original_untouched(self) -> None:
        params = ListEventsParams(
            pagination=PaginationParams(limit=2), events=["user.created"]
        )
        resumed = with_cursor(params, "event_2")
        assert resumed.pagination.after == "event_2"
        assert resumed.pagination.limit == 2
        assert resumed.events == params.events
        assert params.pagination.after is None


class TestIteratePages:
    def test_walks_until_cursor_is_none(self, make_client: Callable[..., WorkOs]) -> None:
        seen: list[httpx.Request] = []
        events = make_client(_paged_handler(seen)).events()

        pages = list(iterate_pages(events.list_events, ListEventsParams()))

        assert [page.next_cursor for page in pages] == ["event_2", "event_4", None]
        assert [request.url.params.get("after") for request in seen] == [
            None,
            "event_2",
            "event_4",
        ]

    def test_max_pages(self, make_client: Callable[..., WorkOs]) -> None:
        seen: list[httpx.Request] = []
        events = make_client(_paged_handler(seen)).events()

        pages = list(iterate_pages(events.list_events, ListEventsParams(), max_pages=2))
        assert len(pages) == 2
        assert len(seen) == 2

    def test_lazy(self, make_client: Callable[..., WorkOs]) -> None:
        seen: list[httpx.Request] = []
        events = make_client(_paged_handler(seen)).events()

        iterator = iterate_pages(events.list_events, ListEventsParams())
        assert seen == []
        next(iterator)
        assert len(seen) == 1

    def test_iterate_items_in_server_order(self, make_client: Callable[..., WorkOs]) -> None:
        events = make_client(_paged_handler([])).events()
        ids = [event.id for event in iterate_items(events.list_events, ListEventsParams())]
        assert ids == ["event_1", "event_2", "event_3", "event_4", "event_5"]

    def test_filters_carried_to_every_page(self, make_client: Callable[..., WorkOs]) -> None:
        seen: list[httpx.Request] = []
        events = make_client(_paged_handler(seen)).events()

        list(iterate_pages(events.list_events, ListEventsParams(events=["dsync.user.created"])))
        assert all(
            request.url.params.get_list("events[]") == ["dsync.user.created"]
            for request in seen
        )


class TestAsyncIteration:
    @pytest.mark.asyncio
    async def test_aiterate_pages(self, make_async_client: Callable[..., AsyncWorkOs]) -> None:
        seen: list[httpx.Request] = []
        async with make_async_client(_paged_handler(seen)) as workos:
            cursors = [
                page.next_cursor
                async for page in aiterate_pages(workos.events().list_events, ListEventsParams())
            ]
        assert cursors == ["event_2", "event_4", None]

    @pytest.mark.asyncio
    async def test_aiterate_items(self, make_async_client: Callable[..., AsyncWorkOs]) -> None:
        async with make_async_client(_paged_handler([])) as workos:
            ids = [
                event.id
                async for event in aiterate_items(workos.events().list_events, ListEventsParams())
            ]
        assert ids == ["event_1", "event_2", "event_3", "event_4", "event_5"]
