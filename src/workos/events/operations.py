"""List Events.

``GET /events`` returns events up to 30 days old, newest first by default.
The stream is paged with cursors: each call returns one page, and the
caller resumes by passing ``page.next_cursor`` back as
``pagination.after``.  Nothing is fetched ahead of time and no iterator
state is kept, so any previously observed cursor can be replayed.

``range_start`` and ``after`` are mutually exclusive.  The API rejects the
combination with an :class:`~workos.exceptions.ApiError`; it is not
checked locally.  ``range_start`` without ``range_end`` returns every event
since ``range_start``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from workos.client.response import parse_model
from workos.events.types import Event, EventName
from workos.known_or_unknown import KnownOrUnknown
from workos.models import PaginatedList, PaginationParams
from workos.query import compose_query

if TYPE_CHECKING:
    from workos.client import AsyncWorkOs, WorkOs

DateLike = Union[datetime, date, str]


class ListEventsParams(BaseModel):
    """Parameters for :meth:`Events.list_events`.

    Example::

        ListEventsParams(
            events=[EventName.DSYNC_USER_CREATED, EventName.DSYNC_USER_UPDATED],
            range_start="2024-01-01",
        )
    """

    model_config = ConfigDict(populate_by_name=True)

    pagination: PaginationParams = Field(default_factory=PaginationParams)
    events: list[KnownOrUnknown[EventName]] = Field(
        default_factory=list,
        serialization_alias="events[]",
        description="Only return events of these types; empty means all types",
    )
    organization_id: Optional[str] = Field(
        default=None,
        description="Only return events of this organization. User events "
        "such as user.created are not organization specific.",
    )
    range_start: Optional[DateLike] = Field(
        default=None, description="ISO-8601 start of the event stream"
    )
    range_end: Optional[DateLike] = Field(
        default=None, description="ISO-8601 end of the event stream"
    )


class Events:
    """Events API handle bound to a :class:`~workos.client.WorkOs` client.

    `WorkOS Docs: Events <https://workos.com/docs/reference/events>`_
    """

    def __init__(self, workos: WorkOs) -> None:
        self._workos = workos

    def list_events(
        self, params: Optional[ListEventsParams] = None
    ) -> PaginatedList[Event]:
        """Fetch one page of events.

        Args:
            params: Filters and pagination.  Defaults to the first page of
                all event types, newest first.

        Returns:
            The page; ``page.next_cursor`` is ``None`` on the last page.

        Raises:
            UnauthorizedError: If the API key is rejected.
            ApiError: On any other error status.
            ConnectionError_: On network failure.
            DeserializationError: If the body is not a paginated list.
        """
        query = compose_query(params or ListEventsParams())
        body = self._workos.get_json("/events", params=query)
        return parse_model(PaginatedList[Event], body)


class AsyncEvents:
    """Events API handle bound to an :class:`~workos.client.AsyncWorkOs` client."""

    def __init__(self, workos: AsyncWorkOs) -> None:
        self._workos = workos

    async def list_events(
        self, params: Optional[ListEventsParams] = None
    ) -> PaginatedList[Event]:
        """Fetch one page of events.  See :meth:`Events.list_events`."""
        query = compose_query(params or ListEventsParams())
        body = await self._workos.get_json("/events", params=query)
        return parse_model(PaginatedList[Event], body)
