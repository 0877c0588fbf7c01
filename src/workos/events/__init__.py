"""A module for interacting with the WorkOS Events API.

`WorkOS Docs: Events <https://workos.com/docs/events>`_
"""

from workos.events.operations import AsyncEvents, Events, ListEventsParams
from workos.events.types import Event, EventName

__all__ = ["AsyncEvents", "Event", "EventName", "Events", "ListEventsParams"]
