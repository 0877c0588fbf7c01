"""Listing parameter to query-string composition.

Every list operation describes its inputs as a Pydantic model whose fields
map one-to-one to query parameters.  :func:`compose_query` flattens one or
more of those models into an ordered list of ``(key, value)`` pairs:

* ``None`` values are omitted.
* Empty sequences are omitted entirely -- an empty filter means "no
  filter", not an empty parameter.
* A sequence of N values becomes N pairs under the same key, in input
  order.  Filter fields declare their bracketed wire name as an alias
  (``events[]``).
* Nested models (such as the ``pagination`` field of every ``List*Params``)
  are flattened in place, so pagination and filters end up in one flat list.
* Enums, dates and datetimes are rendered as their JSON form (wire string,
  ISO-8601).

Ordering is part of the contract: the pairs come out in field declaration
order, and repeated values keep the order the caller supplied.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any, Union

import httpx
from pydantic import BaseModel

QueryPairs = list[tuple[str, str]]


def compose_query(*sources: Union[BaseModel, Mapping[str, Any], None]) -> QueryPairs:
    """Flatten parameter models into ordered query pairs.

    Args:
        *sources: Parameter models or plain mappings, merged left to right.
            ``None`` entries are skipped.

    Returns:
        A list of ``(key, value)`` string pairs suitable for ``httpx``'s
        ``params=`` argument.

    Example::

        >>> compose_query(ListEventsParams(events=["dsync.user.created"]))
        [('order', 'desc'), ('events[]', 'dsync.user.created')]
    """
    pairs: QueryPairs = []
    for source in sources:
        if source is None:
            continue
        if isinstance(source, BaseModel):
            source = source.model_dump(mode="json", by_alias=True, exclude_none=True)
        _append_mapping(pairs, source)
    return pairs


def to_query_string(pairs: QueryPairs) -> str:
    """Percent-encode *pairs* into a query string (without the leading ``?``)."""
    return str(httpx.QueryParams(pairs))


def _append_mapping(pairs: QueryPairs, mapping: Mapping[str, Any]) -> None:
    for key, value in mapping.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            _append_mapping(pairs, value)
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            for item in value:
                if item is not None:
                    pairs.append((key, _render(item)))
        else:
            pairs.append((key, _render(value)))


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)
