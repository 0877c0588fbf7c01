"""Forward-compatible enumerated values.

The API adds new tag values (event names, connection types, states) over
time.  A field typed ``KnownOrUnknown[EventName]`` accepts any string: when
the string matches a member of the enum it is parsed into that member,
otherwise the raw wire string is kept as-is.  Serialising always emits the
wire string, so a value the library does not know about round-trips without
loss.

Example::

    class Event(BaseModel):
        event: KnownOrUnknown[EventName]

    Event(event="dsync.user.created").event   # EventName.DSYNC_USER_CREATED
    Event(event="brand.new.event").event      # "brand.new.event"
"""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Annotated, Any, TypeVar, Union

from pydantic import PlainSerializer, PlainValidator

E = TypeVar("E", bound=Enum)


def parse_known_or_unknown(enum_cls: type[E], value: Any) -> Union[E, str]:
    """Parse *value* into a member of *enum_cls*, or keep it as a raw string.

    Args:
        enum_cls: The enum holding the known values.
        value: A wire string or an existing member of *enum_cls*.

    Returns:
        The matching enum member, or *value* unchanged when no member matches.

    Raises:
        ValueError: If *value* is neither a string nor a member of *enum_cls*.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValueError(
            f"expected a string or {enum_cls.__name__}, got {type(value).__name__}"
        )
    try:
        return enum_cls(value)
    except ValueError:
        return value


def to_wire(value: Union[Enum, str]) -> str:
    """Return the wire string for a known or unknown value."""
    if isinstance(value, Enum):
        return str(value.value)
    return value


def is_known(value: Union[Enum, str]) -> bool:
    """Return ``True`` if *value* was recognised as an enum member."""
    return isinstance(value, Enum)


class KnownOrUnknown:
    """Annotation factory: ``KnownOrUnknown[SomeEnum]``.

    Subscripting returns an ``Annotated`` union of the enum and ``str`` with
    a validator that prefers the enum member and a serialiser that always
    emits the raw string.
    """

    def __class_getitem__(cls, enum_cls: type[E]) -> Any:
        return Annotated[
            Union[enum_cls, str],
            PlainValidator(partial(parse_known_or_unknown, enum_cls)),
            PlainSerializer(to_wire, return_type=str),
        ]
