"""
Typed snowflake identifiers.

Each entity kind gets its own ``int`` subclass so a channel id can never be
mistaken for a guild id at a call site. The classes behave exactly like
``int`` on the wire; ``repr`` names the kind to make logs readable.
"""

from __future__ import annotations

from typing import TypeVar

__all__ = [
    "ChannelId",
    "EmojiId",
    "GuildId",
    "IntegrationId",
    "MessageId",
    "RoleId",
    "Snowflake",
    "UserId",
    "coerce",
]


class Snowflake(int):
    """Base class for typed identifiers."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    # int has no __str__ of its own; without this str() would use __repr__.
    __str__ = int.__repr__


class ChannelId(Snowflake):
    __slots__ = ()


class GuildId(Snowflake):
    __slots__ = ()


class UserId(Snowflake):
    __slots__ = ()


class RoleId(Snowflake):
    __slots__ = ()


class MessageId(Snowflake):
    __slots__ = ()


class EmojiId(Snowflake):
    __slots__ = ()


class IntegrationId(Snowflake):
    __slots__ = ()


IdT = TypeVar("IdT", bound=Snowflake)


def coerce(kind: type[IdT], value: int | str) -> IdT:
    """Return ``value`` as ``kind``.

    Plain integers (and numeric strings from payloads) are accepted. An id of
    a *different* kind is rejected because identifiers are never reused across
    entity kinds.
    """

    if isinstance(value, kind):
        return value
    if isinstance(value, Snowflake):
        raise TypeError(f"expected {kind.__name__}, got {value!r}")
    if isinstance(value, bool):
        raise TypeError(f"expected {kind.__name__}, got bool")
    return kind(int(value))
