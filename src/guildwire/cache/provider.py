"""
Cache provider capability.

The mediator consults a cache provider through four point lookups and never
writes to it. :class:`NullCache` is the explicit "absent" provider: every
lookup misses, so every cache-first read falls through to the network.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..ids import ChannelId, GuildId, RoleId, UserId
from ..models import Channel, Guild, Member, Role

__all__ = ["CacheProvider", "NullCache"]


@runtime_checkable
class CacheProvider(Protocol):
    """Read-only point lookups over previously observed entities.

    Implementations return an independent copy of the cached entity (or
    ``None`` on a miss) and must not hold any lock once the call returns.
    """

    @property
    def is_available(self) -> bool: ...

    def lookup_channel(self, channel_id: ChannelId) -> Channel | None: ...

    def lookup_guild(self, guild_id: GuildId) -> Guild | None: ...

    def lookup_member(self, guild_id: GuildId, user_id: UserId) -> Member | None: ...

    def lookup_role(self, guild_id: GuildId, role_id: RoleId) -> Role | None: ...


class NullCache:
    """Cache provider used when caching is disabled."""

    __slots__ = ()

    @property
    def is_available(self) -> bool:
        return False

    def lookup_channel(self, channel_id: ChannelId) -> Channel | None:
        return None

    def lookup_guild(self, guild_id: GuildId) -> Guild | None:
        return None

    def lookup_member(self, guild_id: GuildId, user_id: UserId) -> Member | None:
        return None

    def lookup_role(self, guild_id: GuildId, role_id: RoleId) -> Role | None:
        return None

    def __repr__(self) -> str:
        return "NullCache()"
