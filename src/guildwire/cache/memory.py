"""
In-memory cache provider.

:class:`InMemoryCache` indexes guilds (with their channels, roles and
members) plus private/group channels behind a single lock. Writes come from
the event pipeline through the ``insert_*``/``remove_*`` helpers; the
mediator only ever calls the ``lookup_*`` methods.

Every lookup holds the lock for that one lookup and returns a deep copy, so a
caller can mutate what it receives without touching the shared snapshot and
no lock is ever held across a network call.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Dict, TypeVar

from ..ids import ChannelId, GuildId, RoleId, UserId
from ..models import Channel, Guild, GuildChannel, Member, Role

logger = logging.getLogger(__name__)

__all__ = ["InMemoryCache"]

T = TypeVar("T")


def _clone(entity: T | None) -> T | None:
    return None if entity is None else copy.deepcopy(entity)


class InMemoryCache:
    """Lock-guarded snapshot of guilds and channels."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._guilds: Dict[GuildId, Guild] = {}
        self._channels: Dict[ChannelId, Channel] = {}

    @property
    def is_available(self) -> bool:
        return True

    # ------------------------------------------------------------------ #
    # READ helpers
    # ------------------------------------------------------------------ #

    def lookup_channel(self, channel_id: ChannelId) -> Channel | None:
        with self._lock:
            return _clone(self._channels.get(channel_id))

    def lookup_guild(self, guild_id: GuildId) -> Guild | None:
        with self._lock:
            return _clone(self._guilds.get(guild_id))

    def lookup_member(self, guild_id: GuildId, user_id: UserId) -> Member | None:
        with self._lock:
            guild = self._guilds.get(guild_id)
            if guild is None:
                return None
            return _clone(guild.members.get(user_id))

    def lookup_role(self, guild_id: GuildId, role_id: RoleId) -> Role | None:
        with self._lock:
            guild = self._guilds.get(guild_id)
            if guild is None:
                return None
            return _clone(guild.roles.get(role_id))

    # ------------------------------------------------------------------ #
    # WRITE helpers (event pipeline only)
    # ------------------------------------------------------------------ #

    def insert_guild(self, guild: Guild) -> None:
        snapshot = copy.deepcopy(guild)
        with self._lock:
            previous = self._guilds.get(snapshot.id)
            if previous is not None:
                for channel_id in previous.channels:
                    self._channels.pop(channel_id, None)
            self._guilds[snapshot.id] = snapshot
            # Guild channels are shared between the guild map and the flat index.
            self._channels.update(snapshot.channels)
        logger.debug(
            "Cached guild %s (%d channels, %d roles, %d members)",
            snapshot.id,
            len(snapshot.channels),
            len(snapshot.roles),
            len(snapshot.members),
        )

    def insert_channel(self, channel: Channel) -> None:
        snapshot = copy.deepcopy(channel)
        with self._lock:
            self._channels[snapshot.id] = snapshot
            if isinstance(snapshot, GuildChannel) and snapshot.guild_id is not None:
                guild = self._guilds.get(snapshot.guild_id)
                if guild is not None:
                    guild.channels[snapshot.id] = snapshot
        logger.debug("Cached channel %s", snapshot.id)

    def insert_member(self, member: Member) -> bool:
        """Cache ``member``; returns ``False`` when its guild is unknown."""

        snapshot = copy.deepcopy(member)
        with self._lock:
            guild = self._guilds.get(snapshot.guild_id)
            if guild is None:
                return False
            guild.members[snapshot.user.id] = snapshot
        return True

    def insert_role(self, guild_id: GuildId, role: Role) -> bool:
        """Cache ``role``; returns ``False`` when the guild is unknown."""

        snapshot = copy.deepcopy(role)
        with self._lock:
            guild = self._guilds.get(guild_id)
            if guild is None:
                return False
            guild.roles[snapshot.id] = snapshot
        return True

    def remove_guild(self, guild_id: GuildId) -> None:
        with self._lock:
            guild = self._guilds.pop(guild_id, None)
            if guild is not None:
                for channel_id in guild.channels:
                    self._channels.pop(channel_id, None)

    def remove_channel(self, channel_id: ChannelId) -> None:
        with self._lock:
            channel = self._channels.pop(channel_id, None)
            if isinstance(channel, GuildChannel) and channel.guild_id is not None:
                guild = self._guilds.get(channel.guild_id)
                if guild is not None:
                    guild.channels.pop(channel_id, None)

    def remove_member(self, guild_id: GuildId, user_id: UserId) -> None:
        with self._lock:
            guild = self._guilds.get(guild_id)
            if guild is not None:
                guild.members.pop(user_id, None)

    def remove_role(self, guild_id: GuildId, role_id: RoleId) -> None:
        with self._lock:
            guild = self._guilds.get(guild_id)
            if guild is not None:
                guild.roles.pop(role_id, None)

    # ------------------------------------------------------------------ #
    # MAINTENANCE
    # ------------------------------------------------------------------ #

    def clear(self) -> None:
        with self._lock:
            self._guilds.clear()
            self._channels.clear()
