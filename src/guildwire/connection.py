"""
Shared handle to the long-lived gateway connection.

The gateway session itself (heartbeats, reconnects, identify) lives outside
this package; the mediator only needs to update presence through it. Because
the event pipeline holds the same connection, every mutation of its ephemeral
state goes through :meth:`ConnectionHandle.locked`, which grants exclusive
access for the duration of a ``with`` block.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Protocol

import discord

logger = logging.getLogger(__name__)

__all__ = ["Connection", "ConnectionHandle", "DetachedConnection"]


class Connection(Protocol):
    """Subset of the gateway session consumed by the mediator."""

    def set_presence(
        self,
        game: discord.BaseActivity | None,
        status: discord.Status,
        afk: bool,
    ) -> None: ...


class ConnectionHandle:
    """Mutex-guarded wrapper around a :class:`Connection`."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[Connection]:
        """Yield the connection while holding exclusive access to it."""

        with self._lock:
            yield self._connection

    @property
    def is_locked(self) -> bool:
        return self._lock.locked()

    def set_presence(
        self,
        game: discord.BaseActivity | None,
        status: discord.Status = discord.Status.online,
        afk: bool = False,
    ) -> None:
        with self.locked() as connection:
            connection.set_presence(game, status, afk)
        logger.debug("Presence updated: status=%s game=%s afk=%s", status, game, afk)


class DetachedConnection:
    """Stand-in for REST-only sessions that never open a gateway.

    Presence updates have nowhere to go and are dropped with a warning.
    """

    def set_presence(
        self,
        game: discord.BaseActivity | None,
        status: discord.Status,
        afk: bool,
    ) -> None:
        logger.warning("Presence update dropped: no gateway connection is attached")
