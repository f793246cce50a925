"""Wire configuration, transport and cache into a :class:`RequestMediator`."""

from __future__ import annotations

import logging

from guildwire.cache import CacheProvider, InMemoryCache, NullCache
from guildwire.config import cache as cache_cfg
from guildwire.config import core, http
from guildwire.connection import Connection, ConnectionHandle
from guildwire.mediator import RequestMediator
from guildwire.transport import RestTransport, Transport

logger = logging.getLogger(__name__)


def build_transport() -> RestTransport:
    """Return a :class:`RestTransport` authenticated from configuration."""

    return RestTransport(
        core.DISCORD_API_TOKEN or "",
        privilege=core.PRIVILEGE,
        base_url=http.BASE_URL,
        timeout=http.TIMEOUT,
        user_agent=http.USER_AGENT,
    )


def build_cache() -> CacheProvider:
    return InMemoryCache() if cache_cfg.ENABLED else NullCache()


def build_mediator(
    connection: Connection | ConnectionHandle,
    *,
    transport: Transport | None = None,
    cache: CacheProvider | None = None,
) -> RequestMediator:
    """Build a mediator from the configured privilege and default channel.

    ``connection`` may be a bare gateway connection or an existing
    :class:`ConnectionHandle` shared with the event pipeline; bare connections
    are wrapped in a new handle.
    """

    handle = connection if isinstance(connection, ConnectionHandle) else ConnectionHandle(connection)
    mediator = RequestMediator(
        handle,
        core.PRIVILEGE,
        transport if transport is not None else build_transport(),
        cache=cache if cache is not None else build_cache(),
        channel_id=core.DEFAULT_CHANNEL_ID,
    )
    logger.info(
        "Mediator ready (privilege=%s, cache=%s, default channel=%s)",
        core.PRIVILEGE.name,
        type(mediator.cache).__name__,
        core.DEFAULT_CHANNEL_ID,
    )
    return mediator


__all__ = ["build_cache", "build_mediator", "build_transport"]
