from guildwire.cache import InMemoryCache, NullCache
from guildwire.config import cache as cache_cfg
from guildwire.connection import ConnectionHandle
from guildwire import factory


def test_build_mediator_wraps_bare_connection(transport, connection):
    mediator = factory.build_mediator(connection, transport=transport)

    assert isinstance(mediator.connection, ConnectionHandle)
    mediator.set_game("x")
    assert connection.presence_calls


def test_build_mediator_reuses_handle(transport, connection):
    handle = ConnectionHandle(connection)

    mediator = factory.build_mediator(handle, transport=transport)

    assert mediator.connection is handle


def test_build_cache_follows_config(monkeypatch):
    monkeypatch.setattr(cache_cfg, "ENABLED", True)
    assert isinstance(factory.build_cache(), InMemoryCache)

    monkeypatch.setattr(cache_cfg, "ENABLED", False)
    assert isinstance(factory.build_cache(), NullCache)


def test_build_transport_uses_configured_token():
    transport = factory.build_transport()
    try:
        assert transport.session.headers["Authorization"].startswith("Bot ")
    finally:
        transport.close()
