import logging

import discord

from guildwire.connection import ConnectionHandle, DetachedConnection


def test_set_presence_holds_the_lock(make_mediator, connection):
    mediator = make_mediator()

    mediator.set_presence(None, discord.Status.idle, afk=True)

    assert connection.locked_during_call == [True]
    assert connection.presence_calls == [(None, discord.Status.idle, True)]
    assert not mediator.connection.is_locked


def test_set_game_wraps_name_and_stays_online(make_mediator, connection):
    make_mediator().set_game("chess")

    game, status, afk = connection.presence_calls[0]
    assert isinstance(game, discord.Game)
    assert game.name == "chess"
    assert status is discord.Status.online
    assert afk is False


def test_set_game_passes_activities_through(make_mediator, connection):
    activity = discord.Game(name="go")

    make_mediator().set_game(activity)

    assert connection.presence_calls[0][0] is activity


def test_lock_released_when_connection_raises():
    class Broken:
        def set_presence(self, game, status, afk):
            raise RuntimeError("gateway closed")

    handle = ConnectionHandle(Broken())
    try:
        handle.set_presence(None)
    except RuntimeError:
        pass

    assert not handle.is_locked


def test_detached_connection_drops_presence(caplog):
    handle = ConnectionHandle(DetachedConnection())

    with caplog.at_level(logging.WARNING, logger="guildwire.connection"):
        handle.set_presence(discord.Game(name="x"))

    assert "no gateway connection" in caplog.text
