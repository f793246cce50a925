import discord
import pytest

from guildwire.errors import RecordNotFound
from guildwire.ids import ChannelId, GuildId, RoleId, UserId
from guildwire.models import CurrentUser, Guild, GuildChannel, Member, Role, User
from guildwire.transport import Route


def _text_channel(channel_id=1, guild_id=100) -> GuildChannel:
    return GuildChannel(
        id=ChannelId(channel_id),
        guild_id=GuildId(guild_id),
        name="general",
        kind=discord.ChannelType.text,
        topic="chat",
    )


def _seeded_guild() -> Guild:
    channel = _text_channel()
    role = Role(id=RoleId(7), name="mods")
    member = Member(guild_id=GuildId(100), user=User(id=UserId(10), name="alice"))
    return Guild(
        id=GuildId(100),
        name="g",
        channels={channel.id: channel},
        roles={role.id: role},
        members={member.user.id: member},
    )


def test_cached_channel_skips_network(make_mediator, transport, cache):
    cache.insert_channel(_text_channel())
    mediator = make_mediator(cache=cache)

    channel = mediator.get_channel(1)

    assert channel.name == "general"
    assert transport.calls == []


def test_channel_miss_fetches_once(make_mediator, transport, cache):
    transport.responses[Route.GET_CHANNEL] = _text_channel(5)
    mediator = make_mediator(cache=cache)

    channel = mediator.get_channel(5)

    assert channel.id == 5
    assert transport.calls == [(Route.GET_CHANNEL, {"channel_id": ChannelId(5)}, None)]


def test_network_result_is_not_written_back(make_mediator, transport, cache):
    transport.responses[Route.GET_CHANNEL] = _text_channel(5)
    mediator = make_mediator(cache=cache)

    mediator.get_channel(5)
    mediator.get_channel(5)

    assert transport.routes() == [Route.GET_CHANNEL, Route.GET_CHANNEL]
    assert cache.lookup_channel(ChannelId(5)) is None


def test_cached_channel_is_a_clone(make_mediator, cache):
    cache.insert_channel(_text_channel())
    mediator = make_mediator(cache=cache)

    mediator.get_channel(1).name = "mutated"

    assert mediator.get_channel(1).name == "general"


def test_get_channels_from_cache(make_mediator, transport, cache):
    cache.insert_guild(_seeded_guild())
    mediator = make_mediator(cache=cache)

    channels = mediator.get_channels(100)

    assert list(channels) == [ChannelId(1)]
    assert transport.calls == []


def test_get_channels_miss_keys_by_id(make_mediator, transport):
    transport.responses[Route.GET_CHANNELS] = [_text_channel(1), _text_channel(2)]
    mediator = make_mediator()

    channels = mediator.get_channels(100)

    assert set(channels) == {ChannelId(1), ChannelId(2)}
    assert transport.routes() == [Route.GET_CHANNELS]


def test_get_member_cache_hit_and_miss(make_mediator, transport, cache):
    cache.insert_guild(_seeded_guild())
    fetched = Member(guild_id=GuildId(100), user=User(id=UserId(11), name="bob"))
    transport.responses[Route.GET_MEMBER] = fetched
    mediator = make_mediator(cache=cache)

    assert mediator.get_member(100, 10).user.name == "alice"
    assert transport.calls == []

    assert mediator.get_member(100, 11) is fetched
    assert transport.calls == [
        (Route.GET_MEMBER, {"guild_id": GuildId(100), "user_id": UserId(11)}, None)
    ]


def test_get_role_cache_hit(make_mediator, transport, cache):
    cache.insert_guild(_seeded_guild())
    mediator = make_mediator(cache=cache)

    assert mediator.get_role(100, 7).name == "mods"
    assert transport.calls == []


def test_get_role_miss_filters_role_list(make_mediator, transport):
    transport.responses[Route.GET_ROLES] = [
        Role(id=RoleId(1), name="everyone"),
        Role(id=RoleId(7), name="mods"),
    ]
    mediator = make_mediator()

    assert mediator.get_role(100, 7).name == "mods"
    assert transport.routes() == [Route.GET_ROLES]


def test_get_role_absent_everywhere(make_mediator, transport):
    transport.responses[Route.GET_ROLES] = [Role(id=RoleId(1), name="everyone")]
    mediator = make_mediator()

    with pytest.raises(RecordNotFound) as excinfo:
        mediator.get_role(100, 7)

    assert excinfo.value.kind == "role"


def test_get_messages_defaults_limit(make_mediator, transport):
    make_mediator().get_messages(1)

    _, params, _ = transport.calls[0]
    assert params == {"channel_id": ChannelId(1), "limit": 50}


def test_get_messages_param_order(make_mediator, transport):
    make_mediator().get_messages(
        1, lambda m: m.before(9).after(3).around(5).limit(20)
    )

    _, params, _ = transport.calls[0]
    assert list(params.items()) == [
        ("channel_id", ChannelId(1)),
        ("limit", 20),
        ("after", 3),
        ("around", 5),
        ("before", 9),
    ]


@pytest.mark.parametrize("given, sent", [(150, 100), (None, 50), (10, 10), (100, 100), (-5, 1)])
def test_reaction_users_limit(make_mediator, transport, given, sent):
    make_mediator().get_reaction_users(1, 2, "\N{THUMBS UP SIGN}", limit=given)

    _, params, _ = transport.calls[0]
    assert params["limit"] == sent
    assert "after" not in params


def test_reaction_users_after_cursor(make_mediator, transport):
    make_mediator().get_reaction_users(1, 2, "x", after=44)

    _, params, _ = transport.calls[0]
    assert params["after"] == UserId(44)


def test_edit_profile_always_fetches_identity(make_mediator, transport, cache):
    transport.responses[Route.GET_CURRENT_USER] = CurrentUser(
        id=UserId(1), name="me", avatar="hash", email="me@example.com"
    )
    mediator = make_mediator(cache=cache)

    mediator.edit_profile(lambda p: p.username("new"))

    assert transport.routes() == [Route.GET_CURRENT_USER, Route.EDIT_PROFILE]
    _, _, body = transport.calls[1]
    assert body == {"avatar": "hash", "username": "new", "email": "me@example.com"}


def test_edit_profile_omits_unknown_email(make_mediator, transport):
    transport.responses[Route.GET_CURRENT_USER] = CurrentUser(id=UserId(1), name="bot")

    make_mediator().edit_profile()

    _, _, body = transport.calls[1]
    assert body == {"avatar": None, "username": "bot"}
