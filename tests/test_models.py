import discord
import pytest

from guildwire.ids import ChannelId, RoleId, UserId
from guildwire.models import (
    Emoji,
    GroupChannel,
    Guild,
    GuildChannel,
    MemberTarget,
    PermissionOverwrite,
    PrivateChannel,
    ReactionType,
    RoleTarget,
    channel_from_payload,
)

USER = {"id": "10", "username": "alice", "discriminator": "0001", "avatar": "abc"}


def test_channel_from_payload_dispatches_on_type():
    text = channel_from_payload({"id": "1", "type": 0, "name": "general", "topic": "hi"})
    voice = channel_from_payload({"id": "2", "type": 2, "name": "vc", "bitrate": 64000})
    private = channel_from_payload({"id": "3", "type": 1, "recipients": [USER]})
    group = channel_from_payload({"id": "4", "type": 3, "recipients": [USER]})

    assert isinstance(text, GuildChannel) and text.kind == discord.ChannelType.text
    assert text.topic == "hi"
    assert isinstance(voice, GuildChannel) and voice.bitrate == 64000
    assert isinstance(private, PrivateChannel)
    assert private.recipient.name == "alice"
    assert private.kind == discord.ChannelType.private
    assert isinstance(group, GroupChannel)
    assert group.kind == discord.ChannelType.group


def test_ids_are_typed():
    channel = channel_from_payload({"id": "1", "type": 0, "name": "general"})
    assert type(channel.id) is ChannelId
    assert channel.id == 1


def test_guild_from_payload_indexes_children():
    guild = Guild.from_payload(
        {
            "id": "100",
            "name": "g",
            "channels": [{"id": "1", "type": 0, "name": "general"}],
            "roles": [{"id": "7", "name": "mods", "permissions": 2}],
            "members": [{"user": USER, "roles": ["7"]}],
        }
    )

    assert guild.channels[ChannelId(1)].guild_id == 100
    assert guild.roles[RoleId(7)].permissions.kick_members
    assert guild.members[UserId(10)].roles == [RoleId(7)]


def test_permission_overwrite_requires_member_or_role_target():
    with pytest.raises(TypeError):
        PermissionOverwrite(target=42)  # type: ignore[arg-type]


def test_permission_overwrite_kind_and_id():
    member = PermissionOverwrite(MemberTarget(UserId(10)))
    role = PermissionOverwrite(RoleTarget(RoleId(7)))

    assert (member.kind, member.target_id) == ("member", 10)
    assert (role.kind, role.target_id) == ("role", 7)


def test_reaction_type_paths():
    assert ReactionType.unicode("\N{THUMBS UP SIGN}").as_path() == "\N{THUMBS UP SIGN}"
    assert ReactionType.custom("party", 55).as_path() == "party:55"
    emoji = Emoji.from_payload({"id": "55", "name": "party"})
    assert ReactionType.coerce(emoji) == ReactionType.custom("party", 55)
    assert ReactionType.coerce("x") == ReactionType.unicode("x")


def test_emoji_markup():
    assert Emoji.from_payload({"id": "5", "name": "wave"}).markup == "<:wave:5>"
    assert Emoji.from_payload({"id": "6", "name": "spin", "animated": True}).markup == "<a:spin:6>"
