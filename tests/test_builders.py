import discord
import pytest

from guildwire.builders import (
    CreateEmbed,
    CreateMessage,
    EditGuild,
    EditMember,
    EditRole,
    GetMessages,
    apply,
)
from guildwire.ids import RoleId
from guildwire.models import Role


def test_apply_without_transform_returns_seed_fields():
    assert apply(GetMessages().limit(10), None) == {"limit": 10}


def test_apply_rejects_transform_returning_non_builder():
    with pytest.raises(TypeError):
        apply(CreateMessage(), lambda m: None)


def test_build_returns_independent_copy():
    embed = CreateEmbed().field("a", "1")
    built = embed.build()
    built["fields"].append({"name": "b"})

    assert embed.build() == {"fields": [{"name": "a", "value": "1", "inline": True}]}


def test_fields_keep_insertion_order():
    payload = apply(CreateMessage(), lambda m: m.tts(False).content("hi").nonce("n"))
    assert list(payload) == ["tts", "content", "nonce"]


def test_message_embed_accepts_transform_or_builder():
    via_transform = apply(CreateMessage(), lambda m: m.embed(lambda e: e.title("t")))
    via_builder = apply(CreateMessage(), lambda m: m.embed(CreateEmbed().title("t")))

    assert via_transform == via_builder == {"embed": {"title": "t"}}


def test_embed_colour_accepts_discord_colour():
    assert CreateEmbed().colour(discord.Colour.red()).build() == {
        "color": discord.Colour.red().value
    }


def test_edit_role_from_role_seeds_every_editable_field():
    role = Role(
        id=RoleId(5),
        name="mods",
        colour=0x00FF00,
        hoist=True,
        mentionable=False,
        permissions=discord.Permissions(kick_members=True),
        position=3,
    )

    payload = apply(EditRole.from_role(role), lambda r: r.name("admins"))

    assert payload == {
        "name": "admins",
        "color": 0x00FF00,
        "hoist": True,
        "mentionable": False,
        "permissions": discord.Permissions(kick_members=True).value,
        "position": 3,
    }


def test_edit_member_uses_wire_field_names():
    payload = apply(
        EditMember(),
        lambda m: m.nickname("n").roles([1, RoleId(2)]).deafen(True).voice_channel(9),
    )
    assert payload == {"nick": "n", "roles": [1, 2], "deaf": True, "channel_id": 9}


def test_edit_guild_verification_level_accepts_enum():
    payload = apply(
        EditGuild(), lambda g: g.verification_level(discord.VerificationLevel.high)
    )
    assert payload == {"verification_level": discord.VerificationLevel.high.value}
