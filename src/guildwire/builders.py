"""
Fluent payload builders.

A builder accumulates an ordered field map through chained setters. The
mediator seeds a builder (empty, or pre-populated from prior state), hands it
to a caller-supplied transform and sends ``build()`` verbatim as the request
body::

    mediator.edit_role(guild_id, role_id, lambda r: r.name("mods").hoist(True))

``build()`` returns a fresh copy, so a builder can be inspected or reused
without the sent payload changing underneath it.
"""

from __future__ import annotations

import copy
import datetime
from typing import Any, Callable, Dict, Iterable, TypeVar

import discord

from .models import Role

__all__ = [
    "CreateEmbed",
    "CreateInvite",
    "CreateMessage",
    "EditChannel",
    "EditGuild",
    "EditMember",
    "EditProfile",
    "EditRole",
    "GetMessages",
    "PayloadBuilder",
    "apply",
]

B = TypeVar("B", bound="PayloadBuilder")


def _colour_value(colour: discord.Colour | int) -> int:
    return colour.value if isinstance(colour, discord.Colour) else int(colour)


def _permission_bits(permissions: discord.Permissions | int) -> int:
    if isinstance(permissions, discord.Permissions):
        return permissions.value
    return int(permissions)


class PayloadBuilder:
    """Base class holding the accumulated field map."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Dict[str, Any] | None = None) -> None:
        self._fields: Dict[str, Any] = dict(fields or {})

    def _set(self: B, key: str, value: Any) -> B:
        self._fields[key] = value
        return self

    def build(self) -> Dict[str, Any]:
        """Return the accumulated fields as an independent mapping."""

        return copy.deepcopy(self._fields)

    def __contains__(self, key: str) -> bool:
        return key in self._fields

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"


def apply(builder: B, transform: Callable[[B], B] | None) -> Dict[str, Any]:
    """Fold ``builder`` through ``transform`` and return the resulting fields."""

    if transform is None:
        return builder.build()
    result = transform(builder)
    if not isinstance(result, PayloadBuilder):
        raise TypeError(
            f"builder transform must return a {type(builder).__name__}, "
            f"got {type(result).__name__}"
        )
    return result.build()


class CreateEmbed(PayloadBuilder):
    __slots__ = ()

    def title(self, title: str) -> "CreateEmbed":
        return self._set("title", title)

    def description(self, description: str) -> "CreateEmbed":
        return self._set("description", description)

    def url(self, url: str) -> "CreateEmbed":
        return self._set("url", url)

    def colour(self, colour: discord.Colour | int) -> "CreateEmbed":
        return self._set("color", _colour_value(colour))

    color = colour

    def timestamp(self, when: datetime.datetime | str) -> "CreateEmbed":
        if isinstance(when, datetime.datetime):
            when = when.isoformat()
        return self._set("timestamp", when)

    def footer(self, text: str, icon_url: str | None = None) -> "CreateEmbed":
        footer: Dict[str, Any] = {"text": text}
        if icon_url is not None:
            footer["icon_url"] = icon_url
        return self._set("footer", footer)

    def image(self, url: str) -> "CreateEmbed":
        return self._set("image", {"url": url})

    def thumbnail(self, url: str) -> "CreateEmbed":
        return self._set("thumbnail", {"url": url})

    def author(
        self, name: str, *, url: str | None = None, icon_url: str | None = None
    ) -> "CreateEmbed":
        author: Dict[str, Any] = {"name": name}
        if url is not None:
            author["url"] = url
        if icon_url is not None:
            author["icon_url"] = icon_url
        return self._set("author", author)

    def field(self, name: str, value: str, inline: bool = True) -> "CreateEmbed":
        fields = self._fields.setdefault("fields", [])
        fields.append({"name": name, "value": value, "inline": inline})
        return self


class CreateMessage(PayloadBuilder):
    __slots__ = ()

    def content(self, content: str) -> "CreateMessage":
        return self._set("content", content)

    def tts(self, tts: bool) -> "CreateMessage":
        return self._set("tts", tts)

    def nonce(self, nonce: str) -> "CreateMessage":
        return self._set("nonce", nonce)

    def embed(
        self, embed: CreateEmbed | Callable[[CreateEmbed], CreateEmbed]
    ) -> "CreateMessage":
        if not isinstance(embed, CreateEmbed):
            return self._set("embed", apply(CreateEmbed(), embed))
        return self._set("embed", embed.build())


class CreateInvite(PayloadBuilder):
    __slots__ = ()

    def max_age(self, seconds: int) -> "CreateInvite":
        return self._set("max_age", seconds)

    def max_uses(self, uses: int) -> "CreateInvite":
        return self._set("max_uses", uses)

    def temporary(self, temporary: bool) -> "CreateInvite":
        return self._set("temporary", temporary)

    def unique(self, unique: bool) -> "CreateInvite":
        return self._set("unique", unique)


class EditChannel(PayloadBuilder):
    __slots__ = ()

    def name(self, name: str) -> "EditChannel":
        return self._set("name", name)

    def position(self, position: int) -> "EditChannel":
        return self._set("position", position)

    def topic(self, topic: str | None) -> "EditChannel":
        return self._set("topic", topic)

    def bitrate(self, bitrate: int) -> "EditChannel":
        return self._set("bitrate", bitrate)

    def user_limit(self, limit: int) -> "EditChannel":
        return self._set("user_limit", limit)


class EditGuild(PayloadBuilder):
    __slots__ = ()

    def name(self, name: str) -> "EditGuild":
        return self._set("name", name)

    def region(self, region: str) -> "EditGuild":
        return self._set("region", region)

    def icon(self, icon: str | None) -> "EditGuild":
        return self._set("icon", icon)

    def splash(self, splash: str | None) -> "EditGuild":
        return self._set("splash", splash)

    def afk_channel(self, channel_id: int | None) -> "EditGuild":
        return self._set("afk_channel_id", None if channel_id is None else int(channel_id))

    def afk_timeout(self, seconds: int) -> "EditGuild":
        return self._set("afk_timeout", seconds)

    def owner(self, user_id: int) -> "EditGuild":
        return self._set("owner_id", int(user_id))

    def verification_level(
        self, level: discord.VerificationLevel | int
    ) -> "EditGuild":
        value = level.value if isinstance(level, discord.VerificationLevel) else int(level)
        return self._set("verification_level", value)


class EditMember(PayloadBuilder):
    __slots__ = ()

    def nickname(self, nickname: str) -> "EditMember":
        return self._set("nick", nickname)

    def roles(self, role_ids: Iterable[int]) -> "EditMember":
        return self._set("roles", [int(rid) for rid in role_ids])

    def mute(self, mute: bool) -> "EditMember":
        return self._set("mute", mute)

    def deafen(self, deafen: bool) -> "EditMember":
        return self._set("deaf", deafen)

    def voice_channel(self, channel_id: int) -> "EditMember":
        return self._set("channel_id", int(channel_id))


class EditProfile(PayloadBuilder):
    __slots__ = ()

    def avatar(self, avatar: str | None) -> "EditProfile":
        return self._set("avatar", avatar)

    def username(self, username: str) -> "EditProfile":
        return self._set("username", username)

    def email(self, email: str) -> "EditProfile":
        return self._set("email", email)

    def password(self, password: str) -> "EditProfile":
        return self._set("password", password)

    def new_password(self, password: str) -> "EditProfile":
        return self._set("new_password", password)


class EditRole(PayloadBuilder):
    __slots__ = ()

    @classmethod
    def from_role(cls, role: Role) -> "EditRole":
        """Seed a builder with every editable field of ``role``."""

        return (
            cls()
            .name(role.name)
            .colour(role.colour)
            .hoist(role.hoist)
            .mentionable(role.mentionable)
            .permissions(role.permissions)
            .position(role.position)
        )

    def name(self, name: str) -> "EditRole":
        return self._set("name", name)

    def colour(self, colour: discord.Colour | int) -> "EditRole":
        return self._set("color", _colour_value(colour))

    color = colour

    def hoist(self, hoist: bool) -> "EditRole":
        return self._set("hoist", hoist)

    def mentionable(self, mentionable: bool) -> "EditRole":
        return self._set("mentionable", mentionable)

    def permissions(self, permissions: discord.Permissions | int) -> "EditRole":
        return self._set("permissions", _permission_bits(permissions))

    def position(self, position: int) -> "EditRole":
        return self._set("position", position)


class GetMessages(PayloadBuilder):
    __slots__ = ()

    def limit(self, limit: int) -> "GetMessages":
        return self._set("limit", limit)

    def after(self, message_id: int) -> "GetMessages":
        return self._set("after", int(message_id))

    def around(self, message_id: int) -> "GetMessages":
        return self._set("around", int(message_id))

    def before(self, message_id: int) -> "GetMessages":
        return self._set("before", int(message_id))
