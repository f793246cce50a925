"""
Decoded entities the mediator inspects.

Only the entities whose fields drive mediator policy are modelled here
(channels, roles, members, guilds, the current user, emoji). Everything else
the REST API returns is handed back to callers as plain decoded JSON.

Channel subtypes reuse :class:`discord.ChannelType` and role permissions reuse
:class:`discord.Permissions` so values line up with the rest of the discord.py
ecosystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

import discord
from discord.enums import try_enum

from .ids import ChannelId, EmojiId, GuildId, RoleId, UserId

__all__ = [
    "Channel",
    "CurrentUser",
    "Emoji",
    "GroupChannel",
    "Guild",
    "GuildChannel",
    "Member",
    "MemberTarget",
    "PermissionOverwrite",
    "PrivateChannel",
    "ReactionType",
    "Role",
    "RoleTarget",
    "User",
    "channel_from_payload",
]


def _opt_int(raw: Any) -> int | None:
    return None if raw is None else int(raw)


@dataclass(slots=True)
class User:
    id: UserId
    name: str
    discriminator: str = "0"
    avatar: str | None = None
    bot: bool = False

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=UserId(int(data["id"])),
            name=str(data.get("username", "")),
            discriminator=str(data.get("discriminator", "0")),
            avatar=data.get("avatar"),
            bot=bool(data.get("bot", False)),
        )


@dataclass(slots=True)
class CurrentUser(User):
    """The authenticated identity, as returned by ``GET /users/@me``."""

    email: str | None = None
    verified: bool = False
    mfa_enabled: bool = False

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "CurrentUser":
        return cls(
            id=UserId(int(data["id"])),
            name=str(data.get("username", "")),
            discriminator=str(data.get("discriminator", "0")),
            avatar=data.get("avatar"),
            bot=bool(data.get("bot", False)),
            email=data.get("email"),
            verified=bool(data.get("verified", False)),
            mfa_enabled=bool(data.get("mfa_enabled", False)),
        )


@dataclass(slots=True)
class Role:
    id: RoleId
    name: str
    colour: int = 0
    hoist: bool = False
    managed: bool = False
    mentionable: bool = False
    permissions: discord.Permissions = field(default_factory=discord.Permissions.none)
    position: int = 0

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Role":
        return cls(
            id=RoleId(int(data["id"])),
            name=str(data.get("name", "")),
            colour=int(data.get("color", 0)),
            hoist=bool(data.get("hoist", False)),
            managed=bool(data.get("managed", False)),
            mentionable=bool(data.get("mentionable", False)),
            permissions=discord.Permissions(int(data.get("permissions", 0))),
            position=int(data.get("position", 0)),
        )


@dataclass(slots=True)
class Member:
    guild_id: GuildId
    user: User
    nick: str | None = None
    roles: List[RoleId] = field(default_factory=list)
    joined_at: str | None = None
    deaf: bool = False
    mute: bool = False

    @classmethod
    def from_payload(cls, data: Mapping[str, Any], guild_id: int) -> "Member":
        return cls(
            guild_id=GuildId(int(guild_id)),
            user=User.from_payload(data["user"]),
            nick=data.get("nick"),
            roles=[RoleId(int(rid)) for rid in data.get("roles", [])],
            joined_at=data.get("joined_at"),
            deaf=bool(data.get("deaf", False)),
            mute=bool(data.get("mute", False)),
        )


@dataclass(slots=True)
class MemberTarget:
    """Permission overwrite applying to one member."""

    user_id: UserId


@dataclass(slots=True)
class RoleTarget:
    """Permission overwrite applying to one role."""

    role_id: RoleId


@dataclass(slots=True)
class PermissionOverwrite:
    target: MemberTarget | RoleTarget
    allow: discord.Permissions = field(default_factory=discord.Permissions.none)
    deny: discord.Permissions = field(default_factory=discord.Permissions.none)

    def __post_init__(self) -> None:
        if not isinstance(self.target, (MemberTarget, RoleTarget)):
            raise TypeError(
                "permission overwrite target must be a MemberTarget or RoleTarget"
            )

    @property
    def kind(self) -> str:
        return "member" if isinstance(self.target, MemberTarget) else "role"

    @property
    def target_id(self) -> int:
        if isinstance(self.target, MemberTarget):
            return int(self.target.user_id)
        return int(self.target.role_id)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "PermissionOverwrite":
        target_id = int(data["id"])
        if data.get("type") == "member":
            target: MemberTarget | RoleTarget = MemberTarget(UserId(target_id))
        else:
            target = RoleTarget(RoleId(target_id))
        return cls(
            target=target,
            allow=discord.Permissions(int(data.get("allow", 0))),
            deny=discord.Permissions(int(data.get("deny", 0))),
        )


@dataclass(slots=True)
class GuildChannel:
    """A text, voice or category channel inside a guild."""

    id: ChannelId
    guild_id: GuildId | None
    name: str
    kind: discord.ChannelType
    position: int = 0
    topic: str | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    permission_overwrites: List[PermissionOverwrite] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "GuildChannel":
        guild_id = data.get("guild_id")
        return cls(
            id=ChannelId(int(data["id"])),
            guild_id=None if guild_id is None else GuildId(int(guild_id)),
            name=str(data.get("name", "")),
            kind=try_enum(discord.ChannelType, int(data.get("type", 0))),
            position=int(data.get("position", 0)),
            topic=data.get("topic"),
            bitrate=_opt_int(data.get("bitrate")),
            user_limit=_opt_int(data.get("user_limit")),
            permission_overwrites=[
                PermissionOverwrite.from_payload(o)
                for o in data.get("permission_overwrites", [])
            ],
        )


@dataclass(slots=True)
class PrivateChannel:
    """A one-to-one direct message channel."""

    id: ChannelId
    recipient: User
    last_message_id: int | None = None

    @property
    def kind(self) -> discord.ChannelType:
        return discord.ChannelType.private

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "PrivateChannel":
        recipients = data.get("recipients") or [data.get("recipient")]
        return cls(
            id=ChannelId(int(data["id"])),
            recipient=User.from_payload(recipients[0]),
            last_message_id=_opt_int(data.get("last_message_id")),
        )


@dataclass(slots=True)
class GroupChannel:
    """A multi-recipient direct message channel."""

    id: ChannelId
    name: str | None = None
    owner_id: UserId | None = None
    recipients: List[User] = field(default_factory=list)

    @property
    def kind(self) -> discord.ChannelType:
        return discord.ChannelType.group

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "GroupChannel":
        owner = data.get("owner_id")
        return cls(
            id=ChannelId(int(data["id"])),
            name=data.get("name"),
            owner_id=None if owner is None else UserId(int(owner)),
            recipients=[User.from_payload(u) for u in data.get("recipients", [])],
        )


Channel = Union[GuildChannel, PrivateChannel, GroupChannel]


def channel_from_payload(data: Mapping[str, Any]) -> Channel:
    """Decode any channel payload into its subtype."""

    kind = try_enum(discord.ChannelType, int(data.get("type", 0)))
    if kind == discord.ChannelType.private:
        return PrivateChannel.from_payload(data)
    if kind == discord.ChannelType.group:
        return GroupChannel.from_payload(data)
    return GuildChannel.from_payload(data)


@dataclass(slots=True)
class Emoji:
    id: EmojiId
    name: str
    animated: bool = False
    managed: bool = False
    require_colons: bool = True
    roles: List[RoleId] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Emoji":
        return cls(
            id=EmojiId(int(data["id"])),
            name=str(data.get("name", "")),
            animated=bool(data.get("animated", False)),
            managed=bool(data.get("managed", False)),
            require_colons=bool(data.get("require_colons", True)),
            roles=[RoleId(int(rid)) for rid in data.get("roles", [])],
        )

    @property
    def markup(self) -> str:
        prefix = "a" if self.animated else ""
        return f"<{prefix}:{self.name}:{self.id}>"


@dataclass(slots=True)
class Guild:
    id: GuildId
    name: str
    region: str | None = None
    icon: str | None = None
    owner_id: UserId | None = None
    channels: Dict[ChannelId, GuildChannel] = field(default_factory=dict)
    roles: Dict[RoleId, Role] = field(default_factory=dict)
    members: Dict[UserId, Member] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Guild":
        guild_id = GuildId(int(data["id"]))
        channels = {}
        for raw in data.get("channels", []):
            channel = GuildChannel.from_payload({"guild_id": guild_id, **raw})
            channels[channel.id] = channel
        roles = {}
        for raw in data.get("roles", []):
            role = Role.from_payload(raw)
            roles[role.id] = role
        members = {}
        for raw in data.get("members", []):
            member = Member.from_payload(raw, guild_id)
            members[member.user.id] = member
        owner = data.get("owner_id")
        return cls(
            id=guild_id,
            name=str(data.get("name", "")),
            region=data.get("region"),
            icon=data.get("icon"),
            owner_id=None if owner is None else UserId(int(owner)),
            channels=channels,
            roles=roles,
            members=members,
        )


@dataclass(frozen=True, slots=True)
class ReactionType:
    """A unicode or custom emoji used as a message reaction."""

    name: str
    id: EmojiId | None = None

    @classmethod
    def unicode(cls, emoji: str) -> "ReactionType":
        return cls(name=emoji)

    @classmethod
    def custom(cls, name: str, emoji_id: int) -> "ReactionType":
        return cls(name=name, id=EmojiId(int(emoji_id)))

    @classmethod
    def coerce(cls, value: "ReactionType | Emoji | str") -> "ReactionType":
        if isinstance(value, ReactionType):
            return value
        if isinstance(value, Emoji):
            return cls.custom(value.name, value.id)
        return cls.unicode(str(value))

    def as_path(self) -> str:
        """Return the URL path segment for this reaction (unquoted)."""

        if self.id is None:
            return self.name
        return f"{self.name}:{self.id}"
