"""
Request mediator: the single façade for every REST operation.

Every public method falls into one of four dispatch shapes:

* **network read** - straight to the transport, no cache involved;
* **cache-first read** - :meth:`RequestMediator.get_channel`,
  :meth:`~RequestMediator.get_channels`, :meth:`~RequestMediator.get_member`
  and :meth:`~RequestMediator.get_role` return a clone from the cache provider
  on a hit and only fall through to the network on a miss. Network results
  are never written back; populating the cache is the event pipeline's job;
* **builder-mediated mutation** - a builder is seeded (empty, or from prior
  state for channel, role and profile edits), passed through the caller's
  transform and the resulting field map is sent verbatim;
* **privilege-gated** - :meth:`~RequestMediator.ack`,
  :meth:`~RequestMediator.delete_messages` and
  :meth:`~RequestMediator.get_message` are refused for human-user sessions
  before anything else runs.

Validation rules from :mod:`guildwire.validation` run before the transport is
touched, so a :class:`~guildwire.errors.PreconditionViolation` always means no
request was sent. :class:`~guildwire.errors.RemoteFailure` from the transport
propagates unchanged.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, BinaryIO, Callable, Dict, Iterable, List, TypeVar

import discord

from .builders import (
    CreateEmbed,
    CreateInvite,
    CreateMessage,
    EditChannel,
    EditGuild,
    EditMember,
    EditProfile,
    EditRole,
    GetMessages,
    apply,
)
from .cache import CacheProvider, NullCache
from .connection import ConnectionHandle
from .errors import NoChannelAvailable, RecordNotFound, RemoteFailure, UnexpectedChannelType
from .ids import (
    ChannelId,
    EmojiId,
    GuildId,
    IntegrationId,
    MessageId,
    RoleId,
    UserId,
    coerce,
)
from .models import (
    Channel,
    CurrentUser,
    Emoji,
    Guild,
    GuildChannel,
    Member,
    MemberTarget,
    PermissionOverwrite,
    ReactionType,
    Role,
    RoleTarget,
)
from .privilege import Capability, PrivilegeClass, require
from .transport import FileUpload, Route, Transport
from .validation import (
    check_ban_days,
    check_message_length,
    check_payload_content,
    clamp_reaction_limit,
    parse_invite,
)

logger = logging.getLogger(__name__)

__all__ = ["RequestMediator"]

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_MESSAGES_LIMIT = 50
_HISTORY_CURSORS = ("after", "around", "before")
_EDITABLE_KINDS = (discord.ChannelType.text, discord.ChannelType.voice)


def gated(capability: Capability) -> Callable[[F], F]:
    """Check ``capability`` against the session privilege before the body runs."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: "RequestMediator", *args: Any, **kwargs: Any) -> Any:
            require(self.privilege, capability)
            return func(self, *args, **kwargs)

        wrapper.capability = capability  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


class RequestMediator:
    """Cache-aware, validating façade over a :class:`~guildwire.transport.Transport`.

    Args:
        connection: Shared handle to the gateway session, used for presence.
        privilege: Session identity; gates bot-only capabilities.
        transport: Performs the remote calls.
        cache: Optional cache provider; defaults to :class:`NullCache`.
        channel_id: Default channel used by :meth:`say`.
    """

    def __init__(
        self,
        connection: ConnectionHandle,
        privilege: PrivilegeClass,
        transport: Transport,
        *,
        cache: CacheProvider | None = None,
        channel_id: ChannelId | int | None = None,
    ) -> None:
        self._connection = connection
        self._privilege = privilege
        self._transport = transport
        self._cache: CacheProvider = cache if cache is not None else NullCache()
        self._channel_id = None if channel_id is None else coerce(ChannelId, channel_id)

    @property
    def connection(self) -> ConnectionHandle:
        return self._connection

    @property
    def privilege(self) -> PrivilegeClass:
        return self._privilege

    @property
    def cache(self) -> CacheProvider:
        return self._cache

    @property
    def channel_id(self) -> ChannelId | None:
        return self._channel_id

    def _invoke(
        self,
        route: Route,
        params: Dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        logger.debug("Dispatching %s %s", route, params or {})
        return self._transport.invoke(route, params or {}, body)

    # ------------------------------------------------------------------ #
    # Invites
    # ------------------------------------------------------------------ #

    def accept_invite(self, invite: str) -> Any:
        """Accept an invite given as a bare code or a ``discord.gg`` URL."""

        return self._invoke(Route.ACCEPT_INVITE, {"code": parse_invite(invite)})

    def create_invite(
        self,
        channel_id: ChannelId | int,
        f: Callable[[CreateInvite], CreateInvite] | None = None,
    ) -> Any:
        payload = apply(CreateInvite(), f)
        return self._invoke(
            Route.CREATE_INVITE, {"channel_id": coerce(ChannelId, channel_id)}, payload
        )

    def delete_invite(self, invite: str) -> Any:
        return self._invoke(Route.DELETE_INVITE, {"code": parse_invite(invite)})

    def get_invite(self, invite: str) -> Any:
        return self._invoke(Route.GET_INVITE, {"code": parse_invite(invite)})

    def get_channel_invites(self, channel_id: ChannelId | int) -> List[Any]:
        return self._invoke(
            Route.GET_CHANNEL_INVITES, {"channel_id": coerce(ChannelId, channel_id)}
        )

    def get_guild_invites(self, guild_id: GuildId | int) -> List[Any]:
        return self._invoke(Route.GET_GUILD_INVITES, {"guild_id": coerce(GuildId, guild_id)})

    # ------------------------------------------------------------------ #
    # Messages
    # ------------------------------------------------------------------ #

    @gated(Capability.ACK_MESSAGE)
    def ack(self, channel_id: ChannelId | int, message_id: MessageId | int) -> None:
        """Mark a message as read. Automated agents only."""

        self._invoke(
            Route.ACK_MESSAGE,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
            },
        )

    def broadcast_typing(self, channel_id: ChannelId | int) -> None:
        self._invoke(Route.BROADCAST_TYPING, {"channel_id": coerce(ChannelId, channel_id)})

    def delete_message(self, channel_id: ChannelId | int, message_id: MessageId | int) -> None:
        self._invoke(
            Route.DELETE_MESSAGE,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
            },
        )

    @gated(Capability.BULK_DELETE_MESSAGES)
    def delete_messages(
        self, channel_id: ChannelId | int, message_ids: Iterable[MessageId | int]
    ) -> None:
        """Bulk-delete messages. Automated agents only."""

        ids = [int(coerce(MessageId, mid)) for mid in message_ids]
        self._invoke(
            Route.DELETE_MESSAGES,
            {"channel_id": coerce(ChannelId, channel_id)},
            {"messages": ids},
        )

    def dm(self, target_id: ChannelId | int, content: str) -> Any:
        """Send ``content`` to the direct message channel ``target_id``."""

        return self.send_message(target_id, lambda m: m.content(content))

    def edit_message(
        self,
        channel_id: ChannelId | int,
        message_id: MessageId | int,
        text: str,
        f: Callable[[CreateEmbed], CreateEmbed] | None = None,
    ) -> Any:
        check_message_length(text)
        payload = {"content": text, "embed": apply(CreateEmbed(), f)}
        return self._invoke(
            Route.EDIT_MESSAGE,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
            },
            payload,
        )

    @gated(Capability.GET_MESSAGE)
    def get_message(self, channel_id: ChannelId | int, message_id: MessageId | int) -> Any:
        """Fetch a single message by id. Automated agents only."""

        return self._invoke(
            Route.GET_MESSAGE,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
            },
        )

    def get_messages(
        self,
        channel_id: ChannelId | int,
        f: Callable[[GetMessages], GetMessages] | None = None,
    ) -> List[Any]:
        """Fetch message history.

        ``limit`` defaults to 50 and is always sent; the ``after``, ``around``
        and ``before`` cursors follow in that order, only when set.
        """

        fields = apply(GetMessages(), f)
        params: Dict[str, Any] = {
            "channel_id": coerce(ChannelId, channel_id),
            "limit": fields.pop("limit", DEFAULT_MESSAGES_LIMIT),
        }
        for cursor in _HISTORY_CURSORS:
            if cursor in fields:
                params[cursor] = fields.pop(cursor)
        return self._invoke(Route.GET_MESSAGES, params)

    def get_pins(self, channel_id: ChannelId | int) -> List[Any]:
        return self._invoke(Route.GET_PINS, {"channel_id": coerce(ChannelId, channel_id)})

    def pin(self, channel_id: ChannelId | int, message_id: MessageId | int) -> None:
        self._invoke(
            Route.PIN_MESSAGE,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
            },
        )

    def unpin(self, channel_id: ChannelId | int, message_id: MessageId | int) -> None:
        self._invoke(
            Route.UNPIN_MESSAGE,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
            },
        )

    def say(self, content: str) -> Any:
        """Send ``content`` to the default channel.

        Raises :class:`~guildwire.errors.NoChannelAvailable` when the mediator
        was built without one.
        """

        if self._channel_id is None:
            logger.warning("say() called without a default channel")
            raise NoChannelAvailable()
        return self.send_message(self._channel_id, lambda m: m.content(content))

    def send_file(
        self,
        channel_id: ChannelId | int,
        content: str,
        file: BinaryIO | bytes,
        filename: str,
    ) -> Any:
        check_message_length(content)
        return self._invoke(
            Route.SEND_FILE,
            {"channel_id": coerce(ChannelId, channel_id)},
            FileUpload(content=content, file=file, filename=filename),
        )

    def send_message(
        self,
        channel_id: ChannelId | int,
        f: Callable[[CreateMessage], CreateMessage] | None = None,
    ) -> Any:
        payload = apply(CreateMessage(), f)
        check_payload_content(payload)
        return self._invoke(
            Route.SEND_MESSAGE, {"channel_id": coerce(ChannelId, channel_id)}, payload
        )

    # ------------------------------------------------------------------ #
    # Reactions
    # ------------------------------------------------------------------ #

    def create_reaction(
        self,
        channel_id: ChannelId | int,
        message_id: MessageId | int,
        reaction: ReactionType | Emoji | str,
    ) -> None:
        self._invoke(
            Route.CREATE_REACTION,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
                "reaction": ReactionType.coerce(reaction).as_path(),
            },
        )

    def delete_reaction(
        self,
        channel_id: ChannelId | int,
        message_id: MessageId | int,
        reaction: ReactionType | Emoji | str,
        user_id: UserId | int | None = None,
    ) -> None:
        """Remove a reaction; ``user_id=None`` removes the current user's own."""

        user = "@me" if user_id is None else coerce(UserId, user_id)
        self._invoke(
            Route.DELETE_REACTION,
            {
                "channel_id": coerce(ChannelId, channel_id),
                "message_id": coerce(MessageId, message_id),
                "reaction": ReactionType.coerce(reaction).as_path(),
                "user": user,
            },
        )

    def get_reaction_users(
        self,
        channel_id: ChannelId | int,
        message_id: MessageId | int,
        reaction: ReactionType | Emoji | str,
        limit: int | None = None,
        after: UserId | int | None = None,
    ) -> List[Any]:
        """List users who reacted; ``limit`` is clamped to 100 (default 50)."""

        params: Dict[str, Any] = {
            "channel_id": coerce(ChannelId, channel_id),
            "message_id": coerce(MessageId, message_id),
            "reaction": ReactionType.coerce(reaction).as_path(),
            "limit": clamp_reaction_limit(limit),
        }
        if after is not None:
            params["after"] = coerce(UserId, after)
        return self._invoke(Route.GET_REACTION_USERS, params)

    # ------------------------------------------------------------------ #
    # Channels
    # ------------------------------------------------------------------ #

    def create_channel(
        self,
        guild_id: GuildId | int,
        name: str,
        kind: discord.ChannelType = discord.ChannelType.text,
    ) -> GuildChannel:
        payload = {"name": name, "type": kind.value}
        return self._invoke(
            Route.CREATE_CHANNEL, {"guild_id": coerce(GuildId, guild_id)}, payload
        )

    def create_private_channel(self, user_id: UserId | int) -> Channel:
        payload = {"recipient_id": int(coerce(UserId, user_id))}
        return self._invoke(Route.CREATE_PRIVATE_CHANNEL, {}, payload)

    def delete_channel(self, channel_id: ChannelId | int) -> Channel:
        return self._invoke(Route.DELETE_CHANNEL, {"channel_id": coerce(ChannelId, channel_id)})

    def get_channel(self, channel_id: ChannelId | int) -> Channel:
        """Return the channel, from the cache when it holds it."""

        channel_id = coerce(ChannelId, channel_id)
        cached = self._cache.lookup_channel(channel_id)
        if cached is not None:
            logger.debug("Cache hit for channel %s", channel_id)
            return cached
        return self._invoke(Route.GET_CHANNEL, {"channel_id": channel_id})

    def get_channels(self, guild_id: GuildId | int) -> Dict[ChannelId, GuildChannel]:
        """Return a guild's channels keyed by id, from the cache when possible."""

        guild_id = coerce(GuildId, guild_id)
        guild = self._cache.lookup_guild(guild_id)
        if guild is not None:
            logger.debug("Cache hit for channels of guild %s", guild_id)
            return guild.channels
        channels = self._invoke(Route.GET_CHANNELS, {"guild_id": guild_id})
        return {channel.id: channel for channel in channels}

    def edit_channel(
        self,
        channel_id: ChannelId | int,
        f: Callable[[EditChannel], EditChannel] | None = None,
    ) -> GuildChannel:
        """Edit a text or voice channel, seeding the builder from its current state.

        Any other channel subtype raises
        :class:`~guildwire.errors.UnexpectedChannelType` before a payload is
        built.
        """

        channel_id = coerce(ChannelId, channel_id)
        channel = self.get_channel(channel_id)
        if not isinstance(channel, GuildChannel) or channel.kind not in _EDITABLE_KINDS:
            logger.warning("Refusing to edit %s channel %s", channel.kind, channel_id)
            raise UnexpectedChannelType(channel.kind)

        builder = EditChannel().name(channel.name).position(channel.position)
        if channel.kind == discord.ChannelType.text:
            builder.topic(channel.topic)
        else:
            builder.bitrate(channel.bitrate).user_limit(channel.user_limit)

        payload = apply(builder, f)
        return self._invoke(Route.EDIT_CHANNEL, {"channel_id": channel_id}, payload)

    def create_permission(
        self, channel_id: ChannelId | int, overwrite: PermissionOverwrite
    ) -> None:
        payload = {
            "allow": overwrite.allow.value,
            "deny": overwrite.deny.value,
            "id": overwrite.target_id,
            "type": overwrite.kind,
        }
        self._invoke(
            Route.CREATE_PERMISSION,
            {"channel_id": coerce(ChannelId, channel_id), "target_id": overwrite.target_id},
            payload,
        )

    def delete_permission(
        self,
        channel_id: ChannelId | int,
        target: MemberTarget | RoleTarget | PermissionOverwrite,
    ) -> None:
        if isinstance(target, PermissionOverwrite):
            target_id = target.target_id
        elif isinstance(target, MemberTarget):
            target_id = int(target.user_id)
        elif isinstance(target, RoleTarget):
            target_id = int(target.role_id)
        else:
            raise TypeError("permission target must be a MemberTarget or RoleTarget")
        self._invoke(
            Route.DELETE_PERMISSION,
            {"channel_id": coerce(ChannelId, channel_id), "target_id": target_id},
        )

    # ------------------------------------------------------------------ #
    # Emoji
    # ------------------------------------------------------------------ #

    def create_emoji(self, guild_id: GuildId | int, name: str, image: str) -> Emoji:
        """Create a custom emoji; ``image`` is a base64 data URI."""

        return self._invoke(
            Route.CREATE_EMOJI,
            {"guild_id": coerce(GuildId, guild_id)},
            {"name": name, "image": image},
        )

    def delete_emoji(self, guild_id: GuildId | int, emoji_id: EmojiId | int) -> None:
        self._invoke(
            Route.DELETE_EMOJI,
            {"guild_id": coerce(GuildId, guild_id), "emoji_id": coerce(EmojiId, emoji_id)},
        )

    def edit_emoji(self, guild_id: GuildId | int, emoji_id: EmojiId | int, name: str) -> Emoji:
        return self._invoke(
            Route.EDIT_EMOJI,
            {"guild_id": coerce(GuildId, guild_id), "emoji_id": coerce(EmojiId, emoji_id)},
            {"name": name},
        )

    def get_emoji(self, guild_id: GuildId | int, emoji_id: EmojiId | int) -> Emoji:
        return self._invoke(
            Route.GET_EMOJI,
            {"guild_id": coerce(GuildId, guild_id), "emoji_id": coerce(EmojiId, emoji_id)},
        )

    def get_emojis(self, guild_id: GuildId | int) -> List[Emoji]:
        return self._invoke(Route.GET_EMOJIS, {"guild_id": coerce(GuildId, guild_id)})

    # ------------------------------------------------------------------ #
    # Guilds
    # ------------------------------------------------------------------ #

    def create_guild(self, name: str, region: str, icon: str | None = None) -> Guild:
        return self._invoke(
            Route.CREATE_GUILD, {}, {"icon": icon, "name": name, "region": region}
        )

    def delete_guild(self, guild_id: GuildId | int) -> Guild:
        return self._invoke(Route.DELETE_GUILD, {"guild_id": coerce(GuildId, guild_id)})

    def edit_guild(
        self,
        guild_id: GuildId | int,
        f: Callable[[EditGuild], EditGuild] | None = None,
    ) -> Guild:
        payload = apply(EditGuild(), f)
        return self._invoke(Route.EDIT_GUILD, {"guild_id": coerce(GuildId, guild_id)}, payload)

    def get_guild(self, guild_id: GuildId | int) -> Guild:
        return self._invoke(Route.GET_GUILD, {"guild_id": coerce(GuildId, guild_id)})

    def get_guilds(self) -> List[Any]:
        return self._invoke(Route.GET_GUILDS)

    def leave_guild(self, guild_id: GuildId | int) -> Guild:
        return self._invoke(Route.LEAVE_GUILD, {"guild_id": coerce(GuildId, guild_id)})

    def get_guild_prune_count(self, guild_id: GuildId | int, days: int) -> Any:
        return self._invoke(
            Route.GET_GUILD_PRUNE_COUNT, {"guild_id": coerce(GuildId, guild_id), "days": days}
        )

    def start_guild_prune(self, guild_id: GuildId | int, days: int) -> Any:
        return self._invoke(
            Route.START_GUILD_PRUNE, {"guild_id": coerce(GuildId, guild_id), "days": days}
        )

    # ------------------------------------------------------------------ #
    # Integrations
    # ------------------------------------------------------------------ #

    def create_integration(
        self,
        guild_id: GuildId | int,
        integration_id: IntegrationId | int,
        kind: str,
    ) -> None:
        integration_id = coerce(IntegrationId, integration_id)
        self._invoke(
            Route.CREATE_GUILD_INTEGRATION,
            {"guild_id": coerce(GuildId, guild_id), "integration_id": integration_id},
            {"id": int(integration_id), "type": kind},
        )

    def delete_integration(
        self, guild_id: GuildId | int, integration_id: IntegrationId | int
    ) -> None:
        self._invoke(
            Route.DELETE_GUILD_INTEGRATION,
            {
                "guild_id": coerce(GuildId, guild_id),
                "integration_id": coerce(IntegrationId, integration_id),
            },
        )

    def get_integrations(self, guild_id: GuildId | int) -> List[Any]:
        return self._invoke(
            Route.GET_GUILD_INTEGRATIONS, {"guild_id": coerce(GuildId, guild_id)}
        )

    def start_integration_sync(
        self, guild_id: GuildId | int, integration_id: IntegrationId | int
    ) -> None:
        self._invoke(
            Route.START_INTEGRATION_SYNC,
            {
                "guild_id": coerce(GuildId, guild_id),
                "integration_id": coerce(IntegrationId, integration_id),
            },
        )

    # ------------------------------------------------------------------ #
    # Members & bans
    # ------------------------------------------------------------------ #

    def ban(
        self,
        guild_id: GuildId | int,
        user_id: UserId | int,
        delete_message_days: int = 0,
    ) -> None:
        """Ban a user, pruning up to seven days of their messages."""

        check_ban_days(delete_message_days)
        self._invoke(
            Route.BAN_USER,
            {
                "guild_id": coerce(GuildId, guild_id),
                "user_id": coerce(UserId, user_id),
                "delete-message-days": delete_message_days,
            },
        )

    def unban(self, guild_id: GuildId | int, user_id: UserId | int) -> None:
        self._invoke(
            Route.REMOVE_BAN,
            {"guild_id": coerce(GuildId, guild_id), "user_id": coerce(UserId, user_id)},
        )

    def get_bans(self, guild_id: GuildId | int) -> List[Any]:
        return self._invoke(Route.GET_BANS, {"guild_id": coerce(GuildId, guild_id)})

    def kick_member(self, guild_id: GuildId | int, user_id: UserId | int) -> None:
        self._invoke(
            Route.KICK_MEMBER,
            {"guild_id": coerce(GuildId, guild_id), "user_id": coerce(UserId, user_id)},
        )

    def edit_member(
        self,
        guild_id: GuildId | int,
        user_id: UserId | int,
        f: Callable[[EditMember], EditMember] | None = None,
    ) -> None:
        payload = apply(EditMember(), f)
        self._invoke(
            Route.EDIT_MEMBER,
            {"guild_id": coerce(GuildId, guild_id), "user_id": coerce(UserId, user_id)},
            payload,
        )

    def edit_nickname(self, guild_id: GuildId | int, nickname: str | None) -> None:
        """Change (or with ``None``, reset) the current user's nickname."""

        self._invoke(
            Route.EDIT_NICKNAME, {"guild_id": coerce(GuildId, guild_id)}, {"nick": nickname}
        )

    def move_member(
        self,
        guild_id: GuildId | int,
        user_id: UserId | int,
        channel_id: ChannelId | int,
    ) -> None:
        """Move a member into another voice channel."""

        self._invoke(
            Route.EDIT_MEMBER,
            {"guild_id": coerce(GuildId, guild_id), "user_id": coerce(UserId, user_id)},
            {"channel_id": int(coerce(ChannelId, channel_id))},
        )

    def get_member(self, guild_id: GuildId | int, user_id: UserId | int) -> Member:
        """Return a guild member, from the cache when it holds them."""

        guild_id = coerce(GuildId, guild_id)
        user_id = coerce(UserId, user_id)
        cached = self._cache.lookup_member(guild_id, user_id)
        if cached is not None:
            logger.debug("Cache hit for member %s in guild %s", user_id, guild_id)
            return cached
        return self._invoke(Route.GET_MEMBER, {"guild_id": guild_id, "user_id": user_id})

    # ------------------------------------------------------------------ #
    # Roles
    # ------------------------------------------------------------------ #

    def create_role(
        self,
        guild_id: GuildId | int,
        f: Callable[[EditRole], EditRole] | None = None,
    ) -> Role:
        """Create a role and apply ``f`` to it.

        The API only creates bare roles, so this issues a create followed by an
        edit. If the edit fails the bare role remains on the server; the edit's
        :class:`~guildwire.errors.RemoteFailure` is raised with the bare role
        attached as ``created`` and cleanup is left to the caller.
        """

        guild_id = coerce(GuildId, guild_id)
        role = self._invoke(Route.CREATE_ROLE, {"guild_id": guild_id})
        payload = apply(EditRole(), f)
        try:
            return self._invoke(
                Route.EDIT_ROLE, {"guild_id": guild_id, "role_id": role.id}, payload
            )
        except RemoteFailure as exc:
            logger.warning(
                "Role %s was created in guild %s but could not be edited", role.id, guild_id
            )
            exc.created = role
            raise

    def delete_role(self, guild_id: GuildId | int, role_id: RoleId | int) -> None:
        self._invoke(
            Route.DELETE_ROLE,
            {"guild_id": coerce(GuildId, guild_id), "role_id": coerce(RoleId, role_id)},
        )

    def get_roles(self, guild_id: GuildId | int) -> List[Role]:
        return self._invoke(Route.GET_ROLES, {"guild_id": coerce(GuildId, guild_id)})

    def get_role(self, guild_id: GuildId | int, role_id: RoleId | int) -> Role:
        """Return a role, from the cache when possible.

        The API has no single-role endpoint, so a cache miss lists the guild's
        roles. Raises :class:`~guildwire.errors.RecordNotFound` when the role
        is not among them.
        """

        guild_id = coerce(GuildId, guild_id)
        role_id = coerce(RoleId, role_id)
        cached = self._cache.lookup_role(guild_id, role_id)
        if cached is not None:
            logger.debug("Cache hit for role %s in guild %s", role_id, guild_id)
            return cached
        for role in self.get_roles(guild_id):
            if role.id == role_id:
                return role
        raise RecordNotFound("role", (guild_id, role_id))

    def edit_role(
        self,
        guild_id: GuildId | int,
        role_id: RoleId | int,
        f: Callable[[EditRole], EditRole] | None = None,
    ) -> Role:
        """Edit a role, seeding the builder from the role's current state.

        Prior state is resolved through :meth:`get_role`, so the edit payload
        always carries every field the role already has.
        """

        guild_id = coerce(GuildId, guild_id)
        role_id = coerce(RoleId, role_id)
        role = self.get_role(guild_id, role_id)
        payload = apply(EditRole.from_role(role), f)
        return self._invoke(Route.EDIT_ROLE, {"guild_id": guild_id, "role_id": role_id}, payload)

    # ------------------------------------------------------------------ #
    # Current user
    # ------------------------------------------------------------------ #

    def get_current_user(self) -> CurrentUser:
        return self._invoke(Route.GET_CURRENT_USER)

    def edit_profile(
        self, f: Callable[[EditProfile], EditProfile] | None = None
    ) -> CurrentUser:
        """Edit the current user's profile.

        The current identity is always fetched from the network, never the
        cache, and seeds ``avatar``, ``username`` and (when known) ``email``.
        """

        user = self.get_current_user()
        builder = EditProfile().avatar(user.avatar).username(user.name)
        if user.email is not None:
            builder.email(user.email)
        payload = apply(builder, f)
        return self._invoke(Route.EDIT_PROFILE, {}, payload)

    def edit_note(self, user_id: UserId | int, note: str) -> None:
        self._invoke(Route.EDIT_NOTE, {"user_id": coerce(UserId, user_id)}, {"note": note})

    def delete_note(self, user_id: UserId | int) -> None:
        self.edit_note(user_id, "")

    # ------------------------------------------------------------------ #
    # Presence
    # ------------------------------------------------------------------ #

    def set_game(self, game: discord.BaseActivity | str | None) -> None:
        """Set the playing status, keeping the session online and not AFK."""

        if isinstance(game, str):
            game = discord.Game(name=game)
        self._connection.set_presence(game, discord.Status.online, False)

    def set_presence(
        self,
        game: discord.BaseActivity | None,
        status: discord.Status,
        afk: bool = False,
    ) -> None:
        self._connection.set_presence(game, status, afk)
