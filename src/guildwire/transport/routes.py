"""
Route table for the REST API.

Each :class:`Route` names one remote operation; :data:`ROUTES` maps it to the
HTTP method, the path template and the decoder that turns the JSON response
into an entity from :mod:`guildwire.models`. Routes without a decoder hand the
raw JSON back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable, Mapping

from ..models import (
    CurrentUser,
    Emoji,
    Guild,
    GuildChannel,
    Member,
    Role,
    channel_from_payload,
)

__all__ = ["ROUTES", "Route", "RouteSpec"]

Decoder = Callable[[Any, Mapping[str, Any]], Any]


class Route(StrEnum):
    ACCEPT_INVITE = "accept_invite"
    ACK_MESSAGE = "ack_message"
    BAN_USER = "ban_user"
    BROADCAST_TYPING = "broadcast_typing"
    CREATE_CHANNEL = "create_channel"
    CREATE_EMOJI = "create_emoji"
    CREATE_GUILD = "create_guild"
    CREATE_GUILD_INTEGRATION = "create_guild_integration"
    CREATE_INVITE = "create_invite"
    CREATE_PERMISSION = "create_permission"
    CREATE_PRIVATE_CHANNEL = "create_private_channel"
    CREATE_REACTION = "create_reaction"
    CREATE_ROLE = "create_role"
    DELETE_CHANNEL = "delete_channel"
    DELETE_EMOJI = "delete_emoji"
    DELETE_GUILD = "delete_guild"
    DELETE_GUILD_INTEGRATION = "delete_guild_integration"
    DELETE_INVITE = "delete_invite"
    DELETE_MESSAGE = "delete_message"
    DELETE_MESSAGES = "delete_messages"
    DELETE_PERMISSION = "delete_permission"
    DELETE_REACTION = "delete_reaction"
    DELETE_ROLE = "delete_role"
    EDIT_CHANNEL = "edit_channel"
    EDIT_EMOJI = "edit_emoji"
    EDIT_GUILD = "edit_guild"
    EDIT_MEMBER = "edit_member"
    EDIT_MESSAGE = "edit_message"
    EDIT_NICKNAME = "edit_nickname"
    EDIT_NOTE = "edit_note"
    EDIT_PROFILE = "edit_profile"
    EDIT_ROLE = "edit_role"
    GET_BANS = "get_bans"
    GET_CHANNEL = "get_channel"
    GET_CHANNEL_INVITES = "get_channel_invites"
    GET_CHANNELS = "get_channels"
    GET_CURRENT_USER = "get_current_user"
    GET_EMOJI = "get_emoji"
    GET_EMOJIS = "get_emojis"
    GET_GUILD = "get_guild"
    GET_GUILD_INTEGRATIONS = "get_guild_integrations"
    GET_GUILD_INVITES = "get_guild_invites"
    GET_GUILD_PRUNE_COUNT = "get_guild_prune_count"
    GET_GUILDS = "get_guilds"
    GET_INVITE = "get_invite"
    GET_MEMBER = "get_member"
    GET_MESSAGE = "get_message"
    GET_MESSAGES = "get_messages"
    GET_PINS = "get_pins"
    GET_REACTION_USERS = "get_reaction_users"
    GET_ROLES = "get_roles"
    KICK_MEMBER = "kick_member"
    LEAVE_GUILD = "leave_guild"
    PIN_MESSAGE = "pin_message"
    REMOVE_BAN = "remove_ban"
    SEND_FILE = "send_file"
    SEND_MESSAGE = "send_message"
    START_GUILD_PRUNE = "start_guild_prune"
    START_INTEGRATION_SYNC = "start_integration_sync"
    UNPIN_MESSAGE = "unpin_message"


@dataclass(frozen=True, slots=True)
class RouteSpec:
    method: str
    path: str
    decoder: Decoder | None = None


def _one(factory: Callable[[Any], Any]) -> Decoder:
    return lambda payload, params: factory(payload)


def _many(factory: Callable[[Any], Any]) -> Decoder:
    return lambda payload, params: [factory(item) for item in payload]


def _guild_channels(payload: Any, params: Mapping[str, Any]) -> list[GuildChannel]:
    guild_id = params["guild_id"]
    return [GuildChannel.from_payload({"guild_id": guild_id, **raw}) for raw in payload]


def _member(payload: Any, params: Mapping[str, Any]) -> Member:
    return Member.from_payload(payload, params["guild_id"])


_channel = _one(channel_from_payload)
_guild_channel = _one(GuildChannel.from_payload)
_guild = _one(Guild.from_payload)
_role = _one(Role.from_payload)
_emoji = _one(Emoji.from_payload)
_current_user = _one(CurrentUser.from_payload)

_C = "/channels/{channel_id}"
_M = _C + "/messages/{message_id}"
_G = "/guilds/{guild_id}"

ROUTES: Mapping[Route, RouteSpec] = {
    Route.ACCEPT_INVITE: RouteSpec("POST", "/invites/{code}"),
    Route.ACK_MESSAGE: RouteSpec("POST", _M + "/ack"),
    Route.BAN_USER: RouteSpec("PUT", _G + "/bans/{user_id}"),
    Route.BROADCAST_TYPING: RouteSpec("POST", _C + "/typing"),
    Route.CREATE_CHANNEL: RouteSpec("POST", _G + "/channels", _guild_channel),
    Route.CREATE_EMOJI: RouteSpec("POST", _G + "/emojis", _emoji),
    Route.CREATE_GUILD: RouteSpec("POST", "/guilds", _guild),
    Route.CREATE_GUILD_INTEGRATION: RouteSpec(
        "POST", _G + "/integrations/{integration_id}"
    ),
    Route.CREATE_INVITE: RouteSpec("POST", _C + "/invites"),
    Route.CREATE_PERMISSION: RouteSpec("PUT", _C + "/permissions/{target_id}"),
    Route.CREATE_PRIVATE_CHANNEL: RouteSpec("POST", "/users/@me/channels", _channel),
    Route.CREATE_REACTION: RouteSpec("PUT", _M + "/reactions/{reaction}/@me"),
    Route.CREATE_ROLE: RouteSpec("POST", _G + "/roles", _role),
    Route.DELETE_CHANNEL: RouteSpec("DELETE", _C, _channel),
    Route.DELETE_EMOJI: RouteSpec("DELETE", _G + "/emojis/{emoji_id}"),
    Route.DELETE_GUILD: RouteSpec("DELETE", _G, _guild),
    Route.DELETE_GUILD_INTEGRATION: RouteSpec(
        "DELETE", _G + "/integrations/{integration_id}"
    ),
    Route.DELETE_INVITE: RouteSpec("DELETE", "/invites/{code}"),
    Route.DELETE_MESSAGE: RouteSpec("DELETE", _M),
    Route.DELETE_MESSAGES: RouteSpec("POST", _C + "/messages/bulk-delete"),
    Route.DELETE_PERMISSION: RouteSpec("DELETE", _C + "/permissions/{target_id}"),
    Route.DELETE_REACTION: RouteSpec("DELETE", _M + "/reactions/{reaction}/{user}"),
    Route.DELETE_ROLE: RouteSpec("DELETE", _G + "/roles/{role_id}"),
    Route.EDIT_CHANNEL: RouteSpec("PATCH", _C, _guild_channel),
    Route.EDIT_EMOJI: RouteSpec("PATCH", _G + "/emojis/{emoji_id}", _emoji),
    Route.EDIT_GUILD: RouteSpec("PATCH", _G, _guild),
    Route.EDIT_MEMBER: RouteSpec("PATCH", _G + "/members/{user_id}"),
    Route.EDIT_MESSAGE: RouteSpec("PATCH", _M),
    Route.EDIT_NICKNAME: RouteSpec("PATCH", _G + "/members/@me/nick"),
    Route.EDIT_NOTE: RouteSpec("PUT", "/users/@me/notes/{user_id}"),
    Route.EDIT_PROFILE: RouteSpec("PATCH", "/users/@me", _current_user),
    Route.EDIT_ROLE: RouteSpec("PATCH", _G + "/roles/{role_id}", _role),
    Route.GET_BANS: RouteSpec("GET", _G + "/bans"),
    Route.GET_CHANNEL: RouteSpec("GET", _C, _channel),
    Route.GET_CHANNEL_INVITES: RouteSpec("GET", _C + "/invites"),
    Route.GET_CHANNELS: RouteSpec("GET", _G + "/channels", _guild_channels),
    Route.GET_CURRENT_USER: RouteSpec("GET", "/users/@me", _current_user),
    Route.GET_EMOJI: RouteSpec("GET", _G + "/emojis/{emoji_id}", _emoji),
    Route.GET_EMOJIS: RouteSpec("GET", _G + "/emojis", _many(Emoji.from_payload)),
    Route.GET_GUILD: RouteSpec("GET", _G, _guild),
    Route.GET_GUILD_INTEGRATIONS: RouteSpec("GET", _G + "/integrations"),
    Route.GET_GUILD_INVITES: RouteSpec("GET", _G + "/invites"),
    Route.GET_GUILD_PRUNE_COUNT: RouteSpec("GET", _G + "/prune"),
    Route.GET_GUILDS: RouteSpec("GET", "/users/@me/guilds"),
    Route.GET_INVITE: RouteSpec("GET", "/invites/{code}"),
    Route.GET_MEMBER: RouteSpec("GET", _G + "/members/{user_id}", _member),
    Route.GET_MESSAGE: RouteSpec("GET", _M),
    Route.GET_MESSAGES: RouteSpec("GET", _C + "/messages"),
    Route.GET_PINS: RouteSpec("GET", _C + "/pins"),
    Route.GET_REACTION_USERS: RouteSpec("GET", _M + "/reactions/{reaction}"),
    Route.GET_ROLES: RouteSpec("GET", _G + "/roles", _many(Role.from_payload)),
    Route.KICK_MEMBER: RouteSpec("DELETE", _G + "/members/{user_id}"),
    Route.LEAVE_GUILD: RouteSpec("DELETE", "/users/@me/guilds/{guild_id}", _guild),
    Route.PIN_MESSAGE: RouteSpec("PUT", _C + "/pins/{message_id}"),
    Route.REMOVE_BAN: RouteSpec("DELETE", _G + "/bans/{user_id}"),
    Route.SEND_FILE: RouteSpec("POST", _C + "/messages"),
    Route.SEND_MESSAGE: RouteSpec("POST", _C + "/messages"),
    Route.START_GUILD_PRUNE: RouteSpec("POST", _G + "/prune"),
    Route.START_INTEGRATION_SYNC: RouteSpec(
        "POST", _G + "/integrations/{integration_id}/sync"
    ),
    Route.UNPIN_MESSAGE: RouteSpec("DELETE", _C + "/pins/{message_id}"),
}
