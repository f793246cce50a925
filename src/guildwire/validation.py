"""
Platform invariants checked before any request is issued.

Every ``check_*`` helper raises a :class:`~guildwire.errors.PreconditionViolation`
subclass and never touches the network, so the mediator can call them first
and rely on obviously-invalid requests never reaching the transport.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .errors import DeleteMessageDaysOutOfRange, MessageTooLong

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000
MAX_BAN_DELETE_DAYS = 7
REACTION_USERS_DEFAULT_LIMIT = 50
REACTION_USERS_MAX_LIMIT = 100

_INVITE_PREFIXES = (
    "https://discord.gg/",
    "http://discord.gg/",
    "discord.gg/",
)

__all__ = [
    "MAX_BAN_DELETE_DAYS",
    "MAX_MESSAGE_LENGTH",
    "REACTION_USERS_DEFAULT_LIMIT",
    "REACTION_USERS_MAX_LIMIT",
    "check_ban_days",
    "check_message_length",
    "check_payload_content",
    "clamp_reaction_limit",
    "overflow_length",
    "parse_invite",
]


def overflow_length(content: str) -> int | None:
    """Return how many code points ``content`` exceeds the limit by, if any."""

    # ``len`` on ``str`` counts code points, which is what the platform limits.
    length = len(content)
    if length > MAX_MESSAGE_LENGTH:
        return length - MAX_MESSAGE_LENGTH
    return None


def check_message_length(content: str) -> None:
    over = overflow_length(content)
    if over is not None:
        logger.warning("Rejected message content: %d code point(s) over limit", over)
        raise MessageTooLong(over)


def check_payload_content(payload: Mapping[str, Any]) -> None:
    """Apply the length rule to ``payload['content']`` when it is a string."""

    content = payload.get("content")
    if isinstance(content, str):
        check_message_length(content)


def check_ban_days(days: int) -> None:
    if days < 0 or days > MAX_BAN_DELETE_DAYS:
        logger.warning("Rejected ban: delete_message_days=%d", days)
        raise DeleteMessageDaysOutOfRange(days)


def clamp_reaction_limit(limit: int | None) -> int:
    """Clamp a reaction-user page size into ``1..100``.

    ``None`` selects the default page size. Out-of-range values are clamped
    silently rather than rejected.
    """

    if limit is None:
        return REACTION_USERS_DEFAULT_LIMIT
    return max(1, min(limit, REACTION_USERS_MAX_LIMIT))


def parse_invite(code: str) -> str:
    """Strip known invite URL prefixes, returning the bare invite code."""

    for prefix in _INVITE_PREFIXES:
        if code.startswith(prefix):
            return code[len(prefix) :]
    return code
