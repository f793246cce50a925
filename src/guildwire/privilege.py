"""Privilege classes and the capability table that gates bot-only operations."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .errors import InvalidOperationAsUser

logger = logging.getLogger(__name__)

__all__ = [
    "Capability",
    "PrivilegeClass",
    "REQUIRED_PRIVILEGE",
    "require",
]


class PrivilegeClass(Enum):
    """Operating identity of the session (bot token vs. user token)."""

    AUTOMATED_AGENT = "bot"
    HUMAN_USER = "user"

    @classmethod
    def from_token_kind(cls, raw: str) -> "PrivilegeClass":
        value = raw.strip().lower()
        if value in {"bot", "automated", "automated_agent"}:
            return cls.AUTOMATED_AGENT
        if value in {"user", "human", "human_user"}:
            return cls.HUMAN_USER
        raise ValueError(f"Unknown login type: {raw!r}")

    def permits(self, capability: "Capability") -> bool:
        required = REQUIRED_PRIVILEGE.get(capability)
        return required is None or required is self


class Capability(Enum):
    """Capabilities whose availability depends on the privilege class."""

    ACK_MESSAGE = "ack_message"
    BULK_DELETE_MESSAGES = "bulk_delete_messages"
    GET_MESSAGE = "get_message"

    def __str__(self) -> str:
        return self.value


REQUIRED_PRIVILEGE: Mapping[Capability, PrivilegeClass] = MappingProxyType(
    {
        Capability.ACK_MESSAGE: PrivilegeClass.AUTOMATED_AGENT,
        Capability.BULK_DELETE_MESSAGES: PrivilegeClass.AUTOMATED_AGENT,
        Capability.GET_MESSAGE: PrivilegeClass.AUTOMATED_AGENT,
    }
)


def require(privilege: PrivilegeClass, capability: Capability) -> None:
    """Raise :class:`InvalidOperationAsUser` unless ``privilege`` permits it."""

    if not privilege.permits(capability):
        logger.warning("Rejected %s under %s privilege", capability, privilege.name)
        raise InvalidOperationAsUser(capability)
