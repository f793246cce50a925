"""
Error taxonomy raised by the mediator and its transport.

Three kinds exist and every operation either returns its result or raises
exactly one of them:

* :class:`PreconditionViolation` - a local rule rejected the request before
  any network attempt. Never retried.
* :class:`NotFound` - prior state required to seed an edit could not be
  resolved.
* :class:`RemoteFailure` - the transport reported a failure. Propagated
  verbatim.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DeleteMessageDaysOutOfRange",
    "GuildwireError",
    "InvalidOperationAsUser",
    "MessageTooLong",
    "NoChannelAvailable",
    "NotFound",
    "PreconditionViolation",
    "RecordNotFound",
    "RemoteFailure",
    "UnexpectedChannelType",
]


class GuildwireError(Exception):
    """Base class for all errors raised by :mod:`guildwire`."""

    pass


class PreconditionViolation(GuildwireError):
    """Raised when a validation rule fails before any request is issued."""

    pass


class DeleteMessageDaysOutOfRange(PreconditionViolation):
    """The ban prune window was negative or above the seven-day maximum."""

    def __init__(self, days: int) -> None:
        super().__init__(f"days out of range: {days} (must be 0-7)")
        self.days = days


class MessageTooLong(PreconditionViolation):
    """Message content exceeded the platform code-point limit."""

    def __init__(self, over: int) -> None:
        super().__init__(f"message too long by {over} code point(s)")
        self.over = over


class NoChannelAvailable(PreconditionViolation):
    """A convenience send had no explicit channel and no default channel."""

    def __init__(self) -> None:
        super().__init__("no target channel available")


class UnexpectedChannelType(PreconditionViolation):
    """The resolved channel is not a subtype the operation supports."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f"unexpected channel subtype: {kind}")
        self.kind = kind


class InvalidOperationAsUser(PreconditionViolation):
    """The capability is restricted to automated agents."""

    def __init__(self, capability: Any) -> None:
        super().__init__(f"{capability} is not permitted for human user sessions")
        self.capability = capability


class NotFound(GuildwireError):
    """Raised when prior state needed for an edit cannot be resolved."""

    pass


class RecordNotFound(NotFound):
    def __init__(self, kind: str, key: Any) -> None:
        super().__init__(f"{kind} {key} not found")
        self.kind = kind
        self.key = key


class RemoteFailure(GuildwireError):
    """Raised by a transport when the remote call failed.

    ``status`` is the HTTP status code when a response was received and
    ``None`` for connection-level failures. ``created`` holds an entity a
    compound operation made before failing, left for the caller to clean up.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        route: Any = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.route = route
        self.payload = payload
        self.created: Any = None

    def __str__(self) -> str:
        parts = []
        if self.route is not None:
            parts.append(str(self.route))
        if self.status is not None:
            parts.append(f"HTTP {self.status}")
        parts.append(self.message)
        return ": ".join(parts)
