"""Transport capability consumed by the mediator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO, Mapping, Protocol, runtime_checkable

from .routes import Route

__all__ = ["FileUpload", "Transport"]


@dataclass(slots=True)
class FileUpload:
    """Multipart message body: text content plus one attached file."""

    content: str
    file: BinaryIO | bytes
    filename: str


@runtime_checkable
class Transport(Protocol):
    """Performs one remote call.

    ``params`` fills the route's path template; any entry the template does
    not use is sent as a query parameter, in insertion order. ``body`` is a
    JSON-serialisable mapping, a :class:`FileUpload`, or ``None``.

    Returns the decoded entity (``None`` for empty responses) or raises
    :class:`~guildwire.errors.RemoteFailure`.
    """

    def invoke(
        self,
        route: Route,
        params: Mapping[str, Any],
        body: Mapping[str, Any] | FileUpload | None = None,
    ) -> Any: ...
