"""Cache-aware request mediator for Discord REST clients."""

from .cache import CacheProvider, InMemoryCache, NullCache
from .connection import Connection, ConnectionHandle, DetachedConnection
from .errors import (
    GuildwireError,
    NotFound,
    PreconditionViolation,
    RemoteFailure,
)
from .mediator import RequestMediator
from .privilege import Capability, PrivilegeClass
from .transport import RestTransport, Route, Transport

__all__ = [
    "CacheProvider",
    "Capability",
    "Connection",
    "ConnectionHandle",
    "DetachedConnection",
    "GuildwireError",
    "InMemoryCache",
    "NotFound",
    "NullCache",
    "PreconditionViolation",
    "PrivilegeClass",
    "RemoteFailure",
    "RequestMediator",
    "RestTransport",
    "Route",
    "Transport",
]
