import os, sys
from pathlib import Path
from typing import Any, Callable

import pytest

# Add project root to sys.path so the scripts/ directory is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Ensure required environment variables for guildwire.config
os.environ.setdefault("DISCORD_API_TOKEN", "test-token")
os.environ.setdefault("LOGIN_TYPE", "bot")

from guildwire.cache import InMemoryCache
from guildwire.connection import ConnectionHandle
from guildwire.mediator import RequestMediator
from guildwire.privilege import PrivilegeClass
from guildwire.transport import Route


class FakeTransport:
    """Records every invocation and replays canned responses per route.

    A response may be a value, an exception instance (raised) or a callable
    taking ``(params, body)``.
    """

    def __init__(self, responses: dict[Route, Any] | None = None) -> None:
        self.responses: dict[Route, Any] = dict(responses or {})
        self.calls: list[tuple[Route, dict, Any]] = []

    def invoke(self, route, params, body=None):
        self.calls.append((route, dict(params), body))
        response = self.responses.get(route)
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(params, body)
        return response

    def routes(self) -> list[Route]:
        return [route for route, _, _ in self.calls]


class FakeConnection:
    def __init__(self) -> None:
        self.presence_calls: list[tuple] = []
        self.handle: ConnectionHandle | None = None
        self.locked_during_call: list[bool] = []

    def set_presence(self, game, status, afk):
        if self.handle is not None:
            self.locked_during_call.append(self.handle.is_locked)
        self.presence_calls.append((game, status, afk))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def make_mediator(transport, connection) -> Callable[..., RequestMediator]:
    def factory(
        privilege: PrivilegeClass = PrivilegeClass.AUTOMATED_AGENT,
        *,
        cache=None,
        channel_id=None,
    ) -> RequestMediator:
        handle = ConnectionHandle(connection)
        connection.handle = handle
        return RequestMediator(
            handle, privilege, transport, cache=cache, channel_id=channel_id
        )

    return factory


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()
