"""
Synchronous REST transport.

:class:`RestTransport` resolves a :class:`~guildwire.transport.routes.Route`
against :data:`~guildwire.transport.routes.ROUTES`, performs the HTTP call
through a :class:`requests.Session` and decodes the JSON response. Every
failure, whether an HTTP error status, a connection problem or an
undecodable body, is raised as :class:`~guildwire.errors.RemoteFailure`. No
retries are attempted here.
"""

from __future__ import annotations

import logging
from string import Formatter
from typing import Any, List, Mapping, Tuple
from urllib.parse import quote

import requests

from ..errors import RemoteFailure
from ..privilege import PrivilegeClass
from .base import FileUpload
from .routes import ROUTES, Route

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_BASE_URL", "RestTransport", "build_path"]

DEFAULT_BASE_URL = "https://discord.com/api/v6"
DEFAULT_USER_AGENT = "DiscordBot (https://github.com/guildwire/guildwire, 0.1.0)"

_FORMATTER = Formatter()


def _template_fields(template: str) -> set[str]:
    return {name for _, name, _, _ in _FORMATTER.parse(template) if name}


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_path(template: str, params: Mapping[str, Any]) -> Tuple[str, List[Tuple[str, str]]]:
    """Fill ``template`` from ``params``; return the path and leftover query pairs.

    Path values are percent-encoded (unicode reaction emoji in particular);
    query pairs keep the insertion order of ``params`` and skip ``None``.
    """

    fields = _template_fields(template)
    missing = fields - params.keys()
    if missing:
        raise KeyError(f"Missing path parameter(s): {', '.join(sorted(missing))}")
    path = template.format(
        **{name: quote(str(params[name]), safe="@:") for name in fields}
    )
    query = [
        (key, _query_value(value))
        for key, value in params.items()
        if key not in fields and value is not None
    ]
    return path, query


class RestTransport:
    """Blocking HTTP implementation of :class:`~guildwire.transport.base.Transport`."""

    def __init__(
        self,
        token: str,
        *,
        privilege: PrivilegeClass = PrivilegeClass.AUTOMATED_AGENT,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        authorization = f"Bot {token}" if privilege is PrivilegeClass.AUTOMATED_AGENT else token
        self.session.headers.update(
            {
                "Authorization": authorization,
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )

    def invoke(
        self,
        route: Route,
        params: Mapping[str, Any],
        body: Mapping[str, Any] | FileUpload | None = None,
    ) -> Any:
        spec = ROUTES[route]
        path, query = build_path(spec.path, params)
        url = f"{self.base_url}{path}"

        kwargs: dict[str, Any] = {"params": query or None, "timeout": self.timeout}
        if isinstance(body, FileUpload):
            kwargs["data"] = {"content": body.content}
            kwargs["files"] = {"file": (body.filename, body.file)}
        elif body is not None:
            kwargs["json"] = dict(body)

        logger.debug("%s %s (%s)", spec.method, url, route)
        try:
            response = self.session.request(spec.method, url, **kwargs)
        except requests.RequestException as exc:
            logger.warning("Request %s failed: %s", route, exc)
            raise RemoteFailure(str(exc), route=route) from exc

        if not response.ok:
            payload = self._safe_json(response)
            message = response.reason or "request failed"
            if isinstance(payload, dict) and payload.get("message"):
                message = str(payload["message"])
            logger.warning(
                "Request %s returned HTTP %s: %s", route, response.status_code, message
            )
            raise RemoteFailure(
                message, status=response.status_code, route=route, payload=payload
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            data = response.json()
        except ValueError as exc:
            raise RemoteFailure(
                f"Invalid JSON response: {exc}",
                status=response.status_code,
                route=route,
            ) from exc

        if spec.decoder is None:
            return data
        try:
            return spec.decoder(data, params)
        except (KeyError, TypeError, ValueError) as exc:
            raise RemoteFailure(
                f"Unexpected payload shape: {exc}",
                status=response.status_code,
                route=route,
                payload=data,
            ) from exc

    @staticmethod
    def _safe_json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RestTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
