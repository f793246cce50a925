"""Transport layer: the route table, the transport protocol and the REST client."""

from .base import FileUpload, Transport
from .rest import DEFAULT_BASE_URL, RestTransport
from .routes import ROUTES, Route, RouteSpec

__all__ = [
    "DEFAULT_BASE_URL",
    "FileUpload",
    "ROUTES",
    "RestTransport",
    "Route",
    "RouteSpec",
    "Transport",
]
