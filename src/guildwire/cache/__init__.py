"""Cache providers consulted by the mediator's cache-first reads."""

from .memory import InMemoryCache
from .provider import CacheProvider, NullCache

__all__ = ["CacheProvider", "InMemoryCache", "NullCache"]
