import os

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUTHY


class Cache:
    def __init__(self, config: dict | None = None) -> None:
        cache_cfg = (config or {}).get("guildwire", {}).get("cache", {})
        self.ENABLED: bool = _as_bool(cache_cfg.get("enabled", os.getenv("CACHE_ENABLED", "true")))
