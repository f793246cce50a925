import os

from guildwire.transport.rest import DEFAULT_BASE_URL, DEFAULT_USER_AGENT


class Http:
    def __init__(self, config: dict | None = None) -> None:
        http_cfg = (config or {}).get("guildwire", {}).get("http", {})
        self.BASE_URL: str = str(http_cfg.get("base_url", os.getenv("API_BASE_URL", DEFAULT_BASE_URL)))
        self.TIMEOUT: float = float(http_cfg.get("timeout", os.getenv("HTTP_TIMEOUT", "10")))
        self.USER_AGENT: str = str(http_cfg.get("user_agent", os.getenv("HTTP_USER_AGENT", DEFAULT_USER_AGENT)))
