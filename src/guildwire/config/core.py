import logging
import os

from guildwire.ids import ChannelId
from guildwire.privilege import PrivilegeClass

logger = logging.getLogger(__name__)


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("guildwire", {})
        discord_cfg = cfg.get("discord", {})

        token_env = str(discord_cfg.get("token_env", "DISCORD_API_TOKEN"))
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)

        login_type = str(discord_cfg.get("login_type") or os.getenv("LOGIN_TYPE", "bot"))
        self.PRIVILEGE: PrivilegeClass = PrivilegeClass.from_token_kind(login_type)

        raw_channel = discord_cfg.get("default_channel_id") or os.getenv("DEFAULT_CHANNEL_ID", "")
        self.DEFAULT_CHANNEL_ID: ChannelId | None = (
            ChannelId(int(raw_channel)) if str(raw_channel).strip() else None
        )

        required = [
            ("DISCORD_API_TOKEN", self.DISCORD_API_TOKEN),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

        if self.DEFAULT_CHANNEL_ID is None:
            logger.info("No default channel configured; say() requires one.")
