#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys
import tomllib
from pathlib import Path
from typing import Iterable, Sequence, Set

from guildwire import (
    ConnectionHandle,
    DetachedConnection,
    PrivilegeClass,
    RemoteFailure,
    RequestMediator,
    RestTransport,
)
from guildwire.models import GuildChannel

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = PROJECT_ROOT / "config.toml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python scripts/list_guild_emojis.py",
        description="Dump all custom emoji definitions for one or more Discord servers.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config TOML (defaults to ./config.toml when present).",
    )
    parser.add_argument(
        "--guilds",
        "-g",
        nargs="+",
        type=int,
        default=None,
        help="Discord guild (server) IDs to inspect (overrides config).",
    )
    parser.add_argument(
        "--channels",
        "-c",
        nargs="+",
        type=int,
        default=None,
        help="Channel IDs whose parent guilds should be inspected (overrides config).",
    )
    parser.add_argument(
        "--token",
        type=str,
        default=None,
        help="Discord bot token. Defaults to the value resolved from config/env.",
    )
    parser.add_argument(
        "--token-env",
        type=str,
        default=None,
        help="Environment variable that stores the Discord token (overrides config).",
    )
    return parser


def _load_file_config(path: Path | None) -> dict:
    target = (path or DEFAULT_CONFIG).resolve()
    if target.is_file():
        with target.open("rb") as handle:
            return tomllib.load(handle)
    return {}


def _coerce_int_list(raw: Sequence[int | str] | None) -> list[int]:
    results: list[int] = []
    if not raw:
        return results
    for item in raw:
        if item is None:
            continue
        try:
            results.append(int(item))
        except (TypeError, ValueError):
            continue
    return results


def collect_emojis(
    mediator: RequestMediator,
    *,
    guild_ids: Iterable[int],
    channel_ids: Iterable[int],
) -> Set[str]:
    """Print each guild's custom emoji and return their markup tokens."""

    collected: Set[str] = set()
    resolved_guilds: Set[int] = {gid for gid in guild_ids if gid}

    for channel_id in (cid for cid in channel_ids if cid):
        try:
            channel = mediator.get_channel(channel_id)
        except RemoteFailure as exc:
            print(f"[warn] Failed to inspect channel {channel_id}: {exc}", file=sys.stderr)
            continue
        if isinstance(channel, GuildChannel) and channel.guild_id is not None:
            resolved_guilds.add(int(channel.guild_id))

    if not resolved_guilds:
        print(
            "No guild IDs resolved; provide --guilds or --channels.",
            file=sys.stderr,
        )
        return collected

    for guild_id in sorted(resolved_guilds):
        try:
            emojis = mediator.get_emojis(guild_id)
        except RemoteFailure as exc:
            print(f"[error] Failed to fetch emojis for guild {guild_id}: {exc}", file=sys.stderr)
            continue

        print(f"\nGuild {guild_id}: {len(emojis)} custom emojis")
        if not emojis:
            print("  (no custom emojis)")
            continue

        for emoji in sorted(emojis, key=lambda item: item.name or ""):
            print(f"  - {emoji.name}: {emoji.markup}")
            collected.add(emoji.markup)

    return collected


def main(argv: list[str] | None = None) -> Set[str]:
    parser = build_parser()
    args = parser.parse_args(argv)

    file_config = _load_file_config(args.config)
    gw_cfg = file_config.get("guildwire", {}) if isinstance(file_config, dict) else {}
    discord_cfg = gw_cfg.get("discord", {})

    token = args.token
    token_env = args.token_env or discord_cfg.get("token_env", "DISCORD_API_TOKEN")
    if not token:
        token = os.getenv(str(token_env))
    if not token:
        parser.error(f"Discord token missing. Provide --token or export {token_env}.")

    guild_ids = args.guilds or _coerce_int_list(discord_cfg.get("guilds"))
    channel_ids = args.channels or _coerce_int_list(discord_cfg.get("channels"))

    with RestTransport(token, privilege=PrivilegeClass.AUTOMATED_AGENT) as transport:
        mediator = RequestMediator(
            ConnectionHandle(DetachedConnection()),
            PrivilegeClass.AUTOMATED_AGENT,
            transport,
        )
        emoji_set = collect_emojis(mediator, guild_ids=guild_ids, channel_ids=channel_ids)

    if emoji_set:
        print(f"\nDiscovered {len(emoji_set)} unique custom emojis.")
    else:
        print("\nNo custom emojis discovered.")
    return emoji_set


if __name__ == "__main__":
    main()
