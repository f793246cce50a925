import pytest

from guildwire.config.cache import Cache
from guildwire.config.core import Core
from guildwire.config.http import Http
from guildwire.config.loader import load_raw_config
from guildwire.ids import ChannelId
from guildwire.privilege import PrivilegeClass
from guildwire.transport.rest import DEFAULT_BASE_URL


def test_load_raw_config_reads_toml(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        """
[guildwire.discord]
token_env = "ALT_TOKEN"
login_type = "user"
"""
    )

    raw = load_raw_config(cfg)

    assert raw["guildwire"]["discord"]["login_type"] == "user"


def test_load_raw_config_env_override(tmp_path, monkeypatch):
    cfg = tmp_path / "other.toml"
    cfg.write_text("[guildwire.cache]\nenabled = false\n")
    monkeypatch.setenv("GUILDWIRE_CONFIG", str(cfg))

    assert load_raw_config() == {"guildwire": {"cache": {"enabled": False}}}


def test_load_raw_config_missing_file(tmp_path):
    assert load_raw_config(tmp_path / "absent.toml") == {}


def test_core_reads_toml_and_env(monkeypatch):
    monkeypatch.setenv("ALT_TOKEN", "abc")
    monkeypatch.delenv("DEFAULT_CHANNEL_ID", raising=False)
    raw = {
        "guildwire": {
            "discord": {
                "token_env": "ALT_TOKEN",
                "login_type": "user",
                "default_channel_id": 42,
            }
        }
    }

    core = Core(raw)

    assert core.DISCORD_API_TOKEN == "abc"
    assert core.PRIVILEGE is PrivilegeClass.HUMAN_USER
    assert core.DEFAULT_CHANNEL_ID == ChannelId(42)


def test_core_defaults_from_env(monkeypatch):
    monkeypatch.setenv("DISCORD_API_TOKEN", "tok")
    monkeypatch.delenv("LOGIN_TYPE", raising=False)
    monkeypatch.setenv("DEFAULT_CHANNEL_ID", "7")

    core = Core({})

    assert core.PRIVILEGE is PrivilegeClass.AUTOMATED_AGENT
    assert core.DEFAULT_CHANNEL_ID == 7


def test_core_requires_token(monkeypatch):
    monkeypatch.delenv("DISCORD_API_TOKEN", raising=False)

    with pytest.raises(ValueError, match="DISCORD_API_TOKEN"):
        Core({})


def test_core_rejects_unknown_login_type(monkeypatch):
    monkeypatch.setenv("DISCORD_API_TOKEN", "tok")
    monkeypatch.setenv("LOGIN_TYPE", "robot")

    with pytest.raises(ValueError):
        Core({})


def test_http_defaults(monkeypatch):
    for name in ("API_BASE_URL", "HTTP_TIMEOUT", "HTTP_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    http = Http({})

    assert http.BASE_URL == DEFAULT_BASE_URL
    assert http.TIMEOUT == 10.0


def test_http_toml_wins_over_env(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "3")

    http = Http({"guildwire": {"http": {"timeout": 30}}})

    assert http.TIMEOUT == 30.0


@pytest.mark.parametrize("raw, expected", [("true", True), ("0", False), ("off", False), ("yes", True)])
def test_cache_enabled_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("CACHE_ENABLED", raw)

    assert Cache({}).ENABLED is expected


def test_cache_enabled_from_toml():
    assert Cache({"guildwire": {"cache": {"enabled": False}}}).ENABLED is False
