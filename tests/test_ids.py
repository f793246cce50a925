import pytest

from guildwire.ids import ChannelId, GuildId, coerce


def test_str_and_format_stay_numeric():
    channel_id = ChannelId(42)
    assert str(channel_id) == "42"
    assert f"{channel_id}" == "42"
    assert repr(channel_id) == "ChannelId(42)"


def test_coerce_accepts_ints_and_numeric_strings():
    assert coerce(GuildId, 7) == 7
    assert type(coerce(GuildId, "7")) is GuildId


def test_coerce_rejects_other_kinds():
    with pytest.raises(TypeError):
        coerce(GuildId, ChannelId(7))
    with pytest.raises(TypeError):
        coerce(GuildId, True)
