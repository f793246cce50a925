import pytest

from guildwire import validation
from guildwire.errors import DeleteMessageDaysOutOfRange, MessageTooLong, PreconditionViolation


@pytest.mark.parametrize("days", range(0, 8))
def test_ban_days_within_window_pass(days):
    validation.check_ban_days(days)


@pytest.mark.parametrize("days", [-1, -3, 8, 9, 30, 255])
def test_ban_days_outside_window_carry_value(days):
    with pytest.raises(DeleteMessageDaysOutOfRange) as excinfo:
        validation.check_ban_days(days)
    assert excinfo.value.days == days
    assert isinstance(excinfo.value, PreconditionViolation)


def test_message_at_limit_passes():
    validation.check_message_length("a" * 2000)
    assert validation.overflow_length("a" * 2000) is None


@pytest.mark.parametrize("k", [1, 2, 150])
def test_message_over_limit_reports_overflow(k):
    with pytest.raises(MessageTooLong) as excinfo:
        validation.check_message_length("a" * (2000 + k))
    assert excinfo.value.over == k


def test_message_length_counts_code_points_not_bytes():
    # 2000 four-byte emoji are still 2000 code points
    validation.check_message_length("\N{GRINNING FACE}" * 2000)
    assert validation.overflow_length("\N{GRINNING FACE}" * 2001) == 1


def test_payload_content_check_ignores_missing_or_non_string_content():
    validation.check_payload_content({})
    validation.check_payload_content({"content": None, "embed": {"title": "x" * 5000}})
    with pytest.raises(MessageTooLong):
        validation.check_payload_content({"content": "x" * 2001})


@pytest.mark.parametrize(
    "limit, expected",
    [(None, 50), (10, 10), (100, 100), (150, 100), (255, 100), (1, 1), (0, 1), (-5, 1)],
)
def test_clamp_reaction_limit(limit, expected):
    assert validation.clamp_reaction_limit(limit) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "abc123",
        "https://discord.gg/abc123",
        "http://discord.gg/abc123",
        "discord.gg/abc123",
    ],
)
def test_parse_invite_strips_known_prefixes(raw):
    assert validation.parse_invite(raw) == "abc123"


def test_parse_invite_leaves_other_urls_alone():
    assert validation.parse_invite("https://example.com/abc") == "https://example.com/abc"
