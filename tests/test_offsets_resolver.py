from datetime import datetime, timedelta, timezone

import pytest

from app.config import settings
from app.core.offsets import (
    DEFAULT_TOKEN,
    EVENT_DURATION,
    MAX_OFFSET_COUNT,
    UNIT_ARITHMETIC,
    OffsetToken,
    OffsetTokenError,
    OffsetUnit,
    TokenFallback,
    TokenOk,
    format_token,
    parse_token,
    resolve,
)

ANCHOR = datetime(2024, 1, 31, 10, 0, 0)


@pytest.mark.parametrize("count", range(1, 10))
@pytest.mark.parametrize("unit", list(OffsetUnit))
def test_end_is_always_thirty_minutes_after_start(count, unit):
    window = resolve(format_token(count, unit), now=ANCHOR)
    assert window.end - window.start == timedelta(minutes=30)
    assert EVENT_DURATION == timedelta(minutes=30)


def test_weeks_add_whole_weeks():
    window = resolve("3weeks", now=ANCHOR)
    assert window.start == datetime(2024, 2, 21, 10, 0, 0)
    assert window.end == datetime(2024, 2, 21, 10, 30, 0)


def test_one_month_from_jan_31_clamps_to_leap_day():
    window = resolve("1months", now=ANCHOR)
    assert window.start == datetime(2024, 2, 29, 10, 0, 0)


def test_one_month_from_jan_31_non_leap_year():
    window = resolve("1months", now=datetime(2023, 1, 31, 10, 0, 0))
    assert window.start == datetime(2023, 2, 28, 10, 0, 0)


def test_two_months_from_jan_31_lands_on_march_31():
    # month arithmetic is applied once, not month by month
    window = resolve("2months", now=ANCHOR)
    assert window.start == datetime(2024, 3, 31, 10, 0, 0)
    assert window.end == datetime(2024, 3, 31, 10, 30, 0)


def test_one_year_from_leap_day_clamps():
    window = resolve("1years", now=datetime(2024, 2, 29, 9, 15))
    assert window.start == datetime(2025, 2, 28, 9, 15)


def test_aware_anchor_keeps_its_zone():
    anchor = datetime(2024, 5, 1, 8, 0, tzinfo=timezone(timedelta(hours=2)))
    window = resolve("1weeks", now=anchor)
    assert window.start == datetime(2024, 5, 8, 8, 0, tzinfo=timezone(timedelta(hours=2)))
    assert window.start.utcoffset() == timedelta(hours=2)


def test_garbage_resolves_like_one_week():
    assert resolve("garbage", now=ANCHOR) == resolve("1weeks", now=ANCHOR)


@pytest.mark.parametrize("raw", ["", None, "weeks", "3 weeks", "0weeks", "5fortnights", "123"])
def test_malformed_tokens_fall_back(raw):
    result = parse_token(raw, strict=False)
    assert isinstance(result, TokenFallback)
    assert result.token == DEFAULT_TOKEN
    assert result.reason


def test_unknown_unit_uses_one_week_regardless_of_count():
    window = resolve("7days", now=ANCHOR)
    assert window.start == ANCHOR + timedelta(weeks=1)


def test_parse_valid_token():
    result = parse_token("4months")
    assert isinstance(result, TokenOk)
    assert result.token == OffsetToken(count=4, unit=OffsetUnit.MONTHS)
    assert str(result.token) == "4months"


def test_parse_multi_digit_count():
    result = parse_token("12weeks")
    assert result.token.count == 12
    assert result.token.unit is OffsetUnit.WEEKS


def test_strict_mode_raises():
    with pytest.raises(OffsetTokenError):
        parse_token("garbage", strict=True)


def test_strict_mode_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_OFFSET_TOKENS", True)
    with pytest.raises(OffsetTokenError):
        resolve("later", now=ANCHOR)
    # valid tokens are unaffected
    assert resolve("2weeks", now=ANCHOR).start == datetime(2024, 2, 14, 10, 0)


def test_resolve_accepts_parsed_token():
    token = OffsetToken(count=2, unit=OffsetUnit.YEARS)
    assert resolve(token, now=ANCHOR).start == datetime(2026, 1, 31, 10, 0)


def test_every_unit_has_arithmetic():
    assert set(UNIT_ARITHMETIC) == set(OffsetUnit)


def test_format_token_rejects_zero_count():
    with pytest.raises(ValueError):
        format_token(0, "weeks")


@pytest.mark.parametrize("raw", ["99999999weeks", "9000years", "100months", "1" * 5000 + "weeks"])
def test_oversized_counts_fall_back(raw):
    result = parse_token(raw, strict=False)
    assert isinstance(result, TokenFallback)
    assert "at most" in result.reason
    assert resolve(raw, now=ANCHOR) == resolve("1weeks", now=ANCHOR)


def test_largest_count_is_accepted():
    result = parse_token(f"{MAX_OFFSET_COUNT}years")
    assert isinstance(result, TokenOk)
    assert resolve(result.token, now=ANCHOR).start == datetime(2123, 1, 31, 10, 0)


def test_leading_zeros_are_ignored():
    assert parse_token("003weeks").token == OffsetToken(count=3, unit=OffsetUnit.WEEKS)


@pytest.mark.parametrize("raw", ["99999999weeks", "1" * 5000 + "weeks"])
def test_oversized_counts_raise_in_strict_mode(raw):
    with pytest.raises(OffsetTokenError):
        parse_token(raw, strict=True)


def test_calendar_overflow_falls_back_to_one_week():
    anchor = datetime(9999, 6, 1, 12, 0)
    window = resolve("1years", now=anchor)
    assert window.start == datetime(9999, 6, 8, 12, 0)
    assert window.end - window.start == timedelta(minutes=30)


def test_calendar_overflow_raises_in_strict_mode():
    with pytest.raises(OffsetTokenError):
        resolve("1years", now=datetime(9999, 6, 1, 12, 0), strict=True)


def test_non_ascii_digits_fall_back():
    result = parse_token("٣weeks", strict=False)
    assert isinstance(result, TokenFallback)


def test_offset_token_rejects_count_above_limit():
    with pytest.raises(ValueError):
        OffsetToken(count=MAX_OFFSET_COUNT + 1, unit=OffsetUnit.WEEKS)
