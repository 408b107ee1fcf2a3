# app/core/offsets/resolver.py

"""
Offset resolver: "3weeks" + anchor → (start, end).

Арифметика идёт в локальном «настенном» времени процесса:
naive datetime трактуется как локальное время, aware datetime
остаётся в своей собственной зоне. Никаких конвертаций часовых поясов.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from dateutil.relativedelta import relativedelta

from app.config import settings
from .models import (
    DEFAULT_TOKEN,
    EVENT_DURATION,
    MAX_OFFSET_COUNT,
    EventWindow,
    OffsetToken,
    OffsetTokenError,
    OffsetUnit,
    ParseResult,
    TokenFallback,
    TokenOk,
)

log = logging.getLogger(__name__)

# digit run followed by a word run; search, not anchored
_TOKEN_RE = re.compile(r"(\d+)(\w+)", re.ASCII)

UnitArithmetic = Callable[[datetime, int], datetime]

# --------------------------------------------------------------------------- #
#                      registry: unit → calendar arithmetic                   #
# --------------------------------------------------------------------------- #
# relativedelta clamps the day of month: Jan 31 + 1 month → Feb 28/29.
UNIT_ARITHMETIC: Dict[OffsetUnit, UnitArithmetic] = {
    OffsetUnit.WEEKS: lambda anchor, n: anchor + timedelta(weeks=n),
    OffsetUnit.MONTHS: lambda anchor, n: anchor + relativedelta(months=n),
    OffsetUnit.YEARS: lambda anchor, n: anchor + relativedelta(years=n),
}


def _validate_unit_table(table: Dict[OffsetUnit, UnitArithmetic]) -> None:
    missing = [unit.value for unit in OffsetUnit if unit not in table]
    if missing:
        raise RuntimeError(f"No calendar arithmetic registered for units: {missing}")


_validate_unit_table(UNIT_ARITHMETIC)


def format_token(count: int, unit: OffsetUnit | str) -> str:
    """format_token(3, "weeks") → "3weeks" (validated)."""
    return str(OffsetToken(count=count, unit=OffsetUnit(unit)))


def _fallback(raw: str, reason: str, strict: bool) -> TokenFallback:
    if strict:
        raise OffsetTokenError(f"Invalid offset token {raw!r}: {reason}")
    log.warning("Offset token %r fell back to %s: %s", raw, DEFAULT_TOKEN, reason)
    return TokenFallback(raw=raw, reason=reason)


def parse_token(raw: str | None, strict: Optional[bool] = None) -> ParseResult:
    """
    Разобрать offset-токен.

    Args:
        raw: строка вида "3weeks". Может быть мусором из сохранённого состояния.
        strict: если True — вместо дефолта выбрасывается ``OffsetTokenError``.
            По умолчанию берётся ``settings.STRICT_OFFSET_TOKENS``.

    Returns:
        ParseResult: ``TokenOk`` или ``TokenFallback`` (1weeks + причина).
    """
    if strict is None:
        strict = settings.STRICT_OFFSET_TOKENS
    raw = raw or ""

    match = _TOKEN_RE.search(raw)
    if not match:
        return _fallback(raw, "no '<digits><unit>' sequence found", strict)

    digits = match.group(1).lstrip("0") or "0"
    unit_word = match.group(2)
    if len(digits) > len(str(MAX_OFFSET_COUNT)):
        return _fallback(raw, f"count must be at most {MAX_OFFSET_COUNT}", strict)
    count = int(digits)
    if count < 1:
        return _fallback(raw, f"count must be positive, got {count}", strict)
    if count > MAX_OFFSET_COUNT:
        return _fallback(raw, f"count must be at most {MAX_OFFSET_COUNT}, got {count}", strict)
    try:
        unit = OffsetUnit(unit_word)
    except ValueError:
        return _fallback(raw, f"unknown unit {unit_word!r}", strict)

    return TokenOk(token=OffsetToken(count=count, unit=unit))


def resolve(
    token: str | OffsetToken | None,
    now: Optional[datetime] = None,
    strict: Optional[bool] = None,
) -> EventWindow:
    """
    Вычислить окно события для токена относительно ``now``.

    ``end`` всегда равен ``start + 30 минут`` и не зависит от единицы.
    Если результат выходит за пределы календаря, используется 1weeks
    (или ``OffsetTokenError`` в строгом режиме).
    """
    if strict is None:
        strict = settings.STRICT_OFFSET_TOKENS
    anchor = now if now is not None else datetime.now()
    if isinstance(token, OffsetToken):
        parsed = token
    else:
        parsed = parse_token(token, strict=strict).token

    try:
        start = UNIT_ARITHMETIC[parsed.unit](anchor, parsed.count)
        end = start + EVENT_DURATION
    except (OverflowError, ValueError) as exc:
        parsed = _fallback(str(parsed), f"out of calendar range: {exc}", strict).token
        start = UNIT_ARITHMETIC[parsed.unit](anchor, parsed.count)
        end = start + EVENT_DURATION
    window = EventWindow(start=start, end=end)
    log.debug("Resolved %s from %s → %s", parsed, anchor.isoformat(), window.start.isoformat())
    return window


__all__ = ["UNIT_ARITHMETIC", "format_token", "parse_token", "resolve"]
