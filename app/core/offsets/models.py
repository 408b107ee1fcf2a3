# app/core/offsets/models.py
"""
Типы для offset-токенов ("3weeks", "2months", ...).

Токен — это пара (count, unit), сериализованная без разделителя.
Результат разбора — тегированный: ``TokenOk`` или ``TokenFallback``,
чтобы вызывающий код (и тесты) могли отличить штатный дефолт от ошибки.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field

# Длительность события фиксирована и не настраивается пользователем
EVENT_DURATION = timedelta(minutes=30)

# Пикер предлагает 1–9; всё больше 99 считается испорченным состоянием
MAX_OFFSET_COUNT = 99


class OffsetTokenError(ValueError):
    """Raised for malformed offset tokens when strict parsing is enabled."""


class OffsetUnit(str, Enum):
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class OffsetToken(BaseModel):
    """Разобранный токен: положительное число + единица."""

    count: int = Field(..., ge=1, le=MAX_OFFSET_COUNT, description="How many units from now")
    unit: OffsetUnit = Field(..., description="Calendar unit")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.count}{self.unit.value}"


DEFAULT_TOKEN = OffsetToken(count=1, unit=OffsetUnit.WEEKS)


class TokenOk(BaseModel):
    kind: Literal["ok"] = "ok"
    token: OffsetToken


class TokenFallback(BaseModel):
    kind: Literal["fallback"] = "fallback"
    token: OffsetToken = DEFAULT_TOKEN
    raw: str
    reason: str


ParseResult = Union[TokenOk, TokenFallback]


class EventWindow(BaseModel):
    """Start/end instants of the reminder event."""

    start: datetime
    end: datetime

    model_config = {"frozen": True}


__all__ = [
    "EVENT_DURATION",
    "MAX_OFFSET_COUNT",
    "DEFAULT_TOKEN",
    "OffsetTokenError",
    "OffsetUnit",
    "OffsetToken",
    "TokenOk",
    "TokenFallback",
    "ParseResult",
    "EventWindow",
]
