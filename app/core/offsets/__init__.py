# app/core/offsets/__init__.py

"""
Offset tokens package.

Экспортируем основные элементы, чтобы внешние модули могли писать
`from app.core.offsets import resolve`.
"""

from .models import (  # noqa: F401
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
from .resolver import UNIT_ARITHMETIC, format_token, parse_token, resolve  # noqa: F401

__all__: list[str] = [
    "DEFAULT_TOKEN",
    "EVENT_DURATION",
    "MAX_OFFSET_COUNT",
    "EventWindow",
    "OffsetToken",
    "OffsetTokenError",
    "OffsetUnit",
    "ParseResult",
    "TokenFallback",
    "TokenOk",
    "UNIT_ARITHMETIC",
    "format_token",
    "parse_token",
    "resolve",
]
