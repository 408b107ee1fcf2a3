# app/core/calendar/schemas.py
"""
Pydantic-схемы ответов с календарными артефактами.

Используются в:
    * app/api/v1/reminders.py           ― ответы эндпоинтов генерации
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WindowOut(BaseModel):
    """Результат разрешения offset-токена."""

    time_delay: str = Field(..., alias="timeDelay", description="Canonical token actually used")
    fallback: bool = Field(..., description="True if the input token was replaced by the default")
    reason: Optional[str] = Field(None, description="Why the fallback happened")
    start: datetime
    end: datetime

    model_config = {"populate_by_name": True}


class LinkOut(BaseModel):
    url: str = Field(..., description="Provider deep link")


class TextOut(BaseModel):
    text: str = Field(..., description="Clipboard-ready summary")


__all__: list[str] = ["WindowOut", "LinkOut", "TextOut"]
