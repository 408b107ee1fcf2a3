# app/core/calendar/base.py
"""
Abstract base and common types for calendar renderers.

Рендерер — чистая функция над ``EventRecord``: никакого I/O,
никакого общего изменяемого состояния. Результат — ``Artifact``
(файл, URL или текст), который вызывающий слой отдаёт пользователю.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.core.offsets import EVENT_DURATION, EventWindow


class EventRecord(BaseModel):
    """
    Каноничный вход всех рендереров.

    Заголовок проверяется формой заранее, но пустой заголовок здесь
    всё равно приводит к ``ValidationError`` вместо битого артефакта.
    """

    title: str = Field(..., min_length=1, description="Заголовок события")
    content: Optional[str] = Field(None, description="Свободный текст заметки")
    start: datetime = Field(..., description="Начало (локальное настенное время)")
    end: datetime = Field(..., description="Конец, всегда start + 30 минут")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_duration(self) -> "EventRecord":
        if self.end - self.start != EVENT_DURATION:
            raise ValueError("end must be exactly 30 minutes after start")
        return self

    @classmethod
    def from_window(cls, title: str, content: Optional[str], window: EventWindow) -> "EventRecord":
        return cls(title=title, content=content, start=window.start, end=window.end)


class Artifact(BaseModel):
    """Serialized event produced for one external consumer."""

    renderer: str
    media_type: str
    body: str
    filename: Optional[str] = None


class BaseCalendarRenderer(ABC):
    """Абстрактный интерфейс рендерера календарного артефакта."""

    # Имя рендерера ('ics', 'google', 'outlook', 'text')
    name: str

    @abstractmethod
    def render(self, event: EventRecord) -> Artifact:
        """Serialize ``event`` into this renderer's representation."""
        ...


# --------------------------------------------------------------------------- #
#                            timestamp conventions                            #
# --------------------------------------------------------------------------- #
def format_floating(value: datetime) -> str:
    """Floating local time: ``YYYYMMDDTHHMMSS``, no zone designator."""
    return value.strftime("%Y%m%dT%H%M%S")


def to_utc(value: datetime) -> datetime:
    """Absolute UTC instant; naive values are taken as system-local time."""
    return value.astimezone(timezone.utc)


def format_utc_basic(value: datetime) -> str:
    """UTC basic format with trailing Z, sub-second part dropped."""
    return to_utc(value).strftime("%Y%m%dT%H%M%SZ")


def format_utc_extended(value: datetime) -> str:
    """UTC ``YYYY-MM-DDTHH:MM:SS`` truncated to seconds, no Z."""
    return to_utc(value).strftime("%Y-%m-%dT%H:%M:%S")


__all__ = [
    "Artifact",
    "BaseCalendarRenderer",
    "EventRecord",
    "format_floating",
    "format_utc_basic",
    "format_utc_extended",
    "to_utc",
]
