# app/core/reminders/schemas.py

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ReminderForm(BaseModel):
    """Запись формы: заголовок, заметка и выбранный интервал."""

    title: str = Field(..., min_length=1, description="Title is required")
    content: Optional[str] = Field(None, description="Content or context to revisit")
    time_delay: str = Field("1weeks", alias="timeDelay", description="Offset token, e.g. '3weeks'")

    model_config = {"populate_by_name": True}


class SelectionIn(BaseModel):
    time_delay: str = Field(..., alias="timeDelay")

    model_config = {"populate_by_name": True}


class SelectionsOut(BaseModel):
    last: str
    recent: list[str]


__all__: list[str] = ["ReminderForm", "SelectionIn", "SelectionsOut"]
