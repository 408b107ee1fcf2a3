# app/core/calendar/summary.py

"""Plain-text summary for the clipboard. Nothing is escaped."""

from __future__ import annotations

import logging
from datetime import datetime

from .base import Artifact, BaseCalendarRenderer, EventRecord

log = logging.getLogger(__name__)

DURATION_LABEL = "Duration: 30 minutes"


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_local_datetime(value: datetime) -> str:
    """2024-03-31 10:00 → "March 31st, 2024 at 10:00 AM"."""
    hour12 = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return (
        f"{value.strftime('%B')} {_ordinal(value.day)}, {value.year} "
        f"at {hour12}:{value.minute:02d} {meridiem}"
    )


def build_summary(event: EventRecord) -> str:
    text = (
        f"📅 {event.title}\n"
        f"🗓️ {format_local_datetime(event.start)}\n"
        f"⏱️ {DURATION_LABEL}\n"
    )
    if event.content:
        text += f"\n📝 {event.content}"
    return text


class TextSummaryRenderer(BaseCalendarRenderer):
    name: str = "text"

    def render(self, event: EventRecord) -> Artifact:
        log.info("Text: rendered summary for '%s'", event.title)
        return Artifact(renderer=self.name, media_type="text/plain; charset=utf-8", body=build_summary(event))


__all__ = ["DURATION_LABEL", "TextSummaryRenderer", "build_summary", "format_local_datetime"]
