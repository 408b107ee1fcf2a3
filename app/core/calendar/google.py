# app/core/calendar/google.py

"""
Deep link в Google Calendar (форма «создать событие по шаблону»).
Время — абсолютное UTC с суффиксом Z.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from .base import Artifact, BaseCalendarRenderer, EventRecord, format_utc_basic

log = logging.getLogger(__name__)

GOOGLE_RENDER_URL = "https://calendar.google.com/calendar/render"


def build_google_url(event: EventRecord) -> str:
    params = {
        "action": "TEMPLATE",
        "text": event.title,
        "dates": f"{format_utc_basic(event.start)}/{format_utc_basic(event.end)}",
        "details": event.content or "",
        "trp": "false",
    }
    return f"{GOOGLE_RENDER_URL}?{urlencode(params)}"


class GoogleCalendarRenderer(BaseCalendarRenderer):
    name: str = "google"

    def render(self, event: EventRecord) -> Artifact:
        url = build_google_url(event)
        log.info("[Calendar] google link for '%s' @ %s", event.title, event.start.isoformat())
        return Artifact(renderer=self.name, media_type="text/uri-list", body=url)


__all__ = ["GOOGLE_RENDER_URL", "GoogleCalendarRenderer", "build_google_url"]
