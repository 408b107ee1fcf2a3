# app/core/calendar/outlook.py

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

from app.config import settings
from .base import Artifact, BaseCalendarRenderer, EventRecord, format_utc_extended

log = logging.getLogger(__name__)

COMPOSE_PATH = "/calendar/action/compose"


def build_outlook_url(event: EventRecord, base_url: Optional[str] = None) -> str:
    """
    Outlook Web compose link.

    Timestamps are UTC ``YYYY-MM-DDTHH:MM:SS`` without a Z suffix; Outlook
    reads them in the account's default zone.
    """
    params = {
        "path": COMPOSE_PATH,
        "rru": "addevent",
        "startdt": format_utc_extended(event.start),
        "enddt": format_utc_extended(event.end),
        "subject": event.title,
        "body": event.content or "",
    }
    return f"{base_url or settings.OUTLOOK_BASE_URL}?{urlencode(params)}"


class OutlookCalendarRenderer(BaseCalendarRenderer):
    name: str = "outlook"

    def render(self, event: EventRecord) -> Artifact:
        url = build_outlook_url(event)
        log.info("[Calendar] outlook link for '%s' @ %s", event.title, event.start.isoformat())
        return Artifact(renderer=self.name, media_type="text/uri-list", body=url)


__all__ = ["COMPOSE_PATH", "OutlookCalendarRenderer", "build_outlook_url"]
