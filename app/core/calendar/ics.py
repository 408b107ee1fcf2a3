# app/core/calendar/ics.py

"""
Рендерер календарного файла (iCalendar / .ics).

DTSTART/DTEND пишутся в «плавающем» локальном времени (без Z и смещения),
а DTSTAMP — в абсолютном UTC с суффиксом Z. Это два разных соглашения,
их нельзя объединять: календарные приложения ждут именно такой вид.
"""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime
from typing import Dict, Optional

from app.config import settings
from .base import (
    Artifact,
    BaseCalendarRenderer,
    EventRecord,
    format_floating,
    format_utc_basic,
)

log = logging.getLogger(__name__)

ICS_MEDIA_TYPE = "text/calendar; charset=utf-8"
CRLF = "\r\n"

_FILENAME_MAX_TITLE = 30
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def make_uid(now_ms: Optional[int] = None) -> str:
    """``<epoch ms>@<domain>``; two calls within one millisecond collide."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}@{settings.ICS_UID_DOMAIN}"


def escape_description(content: Optional[str]) -> str:
    # Only newlines are escaped
    return (content or "").replace("\n", "\\n")


def build_ics(event: EventRecord, now: Optional[datetime] = None, uid: Optional[str] = None) -> str:
    """
    Собрать VCALENDAR-документ с одним VEVENT.

    Args:
        event: событие для сериализации.
        now: момент создания (для DTSTAMP); по умолчанию — текущее время.
        uid: готовый UID; по умолчанию строится из миллисекунд ``now``.

    SUMMARY пишется как есть: экранируются только переводы строк в DESCRIPTION,
    поэтому заголовок с переводом строки даст лишнюю строку в документе.

    Returns:
        str: документ; каждая строка, включая последнюю, заканчивается CRLF.
    """
    if now is None:
        now = datetime.now().astimezone()
    if uid is None:
        uid = make_uid(int(now.timestamp() * 1000))

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{settings.ICS_PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"DTSTAMP:{format_utc_basic(now)}",
        f"DTSTART:{format_floating(event.start)}",
        f"DTEND:{format_floating(event.end)}",
        f"SUMMARY:{event.title}",
        f"DESCRIPTION:{escape_description(event.content)}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return CRLF.join(lines) + CRLF


def ics_filename(title: str) -> str:
    """
    "Revisit: My Decision!!" → "recal-revisit-my-decision.ics".

    Заголовок сначала обрезается до 30 символов, потом превращается в slug.
    """
    slug = _NON_SLUG_RE.sub("-", title.lower()[:_FILENAME_MAX_TITLE]).strip("-")
    return f"{settings.ICS_FILENAME_PREFIX}{slug}.ics"


def parse_ics_event(text: str) -> Dict[str, object]:
    """
    Minimal reader for documents produced by ``build_ics``.

    Returns the VEVENT properties; DTSTART/DTEND become naive datetimes
    and DESCRIPTION gets its newlines back.
    """
    props: Dict[str, object] = {}
    in_event = False
    for line in text.split(CRLF):
        if line == "BEGIN:VEVENT":
            in_event = True
            continue
        if line == "END:VEVENT":
            break
        if not in_event or ":" not in line:
            continue
        name, value = line.split(":", 1)
        if name in ("DTSTART", "DTEND"):
            props[name] = datetime.strptime(value, "%Y%m%dT%H%M%S")
        elif name == "DESCRIPTION":
            props[name] = value.replace("\\n", "\n")
        else:
            props[name] = value
    if not in_event:
        raise ValueError("No VEVENT found in calendar document")
    return props


class IcsCalendarRenderer(BaseCalendarRenderer):
    """Downloadable .ics file (Apple Calendar, Outlook desktop, etc.)."""

    name: str = "ics"

    def render(self, event: EventRecord) -> Artifact:
        body = build_ics(event)
        filename = ics_filename(event.title)
        log.info("ICS: rendered '%s' as %s", event.title, filename)
        return Artifact(renderer=self.name, media_type=ICS_MEDIA_TYPE, body=body, filename=filename)


__all__ = [
    "ICS_MEDIA_TYPE",
    "IcsCalendarRenderer",
    "build_ics",
    "escape_description",
    "ics_filename",
    "make_uid",
    "parse_ics_event",
]
