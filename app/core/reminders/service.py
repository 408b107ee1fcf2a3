# app/core/reminders/service.py

"""Service-layer for Reminders."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from app.core.calendar import Artifact, EventRecord, get_calendar_renderer
from app.core.offsets import ParseResult, parse_token, resolve
from app.core.selections import SelectionsService
from .schemas import ReminderForm

log = logging.getLogger(__name__)


class RemindersService:
    """
    Превращает запись формы в календарный артефакт.

    Хранилище выбора внедряется через ``SelectionsService``.
    """

    def __init__(self, selections: SelectionsService) -> None:
        self.selections = selections

    # ------------------------------------------------------------------ #
    #                       Public business-methods                      #
    # ------------------------------------------------------------------ #

    def parse(self, form: ReminderForm) -> ParseResult:
        return parse_token(form.time_delay)

    def build_event(self, form: ReminderForm, now: Optional[datetime] = None) -> EventRecord:
        """
        Разрешает токен формы и собирает ``EventRecord``.

        Args:
            form (ReminderForm): Проверенная запись формы.
            now (datetime | None, optional): Якорь; по умолчанию — локальное «сейчас».

        Returns:
            EventRecord: Событие со start/end.
        """
        token = self.parse(form).token
        window = resolve(token, now=now)
        return EventRecord.from_window(form.title, form.content, window)

    def generate(self, form: ReminderForm, renderer_name: str, now: Optional[datetime] = None) -> Artifact:
        """
        Рендерит артефакт и, только при успехе, записывает токен в «недавние».

        Returns:
            Artifact: Файл, ссылка или текст.

        Raises:
            UnknownRendererError: Неизвестный формат.
            OffsetTokenError: Некорректный токен в строгом режиме.
        """
        renderer = get_calendar_renderer(renderer_name)
        token = self.parse(form).token
        event = EventRecord.from_window(form.title, form.content, resolve(token, now=now))
        artifact = renderer.render(event)
        log.info("Generated %s artifact for '%s' (%s)", renderer.name, form.title, token)
        # В «недавние» попадает токен, который реально использован
        self.selections.record_recent(str(token))
        return artifact


__all__ = ["RemindersService"]
