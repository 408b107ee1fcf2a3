# app/core/selections/service.py

"""Service-layer for persisted interval selections."""

from __future__ import annotations

import json
import logging
from typing import List, Sequence

from app.config import settings
from app.core.offsets import DEFAULT_TOKEN, TokenOk, parse_token
from .store import BaseSelectionStore

log = logging.getLogger(__name__)

RECENT_LIMIT = 3


def push_recent(recents: Sequence[str], token: str, limit: int = RECENT_LIMIT) -> List[str]:
    """
    Новый список «недавних»: ``token`` первым, без дублей, не длиннее ``limit``.

    push_recent(["2months", "1weeks"], "1weeks") → ["1weeks", "2months"]
    """
    return [token, *(t for t in recents if t != token)][:limit]


class SelectionsService:
    """
    Последний выбор и список недавних интервалов.

    ``last`` сохраняется при каждом изменении пикера,
    ``recent`` — только после успешной генерации артефакта.
    """

    def __init__(self, store: BaseSelectionStore) -> None:
        self.store = store

    def get_last(self) -> str:
        raw = self.store.get(settings.LAST_SELECTION_KEY)
        if not raw:
            return str(DEFAULT_TOKEN)
        return str(parse_token(raw, strict=False).token)

    def set_last(self, token: str) -> str:
        canonical = str(parse_token(token).token)
        self.store.set(settings.LAST_SELECTION_KEY, canonical)
        return canonical

    def get_recent(self) -> List[str]:
        raw = self.store.get(settings.RECENT_SELECTIONS_KEY)
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except json.JSONDecodeError:
            log.warning("Corrupt recent selections under %s, resetting", settings.RECENT_SELECTIONS_KEY)
            return []
        if not isinstance(items, list):
            log.warning("Recent selections under %s is not a list, resetting", settings.RECENT_SELECTIONS_KEY)
            return []
        recents: List[str] = []
        for item in items:
            if not isinstance(item, str):
                log.warning("Dropping non-string recent selection %r", item)
                continue
            parsed = parse_token(item, strict=False)
            if not isinstance(parsed, TokenOk):
                continue
            canonical = str(parsed.token)
            if canonical not in recents:
                recents.append(canonical)
        return recents[:RECENT_LIMIT]

    def record_recent(self, token: str) -> List[str]:
        updated = push_recent(self.get_recent(), token)
        self.store.set(settings.RECENT_SELECTIONS_KEY, json.dumps(updated))
        log.info("Recent selections updated: %s", updated)
        return updated


__all__ = ["RECENT_LIMIT", "SelectionsService", "push_recent"]
