# app/api/deps.py

from __future__ import annotations

from fastapi import Depends

from app.core.reminders import RemindersService
from app.core.selections import BaseSelectionStore, SelectionsService, get_selection_store


def get_selections_service(store: BaseSelectionStore = Depends(get_selection_store)) -> SelectionsService:
    return SelectionsService(store)


def get_reminders_service(
    selections: SelectionsService = Depends(get_selections_service),
) -> RemindersService:
    return RemindersService(selections)
