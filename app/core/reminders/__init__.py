# app/core/reminders/__init__.py

from .schemas import ReminderForm, SelectionIn, SelectionsOut  # noqa: F401
from .service import RemindersService  # noqa: F401

__all__: list[str] = ["ReminderForm", "RemindersService", "SelectionIn", "SelectionsOut"]
