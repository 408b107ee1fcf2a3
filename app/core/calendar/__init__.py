"""
Calendar artifacts package.

• ``EventRecord``  – общая Pydantic-модель события (см. base.py).
• ``BaseCalendarRenderer`` – абстрактный интерфейс рендерера.
• ``get_calendar_renderer()`` – фабрика, возвращающая инстанс
  нужного рендерера по имени ('ics', 'google', 'outlook', 'text').
"""
from __future__ import annotations

import importlib
import logging
from typing import Callable, Dict, Type

from .base import Artifact, BaseCalendarRenderer, EventRecord  # noqa: F401 (экспорт в __all__)

log = logging.getLogger(__name__)


class UnknownRendererError(ValueError):
    """Requested artifact format has no registered renderer."""


# --------------------------------------------------------------------------- #
#                       helpers: lazy-import specific renderer                #
# --------------------------------------------------------------------------- #
def _lazy_import(module_suffix: str, class_name: str) -> Type[BaseCalendarRenderer]:
    """
    _lazy_import(".ics", "IcsCalendarRenderer")  →  <class IcsCalendarRenderer>
    Относительный путь (``.ics``) ищется внутри текущего пакета.
    """
    module = importlib.import_module(f"{__name__}{module_suffix}")
    renderer_cls = getattr(module, class_name)
    if not issubclass(renderer_cls, BaseCalendarRenderer):
        raise TypeError(f"Class {class_name} is not a subclass of BaseCalendarRenderer")  # pragma: no cover
    return renderer_cls


# --------------------------------------------------------------------------- #
#                       registry: name → renderer-class                       #
# --------------------------------------------------------------------------- #
_RENDERER_LOADERS: Dict[str, Callable[[], Type[BaseCalendarRenderer]]] = {
    "ics": lambda: _lazy_import(".ics", "IcsCalendarRenderer"),
    "google": lambda: _lazy_import(".google", "GoogleCalendarRenderer"),
    "outlook": lambda: _lazy_import(".outlook", "OutlookCalendarRenderer"),
    "text": lambda: _lazy_import(".summary", "TextSummaryRenderer"),
}

RENDERER_NAMES: tuple[str, ...] = tuple(_RENDERER_LOADERS)


# --------------------------------------------------------------------------- #
#                                 public API                                  #
# --------------------------------------------------------------------------- #
def get_calendar_renderer(name: str) -> BaseCalendarRenderer:
    """
    Вернуть экземпляр рендерера.

    • ``name`` – имя формата (case-insensitive).
    """
    renderer_key = name.lower()
    try:
        loader = _RENDERER_LOADERS[renderer_key]
    except KeyError as exc:
        raise UnknownRendererError(f"Unknown calendar renderer: {name}") from exc
    renderer_cls = loader()
    log.debug("Loaded calendar renderer %s", renderer_cls.__name__)
    return renderer_cls()


__all__: list[str] = [
    "Artifact",
    "BaseCalendarRenderer",
    "EventRecord",
    "RENDERER_NAMES",
    "UnknownRendererError",
    "get_calendar_renderer",
]
