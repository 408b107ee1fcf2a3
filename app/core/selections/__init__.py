# app/core/selections/__init__.py

"""
Selections package.

Экспортируем основные элементы, чтобы внешние модули могли писать
`from app.core.selections import SelectionsService`.
"""

from .service import RECENT_LIMIT, SelectionsService, push_recent  # noqa: F401
from .store import (  # noqa: F401
    BaseSelectionStore,
    MemorySelectionStore,
    RedisSelectionStore,
    SelectionStoreError,
    get_selection_store,
    reset_selection_store,
)

__all__: list[str] = [
    "RECENT_LIMIT",
    "SelectionsService",
    "push_recent",
    "BaseSelectionStore",
    "MemorySelectionStore",
    "RedisSelectionStore",
    "SelectionStoreError",
    "get_selection_store",
    "reset_selection_store",
]
