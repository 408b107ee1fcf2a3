# app/core/selections/store.py

"""
Key-value хранилища для выбора интервала (last / recent).

Ядро их не читает: хранилище — внешний коллаборатор, которому
сервис передаёт готовые строки (токен или JSON-список).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from redis import Redis
from redis.exceptions import RedisError

from app.config import settings

log = logging.getLogger(__name__)


class SelectionStoreError(Exception):
    """Base exception for selection storage errors"""


class BaseSelectionStore(ABC):
    name: str

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def ping(self) -> bool:
        ...


class MemorySelectionStore(BaseSelectionStore):
    """Память - просто в оперативке (dev и тесты)."""

    name: str = "memory"

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        log.info("Initialized MemorySelectionStore (in-memory)")

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        log.debug("Memory: %s = %s", key, value)
        self._data[key] = value

    def ping(self) -> bool:
        return True


class RedisSelectionStore(BaseSelectionStore):
    name: str = "redis"

    def __init__(self, client: Any = None, url: Optional[str] = None) -> None:
        self._redis = client if client is not None else Redis.from_url(
            url or settings.REDIS_URL, socket_connect_timeout=2, decode_responses=True
        )

    def get(self, key: str) -> Optional[str]:
        try:
            value = self._redis.get(key)
        except RedisError as exc:
            log.exception("Redis GET %s failed", key)
            raise SelectionStoreError(f"Cannot read {key}: {exc}") from exc
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self._redis.set(key, value)
        except RedisError as exc:
            log.exception("Redis SET %s failed", key)
            raise SelectionStoreError(f"Cannot write {key}: {exc}") from exc
        log.debug("Redis: %s = %s", key, value)

    def ping(self) -> bool:
        try:
            return bool(self._redis.ping())
        except RedisError:
            log.exception("Redis health check failed")
            return False


# --------------------------------------------------------------------------- #
#                                   factory                                   #
# --------------------------------------------------------------------------- #
_STORES = {
    "memory": MemorySelectionStore,
    "redis": RedisSelectionStore,
}

_store_instance: Optional[BaseSelectionStore] = None


def get_selection_store() -> BaseSelectionStore:
    """Фабрика для получения ЕДИНСТВЕННОГО экземпляра хранилища."""
    global _store_instance
    if _store_instance is None:
        store_key = settings.SELECTIONS_STORE.lower()
        store_cls = _STORES.get(store_key)
        if store_cls is None:
            raise ValueError(f"Unknown selections store: {settings.SELECTIONS_STORE}")
        _store_instance = store_cls()
        log.info("Initialized selections store: %s", _store_instance.name)
    return _store_instance


def reset_selection_store() -> None:
    global _store_instance
    _store_instance = None


__all__ = [
    "BaseSelectionStore",
    "MemorySelectionStore",
    "RedisSelectionStore",
    "SelectionStoreError",
    "get_selection_store",
    "reset_selection_store",
]
