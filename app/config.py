# /app/app/config.py

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)

_OUTLOOK_HOSTS = {
    "live": "outlook.live.com",
    "office": "outlook.office.com",
}


class Settings(BaseSettings):
    """
    Единый конфиг проекта. Читает переменные окружения.
    Pydantic v2 + pydantic-settings.
    """
    model_config = SettingsConfigDict(
        case_sensitive=False,  # Имена переменных окружения не чувствительны к регистру
        extra="ignore",
    )

    # --- Основные настройки ---
    ENVIRONMENT: str = Field("dev", description="Application environment (dev, test, prod)")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- Календарный файл (.ics) ---
    ICS_PRODID: str = Field("-//ReCal//ReCal 1.0//EN", description="PRODID line of generated .ics files")
    ICS_UID_DOMAIN: str = Field("recal.app", description="Domain suffix of generated event UIDs")
    ICS_FILENAME_PREFIX: str = Field("recal-", description="Prefix of suggested .ics file names")

    # --- Deep links ---
    OUTLOOK_HOST: str = Field("live", description="Outlook Web host ('live' or 'office')")
    OUTLOOK_BASE_URL: Optional[str] = Field(None, description="Outlook compose URL (defaults from OUTLOOK_HOST)")

    # --- Offset tokens ---
    STRICT_OFFSET_TOKENS: bool = Field(
        False, description="Reject malformed offset tokens instead of falling back to 1weeks"
    )

    # --- Хранилище выбранных интервалов ---
    SELECTIONS_STORE: str = Field("memory", description="Selections store backend ('memory', 'redis')")
    REDIS_URL: str = Field("redis://redis:6379/0", description="URL for Redis connection")
    SELECTIONS_KEY_PREFIX: str = Field("recal:", description="Key prefix for persisted selections")
    LAST_SELECTION_KEY: Optional[str] = Field(None, description="Key of the last picker selection")
    RECENT_SELECTIONS_KEY: Optional[str] = Field(None, description="Key of the recent selections list")

    @model_validator(mode="after")
    def set_derived_defaults(self) -> "Settings":
        host_key = self.OUTLOOK_HOST.lower()
        if host_key not in _OUTLOOK_HOSTS:
            raise ValueError(f"Unknown OUTLOOK_HOST: {self.OUTLOOK_HOST}")
        if self.OUTLOOK_BASE_URL is None:
            log.debug("Setting OUTLOOK_BASE_URL default from OUTLOOK_HOST=%s", host_key)
            self.OUTLOOK_BASE_URL = f"https://{_OUTLOOK_HOSTS[host_key]}/calendar/deeplink/compose"
        if self.LAST_SELECTION_KEY is None:
            self.LAST_SELECTION_KEY = f"{self.SELECTIONS_KEY_PREFIX}lastTimeDelay"
        if self.RECENT_SELECTIONS_KEY is None:
            self.RECENT_SELECTIONS_KEY = f"{self.SELECTIONS_KEY_PREFIX}recentTimeDelays"
        return self


# --- Создание единственного экземпляра настроек ---
try:
    settings = Settings()
    log.info("Settings loaded successfully for ENVIRONMENT=%s", settings.ENVIRONMENT)
    log.debug(
        "Loaded settings: store=%s, outlook=%s, strict tokens=%s",
        settings.SELECTIONS_STORE,
        settings.OUTLOOK_BASE_URL,
        settings.STRICT_OFFSET_TOKENS,
    )
except Exception as e:
    log.exception("Failed to instantiate Settings.")
    raise e
