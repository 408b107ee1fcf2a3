from __future__ import annotations
import logging

from fastapi import FastAPI

from app.api.v1.health import router as health_router
from app.api.v1.reminders import router as reminders_router
from app.api.v1.selections import router as selections_router
from app.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)
log = logging.getLogger(__name__)

description = """
Capture a thought now, revisit it when it matters.

Turns a note and a relative delay ("3weeks") into a calendar reminder:
an .ics file, a Google Calendar or Outlook Web link, or plain text.
"""
tags_metadata = [
    {"name": "reminders", "description": "Generate calendar artifacts from the reminder form."},
    {"name": "selections", "description": "Last and recent interval picks."},
    {"name": "Health", "description": "Liveness check."},
]

app = FastAPI(
    title="ReCal API",
    description=description,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=tags_metadata,
)

app.include_router(health_router)
app.include_router(reminders_router)
app.include_router(selections_router)

log.info("\U0001F331 FastAPI application configured. Environment: %s", settings.ENVIRONMENT)
