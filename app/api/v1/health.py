from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from app.config import settings
from app.core.selections import get_selection_store

router = APIRouter(tags=["Health"])
log = logging.getLogger(__name__)


@router.get("/healthz", status_code=status.HTTP_200_OK)
def healthz():
    out: dict[str, str] = {"status": "ok", "environment": settings.ENVIRONMENT}

    # Selections store (memory всегда ok)
    store = get_selection_store()
    if not store.ping():
        log.error("Selections store %s health check failed", store.name)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="store error")
    out["store"] = store.name

    return out
