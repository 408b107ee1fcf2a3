# /app/app/api/v1/selections.py

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_selections_service
from app.core.offsets import OffsetTokenError
from app.core.reminders import SelectionIn, SelectionsOut
from app.core.selections import SelectionsService, SelectionStoreError

router = APIRouter(prefix="/v1/selections", tags=["selections"])
log = logging.getLogger(__name__)


@router.get("", response_model=SelectionsOut, summary="Last picker selection and recent picks")
def get_selections(service: SelectionsService = Depends(get_selections_service)) -> SelectionsOut:
    try:
        return SelectionsOut(last=service.get_last(), recent=service.get_recent())
    except SelectionStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="selections store error") from exc


@router.put("/last", response_model=SelectionsOut, summary="Remember the current picker selection")
def put_last(body: SelectionIn, service: SelectionsService = Depends(get_selections_service)) -> SelectionsOut:
    try:
        last = service.set_last(body.time_delay)
        return SelectionsOut(last=last, recent=service.get_recent())
    except OffsetTokenError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except SelectionStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="selections store error") from exc
