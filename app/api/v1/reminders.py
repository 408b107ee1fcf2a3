# /app/app/api/v1/reminders.py

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_reminders_service
from app.core.calendar import Artifact, UnknownRendererError
from app.core.calendar.schemas import LinkOut, TextOut, WindowOut
from app.core.offsets import OffsetTokenError, TokenFallback, resolve
from app.core.reminders import ReminderForm, RemindersService
from app.core.selections import SelectionStoreError

router = APIRouter(prefix="/v1/reminders", tags=["reminders"])
log = logging.getLogger(__name__)


def _generate(service: RemindersService, form: ReminderForm, renderer_name: str) -> Artifact:
    try:
        return service.generate(form, renderer_name)
    except OffsetTokenError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except UnknownRendererError as exc:  # pragma: no cover
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except SelectionStoreError as exc:
        log.exception("Selections store unavailable")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="selections store error") from exc


@router.post("/resolve", response_model=WindowOut, summary="Resolve the event window for a form")
def resolve_window(form: ReminderForm, service: RemindersService = Depends(get_reminders_service)) -> WindowOut:
    try:
        parsed = service.parse(form)
    except OffsetTokenError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    window = resolve(parsed.token)
    return WindowOut(
        time_delay=str(parsed.token),
        fallback=isinstance(parsed, TokenFallback),
        reason=parsed.reason if isinstance(parsed, TokenFallback) else None,
        start=window.start,
        end=window.end,
    )


@router.post("/ics", summary="Download an .ics calendar file")
def download_ics(form: ReminderForm, service: RemindersService = Depends(get_reminders_service)) -> Response:
    artifact = _generate(service, form, "ics")
    return Response(
        content=artifact.body,
        media_type=artifact.media_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@router.post("/google", response_model=LinkOut, summary="Google Calendar deep link")
def google_link(form: ReminderForm, service: RemindersService = Depends(get_reminders_service)) -> LinkOut:
    return LinkOut(url=_generate(service, form, "google").body)


@router.post("/outlook", response_model=LinkOut, summary="Outlook Web deep link")
def outlook_link(form: ReminderForm, service: RemindersService = Depends(get_reminders_service)) -> LinkOut:
    return LinkOut(url=_generate(service, form, "outlook").body)


@router.post("/text", response_model=TextOut, summary="Plain-text event details")
def copy_details(form: ReminderForm, service: RemindersService = Depends(get_reminders_service)) -> TextOut:
    return TextOut(text=_generate(service, form, "text").body)
