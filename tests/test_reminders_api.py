from datetime import datetime, timedelta
from urllib.parse import parse_qs, urlsplit

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.core.calendar.ics import parse_ics_event
from app.main import app

client = TestClient(app)


@pytest.fixture
def form() -> dict:
    return {"title": "Revisit: My Decision!!", "content": "line one\nline two", "timeDelay": "2weeks"}


def test_ics_download(form):
    response = client.post("/v1/reminders/ics", json=form)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/calendar")
    assert response.headers["content-disposition"] == 'attachment; filename="recal-revisit-my-decision.ics"'
    assert "\r\n" in response.text
    event = parse_ics_event(response.text)
    assert event["SUMMARY"] == form["title"]
    assert event["DESCRIPTION"] == form["content"]
    assert event["DTEND"] - event["DTSTART"] == timedelta(minutes=30)


def test_google_link(form):
    response = client.post("/v1/reminders/google", json=form)
    assert response.status_code == 200
    url = response.json()["url"]
    assert url.startswith("https://calendar.google.com/calendar/render?")
    query = parse_qs(urlsplit(url).query)
    assert query["action"] == ["TEMPLATE"]
    assert query["text"] == [form["title"]]
    start, end = query["dates"][0].split("/")
    assert start.endswith("Z") and end.endswith("Z")


def test_outlook_link(form):
    response = client.post("/v1/reminders/outlook", json=form)
    assert response.status_code == 200
    query = parse_qs(urlsplit(response.json()["url"]).query)
    assert query["rru"] == ["addevent"]
    assert query["subject"] == [form["title"]]
    assert not query["startdt"][0].endswith("Z")


def test_text_summary(form):
    response = client.post("/v1/reminders/text", json=form)
    assert response.status_code == 200
    text = response.json()["text"]
    assert text.startswith("📅 Revisit: My Decision!!\n")
    assert "⏱️ Duration: 30 minutes" in text
    assert text.endswith("📝 line one\nline two")


def test_content_is_optional():
    response = client.post("/v1/reminders/text", json={"title": "Only a title", "timeDelay": "1months"})
    assert response.status_code == 200
    assert "📝" not in response.json()["text"]


def test_empty_title_rejected():
    response = client.post("/v1/reminders/ics", json={"title": "", "timeDelay": "1weeks"})
    assert response.status_code == 422


def test_resolve_reports_fallback():
    response = client.post("/v1/reminders/resolve", json={"title": "t", "timeDelay": "garbage"})
    assert response.status_code == 200
    body = response.json()
    assert body["timeDelay"] == "1weeks"
    assert body["fallback"] is True
    assert body["reason"]
    start = datetime.fromisoformat(body["start"])
    end = datetime.fromisoformat(body["end"])
    assert end - start == timedelta(minutes=30)


def test_resolve_valid_token():
    body = client.post("/v1/reminders/resolve", json={"title": "t", "timeDelay": "3years"}).json()
    assert body["timeDelay"] == "3years"
    assert body["fallback"] is False
    assert body["reason"] is None


def test_strict_mode_returns_422(monkeypatch):
    monkeypatch.setattr(settings, "STRICT_OFFSET_TOKENS", True)
    response = client.post("/v1/reminders/google", json={"title": "t", "timeDelay": "whenever"})
    assert response.status_code == 422
    assert client.get("/v1/selections").json()["recent"] == []


def test_generation_updates_recent_selections(form):
    for token in ["1weeks", "2weeks", "3weeks", "1weeks", "4weeks"]:
        client.post("/v1/reminders/text", json={**form, "timeDelay": token})
    assert client.get("/v1/selections").json()["recent"] == ["4weeks", "1weeks", "3weeks"]


def test_last_selection_roundtrip():
    assert client.get("/v1/selections").json() == {"last": "1weeks", "recent": []}
    response = client.put("/v1/selections/last", json={"timeDelay": "6months"})
    assert response.status_code == 200
    assert response.json()["last"] == "6months"
    # picker changes never touch the recent list
    assert client.get("/v1/selections").json() == {"last": "6months", "recent": []}


def test_healthz():
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test", "store": "memory"}


def test_oversized_count_falls_back_to_one_week(form):
    response = client.post("/v1/reminders/ics", json={**form, "timeDelay": "99999999weeks"})
    assert response.status_code == 200
    event = parse_ics_event(response.text)
    assert event["DTEND"] - event["DTSTART"] == timedelta(minutes=30)
    assert client.get("/v1/selections").json()["recent"][0] == "1weeks"


def test_oversized_count_returns_422_in_strict_mode(monkeypatch, form):
    monkeypatch.setattr(settings, "STRICT_OFFSET_TOKENS", True)
    response = client.post("/v1/reminders/ics", json={**form, "timeDelay": "1" * 5000 + "weeks"})
    assert response.status_code == 422
