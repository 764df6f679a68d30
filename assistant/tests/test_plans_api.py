import json
from datetime import date, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from fastapi.testclient import TestClient

from assistant.api.api_run import app
from assistant.infra import History_Repository, Plan_Repository
from assistant.logic.week.dates import monday_of
from assistant.logic.week.week_view import render_week

client = TestClient(app)


@pytest.fixture(autouse=True)
def isolated_data(tmp_path, monkeypatch):
    plans = tmp_path / "plans.json"
    monkeypatch.setattr(Plan_Repository, "PLANS_FILE", plans)
    monkeypatch.setattr(History_Repository, "HISTORY_FILE", tmp_path / "history.json")
    return plans


def _add(d, item):
    resp = client.post("/add_plan", json={"date": d, "item": item})
    assert resp.status_code == 200, resp.text
    return resp.json()["plan"]


def test_add_plan_returns_entry():
    resp = client.post("/add_plan", json={"date": " 2025-07-22 ", "item": " Dinner with Zhang "})
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Plan added successfully"
    plan = data["plan"]
    assert plan["date"] == "2025-07-22"
    assert plan["item"] == "Dinner with Zhang"
    assert plan["id"]
    assert plan["timestamp"].endswith("Z")


@pytest.mark.parametrize("body", [
    {"date": "2025-07-22"},
    {"item": "Dinner"},
    {"date": "", "item": "Dinner"},
    {"date": "2025-07-22", "item": "   "},
    {"date": None, "item": "Dinner"},
])
def test_add_plan_missing_fields(isolated_data, body):
    resp = client.post("/add_plan", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Date and item are required for adding a plan."}
    assert client.get("/get_plans").json() == []


def test_get_plans_sorted_by_date():
    _add("2025-08-01", "August")
    _add("待定", "Someday")
    _add("2025-07-22", "July")
    items = [p["item"] for p in client.get("/get_plans").json()]
    assert items == ["July", "August", "Someday"]


def test_delete_plan():
    keep = _add("2025-07-22", "Keep")
    gone = _add("2025-07-23", "Gone")
    resp = client.post("/delete_plan", json={"id": gone["id"]})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Plan deleted successfully"}
    assert [p["id"] for p in client.get("/get_plans").json()] == [keep["id"]]

    again = client.post("/delete_plan", json={"id": gone["id"]})
    assert again.status_code == 404
    assert again.json() == {"error": "Plan not found."}


@pytest.mark.parametrize("body", [{}, {"id": ""}, {"id": None}])
def test_delete_plan_requires_id(body):
    resp = client.post("/delete_plan", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Plan ID is required for deleting a plan."}


def test_corrupt_plan_file_reads_as_empty(isolated_data):
    isolated_data.write_text("{oops", encoding="utf-8")
    resp = client.get("/get_plans")
    assert resp.status_code == 200
    assert resp.json() == []


def test_week_endpoint_buckets_plans():
    monday = monday_of(date.today()) + timedelta(weeks=1)
    _add((monday + timedelta(days=1)).isoformat(), "Dinner with Zhang")
    _add((monday + timedelta(days=7)).isoformat(), "Week after")
    resp = client.get("/api/week", params={"start": (monday + timedelta(days=2)).isoformat()})
    assert resp.status_code == 200
    week = resp.json()
    assert week["start"] == monday.isoformat()
    assert week["end"] == (monday + timedelta(days=6)).isoformat()
    assert week["days"][0]["weekday"] == "Monday"
    assert week["days"][1]["events"] == ["Dinner with Zhang"]
    assert all(d["events"] == [] for i, d in enumerate(week["days"]) if i != 1)
    assert not any(d["isToday"] for d in week["days"])


def test_week_endpoint_hides_plans_older_than_last_week():
    old = monday_of(date.today()) - timedelta(weeks=3)
    _add(old.isoformat(), "Long gone")
    week = client.get("/api/week", params={"start": old.isoformat()}).json()
    assert all(d["events"] == [] for d in week["days"])


def test_week_endpoint_offset():
    resp = client.get("/api/week", params={"start": "2025-07-23", "offset": -2})
    assert resp.json()["start"] == "2025-07-07"


def test_week_endpoint_defaults_to_current_week():
    today = date.today()
    week = client.get("/api/week").json()
    assert week["start"] == monday_of(today).isoformat()
    assert sum(1 for d in week["days"] if d["isToday"]) == 1


def test_week_endpoint_shows_recent_plans():
    today = date.today()
    _add(today.isoformat(), "Today thing")
    week = client.get("/api/week").json()
    cell = next(d for d in week["days"] if d["isToday"])
    assert cell["events"] == ["Today thing"]


@pytest.mark.parametrize("start", ["2025-7-3", "tomorrow", "2025-13-01"])
def test_week_endpoint_bad_date(start):
    resp = client.get("/api/week", params={"start": start})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid date format. Expected YYYY-MM-DD"}


def test_main_page_renders_week_and_plans():
    today = date.today()
    _add((today + timedelta(days=1)).isoformat(), "Tomorrow's dentist")
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    assert render_week(today, [], today).label in html
    assert "Tomorrow&#39;s dentist" in html or "Tomorrow's dentist" in html
    assert "in 1 day" in html


def test_main_page_offset_and_history(isolated_data, tmp_path):
    (tmp_path / "history.json").write_text(json.dumps([
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello there!"},
    ]), encoding="utf-8")
    today = date.today()
    resp = client.get("/", params={"offset": 3})
    assert resp.status_code == 200
    assert render_week(today + timedelta(weeks=3), [], today).label in resp.text
    assert "Hello there!" in resp.text


@pytest.mark.asyncio
async def test_add_then_delete_over_async_client():
    """Add a plan and delete it again through the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp1 = await ac.post("/add_plan", json={"date": "待定", "item": "Visit grandma"})
        assert resp1.status_code == 200, resp1.text
        plan_id = resp1.json()["plan"]["id"]

        resp2 = await ac.get("/get_plans")
        assert [p["id"] for p in resp2.json()] == [plan_id]

        resp3 = await ac.post("/delete_plan", json={"id": plan_id})
        assert resp3.status_code == 200
        assert (await ac.get("/get_plans")).json() == []


def test_long_item_is_accepted():
    plan = _add("2025-07-22", "x" * 501)
    assert len(plan["item"]) == 501
