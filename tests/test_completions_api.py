from datetime import timedelta

from fastapi.testclient import TestClient
from sqlalchemy import func, select

from api_main import app
from habitvault.models import HabitCompletion
from habitvault.services.dates import today_local


def _count_rows(db, habit_id):
    return db.scalar(select(func.count()).select_from(HabitCompletion).where(HabitCompletion.habit_id == habit_id))


def test_post_defaults_to_today_and_completed(client, auth, make_habit):
    habit = make_habit(start_date=today_local() - timedelta(days=10))

    resp = client.post(f"/api/habits/{habit.id}/completions", headers=auth)

    assert resp.status_code == 201
    body = resp.json()
    assert body["habitId"] == habit.id
    assert body["date"] == today_local().isoformat()
    assert body["completed"] is True
    assert body["completedAt"]


def test_toggle_same_day_twice_keeps_one_row(client, db, auth, make_habit):
    habit = make_habit(start_date=today_local() - timedelta(days=10))
    day = (today_local() - timedelta(days=2)).isoformat()

    first = client.post(f"/api/habits/{habit.id}/completions", json={"date": day, "completed": True}, headers=auth)
    second = client.post(f"/api/habits/{habit.id}/completions", json={"date": day, "completed": True}, headers=auth)
    third = client.post(f"/api/habits/{habit.id}/completions", json={"date": day, "completed": False}, headers=auth)

    assert first.json()["id"] == second.json()["id"] == third.json()["id"]
    assert third.json()["completed"] is False
    assert _count_rows(db, habit.id) == 1


def test_get_reflects_posted_value_for_that_day_only(client, auth, make_habit):
    today = today_local()
    habit = make_habit(start_date=today - timedelta(days=10))
    d1 = (today - timedelta(days=3)).isoformat()
    d2 = (today - timedelta(days=2)).isoformat()

    client.post(f"/api/habits/{habit.id}/completions", json={"date": d1}, headers=auth)
    client.post(f"/api/habits/{habit.id}/completions", json={"date": d2, "completed": False}, headers=auth)

    rows = client.get(f"/api/habits/{habit.id}/completions", headers=auth).json()
    assert [(r["date"], r["completed"]) for r in rows] == [(d1, True), (d2, False)]

    only_d2 = client.get(
        f"/api/habits/{habit.id}/completions",
        params={"startDate": d2, "endDate": d2},
        headers=auth,
    ).json()
    assert [(r["date"], r["completed"]) for r in only_d2] == [(d2, False)]


def test_get_completions_rejects_bad_dates(client, auth, make_habit):
    habit = make_habit()

    resp = client.get(f"/api/habits/{habit.id}/completions", params={"startDate": "yesterday"}, headers=auth)

    assert resp.status_code == 400


def test_completion_before_start_date_rejected(client, auth, make_habit):
    today = today_local()
    habit = make_habit(start_date=today)

    resp = client.post(
        f"/api/habits/{habit.id}/completions",
        json={"date": (today - timedelta(days=1)).isoformat()},
        headers=auth,
    )

    assert resp.status_code == 400


def test_unknown_habit_is_404(client, auth):
    assert client.post("/api/habits/4242/completions", json={}, headers=auth).status_code == 404
    assert client.get("/api/habits/4242/completions", headers=auth).status_code == 404


def test_completing_today_updates_streak(client, auth, make_habit):
    today = today_local()
    habit = make_habit(start_date=today - timedelta(days=10))
    url = f"/api/habits/{habit.id}/completions"

    for offset in (2, 1):
        client.post(url, json={"date": (today - timedelta(days=offset)).isoformat()}, headers=auth)
    assert client.get(f"/api/habits/{habit.id}", headers=auth).json()["currentStreak"] == 0

    client.post(url, json={}, headers=auth)
    body = client.get(f"/api/habits/{habit.id}", headers=auth).json()
    assert body["currentStreak"] == 3
    assert body["longestStreak"] == 3

    # Unchecking today leaves the stored streak as it was.
    client.post(url, json={"completed": False}, headers=auth)
    body = client.get(f"/api/habits/{habit.id}", headers=auth).json()
    assert body["currentStreak"] == 3
    assert body["longestStreak"] == 3


def test_completions_today(client, auth, make_habit):
    today = today_local()
    done = make_habit(name="Read", start_date=today - timedelta(days=1))
    pending = make_habit(name="Walk", start_date=today - timedelta(days=1))
    client.post(f"/api/habits/{done.id}/completions", json={}, headers=auth)

    rows = {r["habit"]["id"]: r for r in client.get("/api/completions/today", headers=auth).json()}

    assert rows[done.id]["completion"]["completed"] is True
    assert rows[pending.id]["completion"] is None


def test_unexpected_error_returns_500_body(client, auth, make_habit, monkeypatch):
    habit = make_habit(start_date=today_local() - timedelta(days=1))

    def failing_record(*args, **kwargs):
        raise RuntimeError("kaboom")

    monkeypatch.setattr("habitvault.api.habits.record_completion", failing_record)
    quiet = TestClient(app, raise_server_exceptions=False)

    resp = quiet.post(f"/api/habits/{habit.id}/completions", json={}, headers=auth)

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error", "error": "kaboom"}
