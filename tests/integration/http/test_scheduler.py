from __future__ import annotations

from datetime import datetime, timedelta, timezone


def _iso(delta: timedelta) -> str:
    return (datetime.now(timezone.utc) + delta).isoformat()


async def _reminder(client, headers, due: timedelta, **extra):
    response = await client.post(
        "/api/scheduler",
        json={
            "title": extra.pop("title", "Vaccinate herd"),
            "reminderType": "Vaccination",
            "dueDate": _iso(due),
            **extra,
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_overdue_reminder_completion(client, auth_headers):
    reminder = await _reminder(client, auth_headers, timedelta(days=-1))
    assert reminder["status"] == "Pending"
    assert reminder["isOverdue"] is True

    summary = await client.get("/api/scheduler/dashboard/summary", headers=auth_headers)
    assert summary.status_code == 200
    assert summary.json() == {
        "totalReminders": 1,
        "pendingReminders": 1,
        "overdueReminders": 1,
        "upcomingReminders": 0,
    }

    before = datetime.now(timezone.utc)
    completed = await client.put(
        f"/api/scheduler/{reminder['id']}/complete", headers=auth_headers
    )
    assert completed.status_code == 200
    body = completed.json()
    assert body["status"] == "Completed"
    assert body["isOverdue"] is False
    completed_at = datetime.fromisoformat(body["completedDate"].replace("Z", "+00:00"))
    assert completed_at >= before - timedelta(seconds=1)

    summary = await client.get("/api/scheduler/dashboard/summary", headers=auth_headers)
    assert summary.json()["overdueReminders"] == 0
    assert summary.json()["pendingReminders"] == 0
    assert summary.json()["totalReminders"] == 1

    again = await client.put(f"/api/scheduler/{reminder['id']}/complete", headers=auth_headers)
    assert again.status_code == 200
    assert again.json()["completedDate"] == body["completedDate"]


async def test_upcoming_window(client, auth_headers, other_headers):
    await _reminder(client, auth_headers, timedelta(days=3), title="Soon")
    await _reminder(client, auth_headers, timedelta(days=1), title="Sooner")
    await _reminder(client, auth_headers, timedelta(days=10), title="Later")
    await _reminder(client, auth_headers, timedelta(days=-2), title="Late")
    await _reminder(client, auth_headers, timedelta(days=2), title="Done", status="Completed")
    await _reminder(client, other_headers, timedelta(days=1), title="Not mine")

    upcoming = await client.get("/api/scheduler/upcoming/list", headers=auth_headers)
    assert upcoming.status_code == 200
    assert [r["title"] for r in upcoming.json()] == ["Sooner", "Soon"]

    summary = (await client.get("/api/scheduler/dashboard/summary", headers=auth_headers)).json()
    assert summary == {
        "totalReminders": 5,
        "pendingReminders": 4,
        "overdueReminders": 1,
        "upcomingReminders": 2,
    }

    everything = await client.get("/api/scheduler", headers=auth_headers)
    assert [r["title"] for r in everything.json()] == ["Late", "Sooner", "Done", "Soon", "Later"]


async def test_cancelled_reminder_cannot_be_completed(client, auth_headers):
    reminder = await _reminder(client, auth_headers, timedelta(days=1), status="Cancelled")
    response = await client.put(f"/api/scheduler/{reminder['id']}/complete", headers=auth_headers)
    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


async def test_complete_is_owner_scoped(client, auth_headers, other_headers):
    reminder = await _reminder(client, auth_headers, timedelta(days=-1))
    response = await client.put(
        f"/api/scheduler/{reminder['id']}/complete", headers=other_headers
    )
    assert response.status_code == 404
    own = await client.get(f"/api/scheduler/{reminder['id']}", headers=auth_headers)
    assert own.json()["status"] == "Pending"


async def test_overdue_is_not_a_stored_status(client, auth_headers):
    response = await client.post(
        "/api/scheduler",
        json={
            "title": "Check",
            "reminderType": "Other",
            "dueDate": _iso(timedelta(days=1)),
            "status": "Overdue",
        },
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_terminal_reminder_cannot_be_reopened(client, auth_headers):
    cancelled = await _reminder(client, auth_headers, timedelta(days=-1), status="Cancelled")

    reopened = await client.put(
        f"/api/scheduler/{cancelled['id']}", json={"status": "Pending"}, headers=auth_headers
    )
    assert reopened.status_code == 409
    assert reopened.json()["code"] == "conflict"

    summary = await client.get("/api/scheduler/dashboard/summary", headers=auth_headers)
    assert summary.json()["overdueReminders"] == 0

    same_status = await client.put(
        f"/api/scheduler/{cancelled['id']}",
        json={"status": "Cancelled", "title": "Skip vaccination"},
        headers=auth_headers,
    )
    assert same_status.status_code == 200
    assert same_status.json()["title"] == "Skip vaccination"


async def test_completed_reminder_keeps_its_status(client, auth_headers):
    reminder = await _reminder(client, auth_headers, timedelta(days=-1))
    await client.put(f"/api/scheduler/{reminder['id']}/complete", headers=auth_headers)

    response = await client.put(
        f"/api/scheduler/{reminder['id']}", json={"status": "Pending"}, headers=auth_headers
    )
    assert response.status_code == 409

    current = await client.get(f"/api/scheduler/{reminder['id']}", headers=auth_headers)
    assert current.json()["status"] == "Completed"

    notes = await client.put(
        f"/api/scheduler/{reminder['id']}", json={"notes": "Done early"}, headers=auth_headers
    )
    assert notes.status_code == 200


async def test_pending_reminder_can_be_cancelled(client, auth_headers):
    reminder = await _reminder(client, auth_headers, timedelta(days=2))
    response = await client.put(
        f"/api/scheduler/{reminder['id']}", json={"status": "Cancelled"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["status"] == "Cancelled"


async def test_reminder_null_defaults_are_rejected(client, auth_headers):
    reminder = await _reminder(client, auth_headers, timedelta(days=2))
    response = await client.put(
        f"/api/scheduler/{reminder['id']}",
        json={"priority": None, "isRecurring": None},
        headers=auth_headers,
    )
    assert response.status_code == 422
    assert response.json()["details"]["fields"] == [
        {"field": "isRecurring", "message": "Field cannot be null"},
        {"field": "priority", "message": "Field cannot be null"},
    ]
