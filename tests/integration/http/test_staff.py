from __future__ import annotations


async def _employee(client, headers, name: str = "Peter Kamau") -> dict:
    response = await client.post(
        "/api/staff/employees",
        json={
            "name": name,
            "position": "Farm Hand",
            "email": f"{name.split()[0].lower()}@farm.example",
            "phone": "555-0199",
            "hireDate": "2021-03-01",
            "salary": 1200,
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_attendance_hours_are_bounded(client, auth_headers):
    employee = await _employee(client, auth_headers)
    too_long = await client.post(
        "/api/staff/attendance",
        json={
            "employeeId": employee["id"],
            "date": "2024-05-01",
            "status": "Present",
            "hoursWorked": 25,
        },
        headers=auth_headers,
    )
    assert too_long.status_code == 422
    assert [f["field"] for f in too_long.json()["details"]["fields"]] == ["hoursWorked"]


async def test_attendance_listing(client, auth_headers):
    peter = await _employee(client, auth_headers)
    mary = await _employee(client, auth_headers, "Mary Wanjiru")
    for employee, day, status in [
        (peter, "2024-05-01", "Present"),
        (peter, "2024-05-02", "Late"),
        (mary, "2024-05-02", "Absent"),
    ]:
        response = await client.post(
            "/api/staff/attendance",
            json={"employeeId": employee["id"], "date": day, "status": status},
            headers=auth_headers,
        )
        assert response.status_code == 201

    peters = await client.get(
        "/api/staff/attendance", params={"employeeId": peter["id"]}, headers=auth_headers
    )
    body = peters.json()
    # Most recent day first
    assert [a["date"] for a in body] == ["2024-05-02", "2024-05-01"]
    assert body[0]["employeeId"] == {
        "id": peter["id"],
        "name": "Peter Kamau",
        "position": "Farm Hand",
    }

    absent = await client.get(
        "/api/staff/attendance", params={"status": "Absent"}, headers=auth_headers
    )
    assert [a["employeeId"]["name"] for a in absent.json()] == ["Mary Wanjiru"]

    invalid = await client.get(
        "/api/staff/attendance", params={"employeeId": "not-a-uuid"}, headers=auth_headers
    )
    assert invalid.status_code == 422


async def test_tasks_sorted_by_due_date_and_filtered(client, auth_headers):
    for title, due, priority in [
        ("Later", "2030-03-01T08:00:00Z", "Low"),
        ("First", "2030-01-01T08:00:00Z", "High"),
        ("Middle", "2030-02-01T08:00:00Z", "High"),
    ]:
        response = await client.post(
            "/api/staff/tasks",
            json={"title": title, "taskType": "Feeding", "dueDate": due, "priority": priority},
            headers=auth_headers,
        )
        assert response.status_code == 201

    tasks = await client.get("/api/staff/tasks", headers=auth_headers)
    assert [t["title"] for t in tasks.json()] == ["First", "Middle", "Later"]

    high = await client.get(
        "/api/staff/tasks", params={"priority": "High"}, headers=auth_headers
    )
    assert [t["title"] for t in high.json()] == ["First", "Middle"]

    negative = await client.post(
        "/api/staff/tasks",
        json={
            "title": "Bad",
            "taskType": "Feeding",
            "dueDate": "2030-01-01T08:00:00Z",
            "estimatedDuration": -10,
        },
        headers=auth_headers,
    )
    assert negative.status_code == 422


async def test_completed_task_status_is_final(client, auth_headers):
    created = await client.post(
        "/api/staff/tasks",
        json={"title": "Fix fence", "taskType": "Other", "dueDate": "2030-01-01T08:00:00Z"},
        headers=auth_headers,
    )
    task_id = created.json()["id"]

    for step in ("In Progress", "Completed"):
        response = await client.put(
            f"/api/staff/tasks/{task_id}", json={"status": step}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == step

    reopened = await client.put(
        f"/api/staff/tasks/{task_id}", json={"status": "In Progress"}, headers=auth_headers
    )
    assert reopened.status_code == 409

    cleared = await client.put(
        f"/api/staff/tasks/{task_id}", json={"status": None}, headers=auth_headers
    )
    assert cleared.status_code == 422
