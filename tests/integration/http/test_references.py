from __future__ import annotations

from uuid import uuid4


async def test_deleted_animal_renders_as_null(client, auth_headers, bessie):
    animal = (await client.post("/api/livestock", json=bessie, headers=auth_headers)).json()
    record = await client.post(
        "/api/health",
        json={
            "animalId": animal["id"],
            "checkupDate": "2024-04-10",
            "diagnosis": "Mastitis",
            "treatment": "Antibiotics",
            "vetName": "Dr. Ngugi",
        },
        headers=auth_headers,
    )
    assert record.status_code == 201
    assert record.json()["animalId"]["name"] == "Bessie"
    record_id = record.json()["id"]

    deleted = await client.delete(f"/api/livestock/{animal['id']}", headers=auth_headers)
    assert deleted.status_code == 200

    fetched = await client.get(f"/api/health/{record_id}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["animalId"] is None
    assert fetched.json()["diagnosis"] == "Mastitis"

    listed = await client.get("/api/health", headers=auth_headers)
    assert listed.status_code == 200
    assert listed.json()[0]["animalId"] is None


async def test_unknown_reference_is_accepted_on_write(client, auth_headers):
    response = await client.post(
        "/api/production",
        json={"animalId": str(uuid4()), "date": "2024-04-10", "productType": "Milk", "quantity": 9},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["animalId"] is None


async def test_breeding_expands_both_animals(client, auth_headers, bessie):
    cow = (await client.post("/api/livestock", json=bessie, headers=auth_headers)).json()
    bull = (
        await client.post(
            "/api/livestock",
            json={**bessie, "name": "Ferdinand", "gender": "Male", "breed": "Angus"},
            headers=auth_headers,
        )
    ).json()
    response = await client.post(
        "/api/breeding",
        json={
            "animalId": cow["id"],
            "partnerAnimalId": bull["id"],
            "breedingDate": "2024-01-15",
            "outcome": "Successful",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["animalId"]["name"] == "Bessie"
    assert body["partnerAnimalId"] == {
        "id": bull["id"],
        "name": "Ferdinand",
        "species": "Cattle",
        "breed": "Angus",
    }

    filtered = await client.get(
        "/api/breeding", params={"animalId": cow["id"]}, headers=auth_headers
    )
    assert len(filtered.json()) == 1
    assert (
        await client.get("/api/breeding", params={"animalId": bull["id"]}, headers=auth_headers)
    ).json() == []


async def test_task_expands_employee_and_animal(client, auth_headers, bessie):
    animal = (await client.post("/api/livestock", json=bessie, headers=auth_headers)).json()
    employee = (
        await client.post(
            "/api/staff/employees",
            json={
                "name": "Amina Otieno",
                "position": "Herdsman",
                "email": "AMINA@farm.example",
                "phone": "555-0110",
                "hireDate": "2022-06-01",
                "skills": [" Milking ", "Feeding", ""],
            },
            headers=auth_headers,
        )
    ).json()
    assert employee["email"] == "amina@farm.example"
    assert employee["skills"] == ["Milking", "Feeding"]
    assert employee["status"] == "Active"

    task = await client.post(
        "/api/staff/tasks",
        json={
            "title": "Milk Bessie",
            "assignedTo": employee["id"],
            "animalId": animal["id"],
            "taskType": "Milking",
            "dueDate": "2030-01-01T06:00:00Z",
        },
        headers=auth_headers,
    )
    assert task.status_code == 201
    body = task.json()
    assert body["assignedTo"] == {
        "id": employee["id"],
        "name": "Amina Otieno",
        "position": "Herdsman",
    }
    assert body["animalId"]["name"] == "Bessie"
    assert body["priority"] == "Medium"
    assert body["status"] == "Pending"

    await client.delete(f"/api/staff/employees/{employee['id']}", headers=auth_headers)
    [listed] = (await client.get("/api/staff/tasks", headers=auth_headers)).json()
    assert listed["assignedTo"] is None
    assert listed["animalId"]["name"] == "Bessie"
