from __future__ import annotations


async def test_status_is_public(client):
    response = await client.get("/api/status")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "message": "Livestock Management API is running!",
    }


async def test_signup_signin_and_me(client):
    signup = await client.post(
        "/api/auth/signup",
        json={
            "name": "Jane Farmer",
            "email": "Jane@Example.com",
            "password": "secret123",
            "phoneNumber": "555-0100",
        },
    )
    assert signup.status_code == 201
    body = signup.json()
    assert body["token"]
    assert body["user"]["email"] == "jane@example.com"
    assert body["user"]["phoneNumber"] == "555-0100"
    assert "password" not in body["user"]
    assert "hashedPassword" not in body["user"]

    signin = await client.post(
        "/api/auth/signin", json={"email": "jane@example.com", "password": "secret123"}
    )
    assert signin.status_code == 200
    token = signin.json()["token"]

    me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == body["user"]["id"]
    assert me.json()["name"] == "Jane Farmer"


async def test_signup_rejects_duplicate_email(client, sign_up):
    await sign_up(email="dup@example.com")
    response = await client.post(
        "/api/auth/signup",
        json={"name": "Again", "email": "DUP@example.com", "password": "secret123"},
    )
    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


async def test_signup_validates_password_length(client):
    response = await client.post(
        "/api/auth/signup",
        json={"name": "Short", "email": "short@example.com", "password": "123"},
    )
    assert response.status_code == 422
    fields = [item["field"] for item in response.json()["details"]["fields"]]
    assert fields == ["password"]


async def test_signin_failures_are_indistinguishable(client, sign_up):
    await sign_up(email="known@example.com")
    wrong_password = await client.post(
        "/api/auth/signin", json={"email": "known@example.com", "password": "nope-nope"}
    )
    unknown_email = await client.post(
        "/api/auth/signin", json={"email": "ghost@example.com", "password": "secret123"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["message"] == "Invalid credentials"


async def test_protected_routes_require_bearer_token(client):
    missing = await client.get("/api/livestock")
    assert missing.status_code == 401
    assert missing.json()["code"] == "auth_error"

    garbage = await client.get("/api/livestock", headers={"Authorization": "Bearer not-a-jwt"})
    assert garbage.status_code == 401

    wrong_scheme = await client.get("/api/livestock", headers={"Authorization": "Basic abc"})
    assert wrong_scheme.status_code == 401
