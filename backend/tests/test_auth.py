"""Integration tests for signup / login endpoints."""

from fastapi.testclient import TestClient


def _signup(client: TestClient, email: str, role: str = "student", **extra):
    payload = {"name": "Test User", "email": email, "password": "pwd1", "role": role}
    payload.update(extra)
    return client.post("/api/auth/signup", json=payload)


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_signup_student(client: TestClient, unique_email):
    email = unique_email("student")
    response = _signup(client, email)
    assert response.status_code == 201
    data = response.json()
    assert data["access_token"]
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == email
    assert data["user"]["role"] == "student"
    assert "password" not in data["user"]
    assert "createdAt" in data["user"]


def test_signup_legacy_user_role_becomes_student(client: TestClient, unique_email):
    response = _signup(client, unique_email(), role="user")
    assert response.status_code == 201
    assert response.json()["user"]["role"] == "student"


def test_signup_unknown_role_rejected(client: TestClient, unique_email):
    response = _signup(client, unique_email(), role="teacher")
    assert response.status_code == 422


def test_signup_missing_fields_rejected(client: TestClient):
    response = client.post("/api/auth/signup", json={"email": "x@ex.com"})
    assert response.status_code == 422


def test_signup_duplicate_email(client: TestClient, unique_email):
    email = unique_email()
    _signup(client, email)
    response = _signup(client, email)
    assert response.status_code == 409
    assert "already registered" in response.json()["detail"].lower()


def test_signup_admin_requires_key(client: TestClient, unique_email):
    response = _signup(client, unique_email("admin"), role="admin")
    assert response.status_code == 422


def test_login_student(client: TestClient, unique_email):
    email = unique_email()
    _signup(client, email)
    response = client.post("/api/auth/login", json={"email": email, "password": "pwd1"})
    assert response.status_code == 200
    assert response.json()["access_token"]


def test_login_wrong_password(client: TestClient, unique_email):
    email = unique_email()
    _signup(client, email)
    response = client.post("/api/auth/login", json={"email": email, "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_email(client: TestClient):
    response = client.post(
        "/api/auth/login",
        json={"email": "nonexistent@example.com", "password": "wrongpassword"},
    )
    assert response.status_code == 401


def test_admin_login_needs_matching_key(client: TestClient, unique_email):
    email = unique_email("admin")
    assert _signup(client, email, role="admin", adminKey="s3cret").status_code == 201

    no_key = client.post("/api/auth/login", json={"email": email, "password": "pwd1"})
    assert no_key.status_code == 401
    assert no_key.json()["detail"] == "Invalid admin key"

    wrong_key = client.post(
        "/api/auth/login",
        json={"email": email, "password": "pwd1", "adminKey": "guess"},
    )
    assert wrong_key.status_code == 401

    ok = client.post(
        "/api/auth/login",
        json={"email": email, "password": "pwd1", "adminKey": "s3cret"},
    )
    assert ok.status_code == 200
    assert ok.json()["user"]["role"] == "admin"


def test_me(client: TestClient, unique_email):
    email = unique_email()
    token = _signup(client, email).json()["access_token"]
    response = client.get("/api/auth/me", headers=_auth(token))
    assert response.status_code == 200
    assert response.json()["email"] == email


def test_me_without_token(client: TestClient):
    assert client.get("/api/auth/me").status_code == 401


def test_me_with_garbage_token(client: TestClient):
    response = client.get("/api/auth/me", headers=_auth("not-a-jwt"))
    assert response.status_code == 401


def test_list_users_admin_only(client: TestClient, unique_email):
    student_token = _signup(client, unique_email()).json()["access_token"]
    assert client.get("/api/auth/all", headers=_auth(student_token)).status_code == 403

    admin_token = _signup(
        client, unique_email("admin"), role="admin", adminKey="k"
    ).json()["access_token"]
    response = client.get("/api/auth/all", headers=_auth(admin_token))
    assert response.status_code == 200
    users = response.json()
    assert users
    assert all("password" not in u and "hashedPassword" not in u for u in users)
