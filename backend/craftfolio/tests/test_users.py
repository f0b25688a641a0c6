"""
Tests for profile endpoints.
"""
from datetime import timedelta
from craftfolio.core.security import create_access_token


def test_get_me(client, auth_headers):
    response = client.get("/api/user/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "testuser"
    assert data["bio"] is None
    assert data["skills"] == []
    assert "hashed_password" not in data


def test_get_me_requires_token(client):
    assert client.get("/api/user/me").status_code == 401


def test_get_me_invalid_token(client):
    response = client.get("/api/user/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_get_me_expired_token(client, auth_headers):
    me = client.get("/api/user/me", headers=auth_headers).json()
    expired = create_access_token(
        {"sub": me["username"], "user_id": me["id"]},
        expires_delta=timedelta(minutes=-5)
    )
    response = client.get("/api/user/me", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 401


def test_update_only_bio(client, auth_headers):
    """A patch with only bio leaves the rest of the profile alone."""
    client.put(
        "/api/user/me",
        headers=auth_headers,
        json={"skills": ["python"], "location": "Lyon", "avatar": "https://img/a.png"}
    )
    before = client.get("/api/user/me", headers=auth_headers).json()

    response = client.put("/api/user/me", headers=auth_headers, json={"bio": "x"})
    assert response.status_code == 200
    after = response.json()

    assert after["bio"] == "x"
    assert after["skills"] == before["skills"] == ["python"]
    assert after["location"] == "Lyon"
    assert after["avatar"] == "https://img/a.png"
    assert after["email"] == before["email"]
    assert after["updated_at"] >= before["updated_at"]
    assert after["created_at"] == before["created_at"]


def test_update_clears_with_null(client, auth_headers):
    client.put("/api/user/me", headers=auth_headers, json={"bio": "hello", "location": "Paris"})
    after = client.put("/api/user/me", headers=auth_headers, json={"bio": None, "location": "  "}).json()
    assert after["bio"] is None
    assert after["location"] is None


def test_update_dedupes_skills(client, auth_headers):
    after = client.put(
        "/api/user/me",
        headers=auth_headers,
        json={"skills": ["go", "rust", "go", "Go"]}
    ).json()
    assert after["skills"] == ["go", "rust", "Go"]


def test_update_email_conflict(client, auth_headers, make_user):
    other = make_user("other", email="other@example.com")
    response = client.put("/api/user/me", headers=other, json={"email": "test@example.com"})
    assert response.status_code == 409
    assert client.get("/api/user/me", headers=other).json()["email"] == "other@example.com"


def test_username_is_not_patchable(client, auth_headers):
    after = client.put("/api/user/me", headers=auth_headers, json={"username": "renamed"}).json()
    assert after["username"] == "testuser"
